from functools import lru_cache

from supabase import create_client, Client
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """สร้าง client ครั้งแรกที่ถูกเรียกใช้ แล้วใช้ตัวเดิมตลอดทั้ง process"""
    try:
        supabase: Client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        return supabase
    except Exception as e:
        logger.error(f"Error connecting to Supabase: {e}")
        raise
