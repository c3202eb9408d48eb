from app.core.config import settings
from app.core.logging import get_logger
from app.db.errors import ScheduleStoreError, StoreErrorKind, classify_error
from app.db.supabase import get_supabase_client
from app.schemas.schedule import TeacherSummary

logger = get_logger(__name__)

TEACHER_FIELDS = "teacher_id, name, email"

class ScheduleRepository:
    def __init__(self, client=None, schedule_table: str = None, teacher_table: str = None):
        self._client = client
        self.schedule_table = schedule_table or settings.SCHEDULE_TABLE
        self.teacher_table = teacher_table or settings.TEACHER_TABLE

    @property
    def client(self):
        if self._client is None:
            try:
                self._client = get_supabase_client()
            except Exception as e:
                raise ScheduleStoreError(StoreErrorKind.STORE_UNAVAILABLE, str(e)) from e
        return self._client

    def find_by_class_id(self, class_id: str) -> list:
        """
        ดึงตารางเรียนทั้งหมดของ class_id แล้วแทน teacher_id ด้วยข้อมูลครู
        {teacher_id, name, email} (ไม่แก้ไขข้อมูลใน DB)
        """
        try:
            result = (
                self.client.table(self.schedule_table)
                .select("*")
                .eq("class_id", class_id)
                .execute()
            )
        except ScheduleStoreError:
            raise
        except Exception as e:
            raise ScheduleStoreError(classify_error(e), f"schedule query failed: {e}") from e

        schedules = result.data or []
        if not schedules:
            return []

        teacher_ids = [s.get("teacher_id") for s in schedules]
        teachers = self.fetch_teachers(teacher_ids)

        populated = []
        for row in schedules:
            item = dict(row)
            item["teacher_id"] = teachers.get(row.get("teacher_id"))
            populated.append(item)

        logger.debug(f"class {class_id}: {len(populated)} schedules, {len(teachers)} teachers")
        return populated

    def fetch_teachers(self, teacher_ids) -> dict:
        """คืนค่า Lookup Map: teacher_id -> {teacher_id, name, email}"""
        ids = list(dict.fromkeys(t for t in teacher_ids if t is not None))
        if not ids:
            return {}

        try:
            result = (
                self.client.table(self.teacher_table)
                .select(TEACHER_FIELDS)
                .in_("teacher_id", ids)
                .execute()
            )
        except ScheduleStoreError:
            raise
        except Exception as e:
            raise ScheduleStoreError(classify_error(e), f"teacher query failed: {e}") from e

        return {
            t["teacher_id"]: TeacherSummary(**t).model_dump()
            for t in (result.data or [])
        }


def get_schedule_repository() -> ScheduleRepository:
    return ScheduleRepository()
