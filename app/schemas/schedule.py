from pydantic import BaseModel
from typing import List, Optional, Union

# --- ข้อมูลครูที่แนบไปกับแต่ละตารางเรียน ---
class TeacherSummary(BaseModel):
    teacher_id: Union[int, str]
    name: Optional[str] = None
    email: Optional[str] = None

# --- Response Model สำหรับ API ---
class ClassScheduleResponse(BaseModel):
    success: bool
    message: str
    schedules: Optional[List[dict]] = None # ไม่มี key นี้ถ้าไม่พบตารางเรียน
