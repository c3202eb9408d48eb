from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.core.logging import get_logger
from app.db.errors import ScheduleStoreError
from app.db.repository import ScheduleRepository, get_schedule_repository
from app.schemas.schedule import ClassScheduleResponse

router = APIRouter()
logger = get_logger(__name__)

NO_SCHEDULES_MESSAGE = "No schedules found!"
RETRIEVED_MESSAGE = "Class schedule retrieved successfully!"
SERVER_ERROR_MESSAGE = "Internal Server Error."

@router.get(
    "/classes/{class_id}/schedule",
    response_model=ClassScheduleResponse,
    response_model_exclude_unset=True,
)
def get_class_schedule(class_id: str, repo: ScheduleRepository = Depends(get_schedule_repository)):
    try:
        schedules = repo.find_by_class_id(class_id)

        if len(schedules) == 0:
            return ClassScheduleResponse(success=True, message=NO_SCHEDULES_MESSAGE)

        return ClassScheduleResponse(
            success=True,
            message=RETRIEVED_MESSAGE,
            schedules=schedules
        )

    except ScheduleStoreError as e:
        logger.exception(f"Schedule lookup failed for class {class_id} ({e.kind.value}): {e.message}")
    except Exception as e:
        logger.exception(f"Unexpected error for class {class_id}: {e}")

    # ไม่ส่งรายละเอียด error กลับไปให้ client
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": SERVER_ERROR_MESSAGE}
    )
