from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Class Schedule API"
    VERSION: str = "1.0.0"
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""

    # ชื่อตารางใน Supabase
    SCHEDULE_TABLE: str = "schedule"
    TEACHER_TABLE: str = "teacher"

    FRONTEND_URL: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
