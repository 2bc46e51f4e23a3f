from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Posyandu Classification API"
    API_V1_STR: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    # Fractional month length used for table lookups
    DAYS_PER_MONTH: float = 30.44

    class Config:
        env_file = ".env"

settings = Settings()
