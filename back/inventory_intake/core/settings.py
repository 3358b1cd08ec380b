from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Inventory intake"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str | None = None
    LOG_JSON: bool | None = None
    CORS_ORIGINS: List[str] = ["http://localhost:4200"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
