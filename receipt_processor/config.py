"""
Application settings.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Receipt Processor"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Environment
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Reject receipts whose purchaseDate/purchaseTime cannot be parsed
    # instead of scoring them as if the date/time bonus did not apply.
    STRICT_PURCHASE_DATETIME: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
