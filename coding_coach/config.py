from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash"

    REQUEST_TIMEOUT_SECONDS: float = 50.0
    MAX_RETRIES: int = 2
    RETRY_BASE_DELAY_SECONDS: float = 1.0

    MAX_CONTENT_LENGTH: int = 100_000
    RATE_LIMIT: str = "10/minute"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    model_config = SettingsConfigDict(env_file=".env")
