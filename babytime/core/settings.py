"""App settings — loaded from environment variables with defaults."""

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]
    CORS_EXTRA_ORIGINS: str = os.getenv("CORS_EXTRA_ORIGINS", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Calendar used for "today" and bedtime when the caller does not send `now`
    DAY_TIMEZONE: str = os.getenv("DAY_TIMEZONE", "UTC")

    DEFAULT_BEDTIME_HOUR: int = int(os.getenv("DEFAULT_BEDTIME_HOUR", "19"))
    DEFAULT_BEDTIME_MINUTE: int = int(os.getenv("DEFAULT_BEDTIME_MINUTE", "0"))


settings = Settings()
