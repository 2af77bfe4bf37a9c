"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Message storage: "memory" (process-local) or "prisma" (PostgreSQL)
    MESSAGE_STORE: str = os.getenv("MESSAGE_STORE", "memory").lower()

    # Postgresql Database settings (read by Prisma through schema.prisma)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str = os.getenv("LOG_PATH", "")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # HTTP
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
