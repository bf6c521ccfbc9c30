"""Application settings and environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_DATABASE: str = os.getenv("DB_NAME", "inventory_management")
    DB_USER: str = os.getenv("DB_USER", "root")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Timestamps are stored in server time and shown in this zone
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "Europe/Berlin")

    TOP_SUPPLIERS_LIMIT: int = int(os.getenv("TOP_SUPPLIERS_LIMIT", "5"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")


settings = Settings()


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection parameters handed to the connection provider once at startup."""

    host: str
    port: int
    database: str
    user: str
    password: str

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "DatabaseConfig":
        return cls(
            host=source.DB_HOST,
            port=source.DB_PORT,
            database=source.DB_DATABASE,
            user=source.DB_USER,
            password=source.DB_PASSWORD,
        )

    def __repr__(self) -> str:
        return f"DatabaseConfig(host={self.host!r}, port={self.port}, database={self.database!r}, user={self.user!r})"
