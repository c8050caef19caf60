"""
Potluck backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Potluck API"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: list[str]

    # Storage: "file" | "mongo"
    POTLUCK_STORAGE: Literal["file", "mongo"] = "file"
    POTLUCK_DATA_DIR: Path

    # MongoDB (only read when POTLUCK_STORAGE=mongo)
    MONGO_URL: str = ""
    MONGO_DB: str = "potluck"
    MONGO_COLLECTION: str = "items"
    MONGO_TRANSACTIONS: bool = True

    def __init__(self):
        self.HOST = (os.environ.get("HOST") or "0.0.0.0").strip()
        self.PORT = int(os.environ.get("PORT") or 8080)
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        origins = os.environ.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.POTLUCK_STORAGE = (os.environ.get("POTLUCK_STORAGE") or "file").strip().lower()
        if self.POTLUCK_STORAGE not in ("file", "mongo"):
            self.POTLUCK_STORAGE = "file"
        self.POTLUCK_DATA_DIR = Path(os.environ.get("POTLUCK_DATA_DIR", "data"))
        self.MONGO_URL = (os.environ.get("MONGO_URL") or "").strip()
        self.MONGO_DB = (os.environ.get("MONGO_DB") or "potluck").strip()
        self.MONGO_COLLECTION = (os.environ.get("MONGO_COLLECTION") or "items").strip()
        self.MONGO_TRANSACTIONS = _flag(os.environ.get("MONGO_TRANSACTIONS", "true"))

    @property
    def items_file(self) -> Path:
        """JSON array file used when POTLUCK_STORAGE=file."""
        return self.POTLUCK_DATA_DIR / "items.json"
