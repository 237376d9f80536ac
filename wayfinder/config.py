from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    title: str = "Destination Recommendation API"
    version: str = "1.0.0"
    session_secret: str = os.getenv("SESSION_SECRET", "wayfinder-secret-change-in-production")
    host: str = os.getenv("WAYFINDER_HOST", "127.0.0.1")
    port: int = int(os.getenv("WAYFINDER_PORT", "8000"))


DEFAULT_APP_CONFIG = AppConfig()
