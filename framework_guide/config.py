from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv(Path.cwd() / ".env")

# Relative to the working directory, never to the installed package.
DEFAULT_DATABASE_URL = "sqlite:///data/framework_guide.db"


@dataclass(frozen=True)
class AppConfig:
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))
    database_url: str = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


DEFAULT_APP_CONFIG = AppConfig()
