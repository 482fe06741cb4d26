# backoffice/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()  # Load variables from .env if present


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# In-memory SQLite unless told otherwise; all records are lost on restart
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")
SQL_ECHO = _flag("SQL_ECHO")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]

SEED_SAMPLE_DATA = _flag("SEED_SAMPLE_DATA")
