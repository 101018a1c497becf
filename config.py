# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO"))

# 外部IdPが署名したアサーション (HS256)
IDENTITY_JWT_SECRET = os.getenv("IDENTITY_JWT_SECRET")
IDENTITY_JWT_ALGORITHM = "HS256"
IDENTITY_JWT_AUDIENCE = os.getenv("IDENTITY_JWT_AUDIENCE") or None

# water_frequency 未指定時に使う値（ランダムにはしない）
DEFAULT_WATER_FREQUENCY = int(os.getenv("DEFAULT_WATER_FREQUENCY", "1"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
