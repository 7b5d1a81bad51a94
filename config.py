import os
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return None
    return float(value)


STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "")
AWS_REGION = os.getenv("AWS_REGION", "us-east-2")
PORT = int(os.getenv("PORT", "8080"))

STATS_API_BASE_URL = os.getenv("STATS_API_BASE_URL", "https://statsapi.web.nhl.com/api/v1")
# Unset means requests wait indefinitely
HTTP_TIMEOUT = _optional_float("HTTP_TIMEOUT")

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
