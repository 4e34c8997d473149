import os
from typing import List

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
)


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    # Comma separated list, e.g. "https://example.com,http://localhost:5173"
    CORS_ORIGINS = _split_origins(
        os.environ.get("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    DEBUG = os.environ.get("DEBUG", "0").lower() in ("1", "true", "yes")


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
