import os
from dataclasses import dataclass

DEFAULT_UPSTREAM_URL = "https://transmart.qq.com/api/imt"


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    upstream_url: str = DEFAULT_UPSTREAM_URL
    upstream_timeout: float | None = None
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def get_settings() -> Settings:
    return Settings(
        upstream_url=os.getenv("TRANSRELAY_UPSTREAM_URL", DEFAULT_UPSTREAM_URL),
        upstream_timeout=_optional_float(os.getenv("TRANSRELAY_UPSTREAM_TIMEOUT")),
        log_level=os.getenv("TRANSRELAY_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("TRANSRELAY_HOST", "127.0.0.1"),
        port=int(os.getenv("TRANSRELAY_PORT", "8000")),
    )
