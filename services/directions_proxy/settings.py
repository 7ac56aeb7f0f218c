"""Directions proxy configuration, read once at startup."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DIRECTIONS_BASE_URL = (
    "https://naveropenapi.apigw.ntruss.com/map-direction/v1/driving"
)


@dataclass
class ProxySettings:
    """Runtime settings for the directions proxy."""

    client_id: str | None
    client_secret: str | None
    base_url: str
    timeout_sec: float
    host: str
    port: int
    log_level: str


def load_settings() -> ProxySettings:
    load_dotenv()
    return ProxySettings(
        client_id=_first_env("NAVER_CLIENT_ID", "VITE_NAVER_CLIENT_ID"),
        client_secret=_first_env("NAVER_CLIENT_SECRET", "VITE_NAVER_CLIENT_SECRET"),
        base_url=os.environ.get("DIRECTIONS_BASE_URL", DEFAULT_DIRECTIONS_BASE_URL),
        timeout_sec=float(os.environ.get("DIRECTIONS_TIMEOUT_SEC", "10")),
        host=os.environ.get("PROXY_HOST", "0.0.0.0"),
        port=int(os.environ.get("PROXY_PORT", "5000")),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )


def _first_env(*names: str) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None
