"""
kirimi/settings.py
Kirimi WhatsApp Client
Client Settings

Purpose:
- Centralised Kirimi API configuration.
- Keep credentials out of code via environment variables.

Notes:
- Required for every call:
  - KIRIMI_USER_CODE
  - KIRIMI_SECRET_KEY
- Optional:
  - KIRIMI_ENDPOINT (defaults to https://api.kirimi.id)
  - KIRIMI_DEVICE_ID (only needed when building the OTP / notification services)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_ENDPOINT = "https://api.kirimi.id"


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(
            f"Missing required environment variable: {name}. "
            f"Set it in your .env / shell before running."
        )
    return value


def normalise_endpoint(endpoint: str) -> str:
    return endpoint.rstrip("/")


@dataclass(frozen=True)
class KirimiSettings:
    user_code: str
    secret: str
    endpoint: str = DEFAULT_ENDPOINT
    device_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoint", normalise_endpoint(self.endpoint))

    def require_device_id(self) -> str:
        if not self.device_id:
            raise RuntimeError(
                "Missing required environment variable: KIRIMI_DEVICE_ID. "
                "A device id is needed to build the OTP / notification services."
            )
        return self.device_id


def load_kirimi_settings() -> KirimiSettings:
    return KirimiSettings(
        user_code=_require_env("KIRIMI_USER_CODE"),
        secret=_require_env("KIRIMI_SECRET_KEY"),
        endpoint=os.getenv("KIRIMI_ENDPOINT", DEFAULT_ENDPOINT).strip() or DEFAULT_ENDPOINT,
        device_id=os.getenv("KIRIMI_DEVICE_ID", "").strip() or None,
    )
