"""
File: kirimi/factory.py
Path: kirimi/factory.py

Project: Kirimi WhatsApp Client

Purpose:
- Provide a single place to construct the client and services from the environment
- Reuse a single KirimiClient instance (singleton-style)

Design rules:
- No business logic here
- Only construction / wiring
"""

from __future__ import annotations

from kirimi.client import KirimiClient
from kirimi.services import NotificationService, OTPService
from kirimi.settings import load_kirimi_settings


# -------------------------------------------------
# Kirimi client singleton
# -------------------------------------------------
_kirimi_client: KirimiClient | None = None


def get_kirimi_client() -> KirimiClient:
    global _kirimi_client
    if _kirimi_client is None:
        settings = load_kirimi_settings()
        _kirimi_client = KirimiClient.from_settings(settings)
    return _kirimi_client


def reset_kirimi_client() -> None:
    global _kirimi_client
    if _kirimi_client is not None:
        _kirimi_client.close()
    _kirimi_client = None


# -------------------------------------------------
# Services (bound to KIRIMI_DEVICE_ID)
# -------------------------------------------------
def get_otp_service() -> OTPService:
    device_id = load_kirimi_settings().require_device_id()
    return OTPService(get_kirimi_client(), device_id)


def get_notification_service() -> NotificationService:
    device_id = load_kirimi_settings().require_device_id()
    return NotificationService(get_kirimi_client(), device_id)
