"""
File: kirimi/routes.py

Project: Kirimi WhatsApp Client

Purpose:
Optional HTTP facade over the client and services, for processes that
would rather call a local endpoint than embed the library.

Endpoints:
- GET  /kirimi/health
- POST /kirimi/otp/send               {"phone"}
- POST /kirimi/otp/verify             {"phone", "code"}
- POST /kirimi/notifications/custom   {"phone", "message", "media_url"?}

Design rules:
- Thin: parse body, delegate to a service, map the envelope to a status code
- 200 on success, 502 when Kirimi failed, 400 on missing fields
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from kirimi.client import KirimiClient
from kirimi.errors import ApiError
from kirimi.factory import get_kirimi_client, get_notification_service, get_otp_service
from kirimi.results import ServiceResult
from kirimi.services import NotificationService, OTPService

router = APIRouter(prefix="/kirimi", tags=["kirimi"])


async def _read_payload(request: Request) -> Dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def _field(payload: Dict[str, Any], name: str) -> str:
    return str(payload.get(name) or "").strip()


def _missing(name: str) -> JSONResponse:
    return JSONResponse({"ok": False, "error": f"Missing '{name}'"}, status_code=400)


def _envelope_response(result: ServiceResult) -> JSONResponse:
    status = 200 if result.success else 502
    return JSONResponse(result.as_dict(), status_code=status)


# -------------------------------------------------------------------
# Health
# -------------------------------------------------------------------
@router.get("/health")
def health(client: KirimiClient = Depends(get_kirimi_client)):
    try:
        return {"ok": True, "kirimi": client.health_check()}
    except ApiError as e:
        return JSONResponse({"ok": False, "error": e.message}, status_code=502)


# -------------------------------------------------------------------
# OTP
# -------------------------------------------------------------------
@router.post("/otp/send")
async def send_otp(
    request: Request,
    service: OTPService = Depends(get_otp_service),
):
    payload = await _read_payload(request)
    phone = _field(payload, "phone")
    if not phone:
        return _missing("phone")

    result = await run_in_threadpool(service.send_verification_code, phone)
    return _envelope_response(result)


@router.post("/otp/verify")
async def verify_otp(
    request: Request,
    service: OTPService = Depends(get_otp_service),
):
    payload = await _read_payload(request)
    phone = _field(payload, "phone")
    code = _field(payload, "code")
    if not phone:
        return _missing("phone")
    if not code:
        return _missing("code")

    result = await run_in_threadpool(service.verify_code, phone, code)
    return _envelope_response(result)


# -------------------------------------------------------------------
# Notifications
# -------------------------------------------------------------------
@router.post("/notifications/custom")
async def send_custom_notification(
    request: Request,
    service: NotificationService = Depends(get_notification_service),
):
    payload = await _read_payload(request)
    phone = _field(payload, "phone")
    message = payload.get("message") or ""
    media_url = _field(payload, "media_url") or None
    if not phone:
        return _missing("phone")
    if not message:
        return _missing("message")

    result = await run_in_threadpool(
        service.send_custom_notification, phone, str(message), media_url
    )
    return _envelope_response(result)
