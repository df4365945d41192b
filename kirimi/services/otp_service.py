"""
File: kirimi/services/otp_service.py
Path: kirimi/services/otp_service.py

Project: Kirimi WhatsApp Client

Purpose:
- Send WhatsApp verification codes to a phone number
- Verify codes entered by the user

Design rules:
- Bound to a single sending device
- Never raises ApiError, always returns a ServiceResult
"""

from __future__ import annotations

import logging

from kirimi.client import KirimiClient
from kirimi.errors import ApiError
from kirimi.results import ServiceResult, run_enveloped
from kirimi.settings import DEFAULT_ENDPOINT

logger = logging.getLogger("kirimi.otp_service")


class OTPService:
    def __init__(self, client: KirimiClient, device_id: str) -> None:
        self._client = client
        self._device_id = device_id

    @classmethod
    def from_credentials(
        cls,
        user_code: str,
        secret: str,
        device_id: str,
        endpoint: str = DEFAULT_ENDPOINT,
    ) -> "OTPService":
        return cls(KirimiClient(user_code, secret, endpoint), device_id)

    @property
    def client(self) -> KirimiClient:
        return self._client

    @property
    def device_id(self) -> str:
        return self._device_id

    def send_verification_code(self, phone: str) -> ServiceResult:
        result = run_enveloped(
            lambda: self._client.generate_otp(self._device_id, phone),
            success_message=f"OTP sent to {phone}",
            failure_message="Failed to send OTP",
        )
        if not result.success:
            logger.warning("OTP send to %s failed: %s", phone, result.error)
        return result

    def verify_code(self, phone: str, code: str) -> ServiceResult:
        """
        Verify `code` for `phone`.

        success tells whether the API call went through; verified carries the
        remote verdict on the code itself. A successful call may still report
        verified=False.
        """
        try:
            data = self._client.validate_otp(self._device_id, phone, code)
        except ApiError as e:
            logger.warning("OTP verification for %s failed: %s", phone, e.message)
            return ServiceResult.failed(e, "Failed to verify OTP", verified=False)

        verified = data.get("verified") if isinstance(data, dict) else None
        return ServiceResult.ok(
            data,
            "OTP verified successfully",
            verified=verified if verified is not None else False,
        )
