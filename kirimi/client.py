"""
File: kirimi/client.py
Path: kirimi/client.py

Project: Kirimi WhatsApp Client

Purpose:
Kirimi WhatsApp API client.
Supports:
- Text / media messages (POST /v1/send-message)
- OTP generation and validation (POST /v1/generate-otp, /v1/validate-otp)
- Health check (GET /)

Design rules:
- Every failure surfaces as ApiError (never a partial result)
- One request per call, no retries
- Inputs are not validated locally, the remote API decides
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from kirimi.errors import ApiError
from kirimi.settings import DEFAULT_ENDPOINT, KirimiSettings, normalise_endpoint

logger = logging.getLogger("kirimi.client")

DEFAULT_TIMEOUT = 30

_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _extract_error_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None

    if isinstance(body, dict) and body.get("message") is not None:
        return str(body["message"])
    return None


def _decode_body(response: requests.Response) -> Any:
    # an empty or non-JSON 2xx body decodes to None
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class KirimiClient:
    def __init__(
        self,
        user_code: str,
        secret: str,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._user_code = user_code
        self._secret = secret
        self._endpoint = normalise_endpoint(endpoint)
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    @classmethod
    def from_settings(
        cls,
        settings: KirimiSettings,
        session: Optional[requests.Session] = None,
    ) -> "KirimiClient":
        return cls(
            settings.user_code,
            settings.secret,
            settings.endpoint,
            session=session,
        )

    @property
    def user_code(self) -> str:
        return self._user_code

    @property
    def endpoint(self) -> str:
        return self._endpoint

    # ---------------------------------------------------------
    # MESSAGES
    # ---------------------------------------------------------
    def send_message(
        self,
        device_id: str,
        receiver: str,
        message: str,
        media_url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send a WhatsApp message, optionally with a media attachment.

        media_url is left out of the payload entirely when not given.
        Returns the `data` object of the API response.
        """
        payload: Dict[str, Any] = {
            "user_code": self._user_code,
            "device_id": device_id,
            "receiver": receiver,
            "message": message,
            "secret": self._secret,
        }

        if media_url is not None:
            payload["media_url"] = media_url

        logger.debug("Sending message to %s via device %s", receiver, device_id)
        return self._post(
            "/v1/send-message",
            payload,
            failure_prefix="Send message failed",
            fallback_message="Failed to send message",
        )

    # ---------------------------------------------------------
    # OTP
    # ---------------------------------------------------------
    def generate_otp(self, device_id: str, phone: str) -> Dict[str, Any]:
        payload = {
            "user_code": self._user_code,
            "device_id": device_id,
            "phone": phone,
            "secret": self._secret,
        }

        logger.debug("Generating OTP for %s via device %s", phone, device_id)
        return self._post(
            "/v1/generate-otp",
            payload,
            failure_prefix="Generate OTP failed",
            fallback_message="Failed to generate OTP",
        )

    def validate_otp(self, device_id: str, phone: str, otp: str) -> Dict[str, Any]:
        """
        Validate an OTP previously sent to `phone`.
        The returned data usually carries a `verified` flag.
        """
        payload = {
            "user_code": self._user_code,
            "device_id": device_id,
            "phone": phone,
            "otp": otp,
            "secret": self._secret,
        }

        logger.debug("Validating OTP for %s via device %s", phone, device_id)
        return self._post(
            "/v1/validate-otp",
            payload,
            failure_prefix="Validate OTP failed",
            fallback_message="Failed to validate OTP",
        )

    # ---------------------------------------------------------
    # HEALTH
    # ---------------------------------------------------------
    def health_check(self) -> Dict[str, Any]:
        """Return the raw body of GET / (empty dict when there is none)."""
        try:
            resp = self._session.get(
                f"{self._endpoint}/",
                headers=_HEADERS,
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise self._transport_error(e, "Health check failed") from e

        body = _decode_body(resp)
        return body if body is not None else {}

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------
    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "KirimiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------------------------------------------------------
    # Internal
    # ---------------------------------------------------------
    def _post(
        self,
        path: str,
        payload: Dict[str, Any],
        *,
        failure_prefix: str,
        fallback_message: str,
    ) -> Dict[str, Any]:
        try:
            resp = self._session.post(
                f"{self._endpoint}{path}",
                json=payload,
                headers=_HEADERS,
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise self._transport_error(e, failure_prefix) from e

        body = _decode_body(resp)
        if not isinstance(body, dict) or not body.get("success"):
            remote_message = body.get("message") if isinstance(body, dict) else None
            message = remote_message if remote_message is not None else fallback_message
            logger.warning("Kirimi rejected %s: %s", path, message)
            raise ApiError(message)

        data = body.get("data")
        return data if data is not None else {}

    def _transport_error(self, error: requests.RequestException, failure_prefix: str) -> ApiError:
        response = error.response
        if response is not None:
            detail = _extract_error_message(response)
            if detail is None:
                detail = str(error)
            logger.error("%s (HTTP %s): %s", failure_prefix, response.status_code, detail)
            return ApiError(f"{failure_prefix}: {detail}", code=response.status_code)

        logger.error("HTTP request to Kirimi failed: %s", error)
        return ApiError(f"HTTP request failed: {error}")
