"""
Kirimi WhatsApp Client
Service result envelope

The OTP and notification services never raise. Every call returns a
ServiceResult, which renders to the uniform dict shape:

    {"success": ..., "message": ..., "data": ..., "error": ..., "verified": ...}

Keys without a value (data / error / verified) are left out of the dict.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from kirimi.errors import ApiError


@dataclass(frozen=True)
class ServiceResult:
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    verified: Optional[bool] = None

    @staticmethod
    def ok(data: Dict[str, Any], message: str, verified: Optional[bool] = None) -> "ServiceResult":
        return ServiceResult(success=True, message=message, data=data, verified=verified)

    @staticmethod
    def failed(error: ApiError, message: str, verified: Optional[bool] = None) -> "ServiceResult":
        return ServiceResult(success=False, message=message, error=error.message, verified=verified)

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success}
        if self.verified is not None:
            out["verified"] = self.verified
        if self.data is not None:
            out["data"] = self.data
        if self.error is not None:
            out["error"] = self.error
        out["message"] = self.message
        return out


def run_enveloped(
    call: Callable[[], Dict[str, Any]],
    *,
    success_message: str,
    failure_message: str,
) -> ServiceResult:
    """Run a client call and flatten its outcome (data or ApiError) into a ServiceResult."""
    try:
        data = call()
    except ApiError as e:
        return ServiceResult.failed(e, failure_message)
    return ServiceResult.ok(data, success_message)
