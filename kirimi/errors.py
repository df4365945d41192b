"""
File: kirimi/errors.py

Project: Kirimi WhatsApp Client

Purpose:
Single error type raised by KirimiClient.
Carries the remote (or transport) error message and an optional numeric code.
"""

from __future__ import annotations


class ApiError(RuntimeError):
    def __init__(self, message: str = "", code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{type(self).__name__}: [{self.code}]: {self.message}"
