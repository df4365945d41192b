"""
File: kirimi/services/notification_service.py
Path: kirimi/services/notification_service.py

Project: Kirimi WhatsApp Client

Purpose:
- Ready-made WhatsApp notification messages (welcome, order, invoice, reminder)
- Pass-through custom notifications with optional media

Design rules:
- Bound to a single sending device
- Never raises ApiError, always returns a ServiceResult
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from kirimi.client import KirimiClient
from kirimi.results import ServiceResult, run_enveloped
from kirimi.settings import DEFAULT_ENDPOINT

logger = logging.getLogger("kirimi.notification_service")


def format_welcome(user_name: str) -> str:
    return (
        f"Welcome {user_name}! 🎉\n\n"
        "Thank you for joining our service. We're excited to have you!"
    )


def format_order_confirmation(order_id: str, items: Iterable[str]) -> str:
    items_list = "\n".join(f"• {item}" for item in items)
    return (
        f"Order Confirmation #{order_id} ✅\n\n"
        f"Items:\n{items_list}\n\n"
        "Thank you for your order!"
    )


def format_invoice(invoice_number: str) -> str:
    return f"Invoice #{invoice_number} 📄\n\nPlease find your invoice document attached."


def format_appointment_reminder(appointment_date: str, appointment_time: str, location: str) -> str:
    return (
        "🗓️ Appointment Reminder\n\n"
        f"Date: {appointment_date}\n"
        f"Time: {appointment_time}\n"
        f"Location: {location}\n\n"
        "Please arrive 10 minutes early. Thank you!"
    )


class NotificationService:
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
    ) -> "NotificationService":
        return cls(KirimiClient(user_code, secret, endpoint), device_id)

    @property
    def client(self) -> KirimiClient:
        return self._client

    @property
    def device_id(self) -> str:
        return self._device_id

    def send_welcome_message(self, phone: str, user_name: str) -> ServiceResult:
        return self._send(
            phone,
            format_welcome(user_name),
            success_message="Welcome message sent successfully",
            failure_message="Failed to send welcome message",
        )

    def send_order_confirmation(self, phone: str, order_id: str, items: Iterable[str]) -> ServiceResult:
        return self._send(
            phone,
            format_order_confirmation(order_id, items),
            success_message="Order confirmation sent successfully",
            failure_message="Failed to send order confirmation",
        )

    def send_invoice_with_document(self, phone: str, invoice_number: str, document_url: str) -> ServiceResult:
        """Send an invoice notice with the invoice document attached as media."""
        return self._send(
            phone,
            format_invoice(invoice_number),
            media_url=document_url,
            success_message="Invoice sent successfully",
            failure_message="Failed to send invoice",
        )

    def send_appointment_reminder(
        self,
        phone: str,
        appointment_date: str,
        appointment_time: str,
        location: str,
    ) -> ServiceResult:
        return self._send(
            phone,
            format_appointment_reminder(appointment_date, appointment_time, location),
            success_message="Appointment reminder sent successfully",
            failure_message="Failed to send appointment reminder",
        )

    def send_custom_notification(
        self,
        phone: str,
        message: str,
        media_url: Optional[str] = None,
    ) -> ServiceResult:
        """Send `message` as-is."""
        return self._send(
            phone,
            message,
            media_url=media_url,
            success_message="Notification sent successfully",
            failure_message="Failed to send notification",
        )

    def _send(
        self,
        phone: str,
        text: str,
        *,
        success_message: str,
        failure_message: str,
        media_url: Optional[str] = None,
    ) -> ServiceResult:
        result = run_enveloped(
            lambda: self._client.send_message(self._device_id, phone, text, media_url),
            success_message=success_message,
            failure_message=failure_message,
        )
        if not result.success:
            logger.warning("%s to %s: %s", failure_message, phone, result.error)
        return result
