# kirimi/services/__init__.py
from .otp_service import OTPService
from .notification_service import NotificationService
