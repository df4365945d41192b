"""
Kirimi WhatsApp Client

Python client for the Kirimi WhatsApp API (https://api.kirimi.id):
messages, OTP verification and ready-made notifications.
"""

from .client import KirimiClient
from .errors import ApiError
from .results import ServiceResult
from .services import NotificationService, OTPService
from .settings import DEFAULT_ENDPOINT, KirimiSettings, load_kirimi_settings

__version__ = "1.0.0"

# HTTP facade is optional (requires the "server" extra)
# from .routes import router
