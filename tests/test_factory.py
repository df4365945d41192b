"""
Tests for the environment-driven factory (shared client + services).
"""
import pytest

from kirimi import factory
from kirimi.services import NotificationService, OTPService


@pytest.fixture(autouse=True)
def kirimi_env(monkeypatch):
    monkeypatch.setenv("KIRIMI_USER_CODE", "uc")
    monkeypatch.setenv("KIRIMI_SECRET_KEY", "sk")
    monkeypatch.setenv("KIRIMI_DEVICE_ID", "d1")
    monkeypatch.delenv("KIRIMI_ENDPOINT", raising=False)
    factory.reset_kirimi_client()
    yield
    factory.reset_kirimi_client()


@pytest.mark.unit
def test_client_is_shared():
    first = factory.get_kirimi_client()
    assert factory.get_kirimi_client() is first
    assert first.user_code == "uc"
    assert first.endpoint == "https://api.kirimi.id"


@pytest.mark.unit
def test_reset_builds_new_client():
    first = factory.get_kirimi_client()
    factory.reset_kirimi_client()
    assert factory.get_kirimi_client() is not first


@pytest.mark.unit
def test_services_bound_to_device_and_shared_client():
    otp = factory.get_otp_service()
    notifications = factory.get_notification_service()

    assert isinstance(otp, OTPService)
    assert isinstance(notifications, NotificationService)
    assert otp.device_id == notifications.device_id == "d1"
    assert otp.client is notifications.client is factory.get_kirimi_client()


@pytest.mark.unit
def test_services_require_device_id(monkeypatch):
    monkeypatch.delenv("KIRIMI_DEVICE_ID")

    with pytest.raises(RuntimeError, match="KIRIMI_DEVICE_ID"):
        factory.get_otp_service()
