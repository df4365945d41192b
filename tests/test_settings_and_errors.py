"""
Tests for KirimiSettings, load_kirimi_settings and ApiError.
"""
import dataclasses

import pytest

from kirimi.errors import ApiError
from kirimi.settings import DEFAULT_ENDPOINT, KirimiSettings, load_kirimi_settings


class TestApiError:

    @pytest.mark.unit
    def test_defaults(self):
        err = ApiError("boom")
        assert err.message == "boom"
        assert err.code == 0
        assert isinstance(err, RuntimeError)

    @pytest.mark.unit
    def test_string_rendering(self):
        assert str(ApiError("Failed to send message")) == "ApiError: [0]: Failed to send message"
        assert str(ApiError("Invalid secret", 401)) == "ApiError: [401]: Invalid secret"


class TestKirimiSettings:

    @pytest.mark.unit
    def test_endpoint_normalised(self):
        settings = KirimiSettings(user_code="uc", secret="sk", endpoint="https://api.kirimi.id/")
        assert settings.endpoint == "https://api.kirimi.id"

    @pytest.mark.unit
    def test_frozen(self):
        settings = KirimiSettings(user_code="uc", secret="sk")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.secret = "other"

    @pytest.mark.unit
    def test_require_device_id(self):
        assert KirimiSettings("uc", "sk", device_id="d1").require_device_id() == "d1"
        with pytest.raises(RuntimeError, match="KIRIMI_DEVICE_ID"):
            KirimiSettings("uc", "sk").require_device_id()


class TestLoadSettings:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("KIRIMI_USER_CODE", "KIRIMI_SECRET_KEY", "KIRIMI_ENDPOINT", "KIRIMI_DEVICE_ID"):
            monkeypatch.delenv(name, raising=False)

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("KIRIMI_USER_CODE", "uc")
        monkeypatch.setenv("KIRIMI_SECRET_KEY", "sk")
        monkeypatch.setenv("KIRIMI_ENDPOINT", "https://staging.kirimi.id/")
        monkeypatch.setenv("KIRIMI_DEVICE_ID", "d1")

        settings = load_kirimi_settings()

        assert settings == KirimiSettings("uc", "sk", "https://staging.kirimi.id", "d1")

    @pytest.mark.unit
    def test_optional_values_default(self, monkeypatch):
        monkeypatch.setenv("KIRIMI_USER_CODE", "uc")
        monkeypatch.setenv("KIRIMI_SECRET_KEY", "sk")

        settings = load_kirimi_settings()

        assert settings.endpoint == DEFAULT_ENDPOINT
        assert settings.device_id is None

    @pytest.mark.unit
    def test_missing_secret(self, monkeypatch):
        monkeypatch.setenv("KIRIMI_USER_CODE", "uc")

        with pytest.raises(RuntimeError, match="KIRIMI_SECRET_KEY"):
            load_kirimi_settings()
