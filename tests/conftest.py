"""
Pytest configuration and shared fixtures for the Kirimi client tests.

HTTP traffic never leaves the process: the client is given a mocked
requests.Session whose get/post return hand-built requests.Response objects.
"""
import json
from http import HTTPStatus
from unittest.mock import MagicMock

import pytest
import requests

from kirimi.client import KirimiClient

USER_CODE = "test_user_code"
SECRET = "test_secret_key"

_NO_BODY = object()


def _make_response(status_code=200, body=_NO_BODY, *, raw=None, url="https://api.kirimi.id/"):
    """Build a real requests.Response carrying `body` as JSON (or `raw` bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = HTTPStatus(status_code).phrase
    resp.url = url
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw
    elif body is _NO_BODY:
        resp._content = b""
    else:
        resp._content = json.dumps(body).encode("utf-8")
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return KirimiClient(USER_CODE, SECRET, session=session)


@pytest.fixture
def make_response():
    return _make_response
