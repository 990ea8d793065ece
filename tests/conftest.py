import json
from types import SimpleNamespace

import jwt
import pytest

from xsuaa_tokenflows import HttpResponse, TokenFlows

BASE_URI = "http://base/"
TOKEN_ENDPOINT = "http://base/oauth/token"
KEY_SET_ENDPOINT = "http://base/token_keys"


class FakeTransport:
    """Records every call and answers with a canned response."""

    def __init__(self, status_code=200, body=None):
        if body is None:
            body = json.dumps({"access_token": "abc.def.ghi"})
        self.response = HttpResponse(status_code, {"Content-Type": "application/json"}, body)
        self.calls = []

    def respond(self, status_code, body=""):
        self.response = HttpResponse(status_code, {}, body)

    def post(self, uri, headers, body=None):
        self.calls.append(SimpleNamespace(method="POST", uri=uri, headers=headers, body=body))
        return self.response


class FakeDecoder:
    def __init__(self):
        self.calls = []
        self.result = object()

    def decode(self, token, key_set_location=None):
        self.calls.append((token, key_set_location))
        return self.result


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def decoder():
    return FakeDecoder()


@pytest.fixture
def flows(transport, decoder):
    return TokenFlows(transport, decoder)


@pytest.fixture
def make_token():
    def _make(claims=None, headers=None):
        payload = {"sub": "user-1", "iat": 1700000000, "exp": 1700003600, "scope": ["read", "write"]}
        payload.update(claims or {})
        return jwt.encode(payload, "test-secret", algorithm="HS256", headers=headers)

    return _make
