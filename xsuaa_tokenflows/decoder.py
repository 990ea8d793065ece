# decoder.py

"""
XsuaaTokenFlows - OAuth 2.0 Token Flows Client

Copyright 2025 Tomasz Kuczyński (https://github.com/docentt)

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at:

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import jwt

from .exceptions import DecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Jwt:
    token_value: str
    headers: dict = field(default_factory=dict)
    claims: dict = field(default_factory=dict)
    issued_at: datetime = None
    expires_at: datetime = None
    key_set_url: str = None

    @property
    def subject(self):
        return self.claims.get("sub")

    @property
    def client_id(self):
        return self.claims.get("client_id") or self.claims.get("cid")

    @property
    def scopes(self):
        scope = self.claims.get("scope", [])
        if isinstance(scope, str):
            return scope.split()
        return list(scope)

    def __str__(self):
        return self.token_value


def _instant(claims, name):
    value = claims.get(name)
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise DecodeError(f"Invalid '{name}' claim in token: {value!r}") from e


class TokenDecoder:
    """Decodes compact JWTs into Jwt objects without verifying them.

    Signature verification is left to whoever receives the token; the key set
    location is only handed on with the decoded Jwt. A per-call location does
    not replace the configured default.
    """

    def __init__(self, key_set_location=None):
        self.key_set_location = key_set_location

    def set_key_set_location(self, uri):
        self.key_set_location = uri

    def decode(self, token, key_set_location=None):
        if key_set_location is None:
            key_set_location = self.key_set_location
        try:
            headers = jwt.get_unverified_header(token)
            claims = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            logger.warning("Failed to decode JWT: %s", e)
            raise DecodeError(f"Error decoding JWT token: {e}") from e
        return Jwt(
            token_value=token,
            headers=headers,
            claims=claims,
            issued_at=_instant(claims, "iat"),
            expires_at=_instant(claims, "exp"),
            key_set_url=key_set_location,
        )
