# exceptions.py

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


class TokenFlowError(Exception):
    """Raised when a token flow cannot produce a token.

    Catch this to handle every failure of a flow in one place; the subclasses
    only tell why the flow was aborted.
    """

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(TokenFlowError):
    """The flow request is incomplete. No request was sent."""


class AuthenticationError(TokenFlowError):
    """XSUAA rejected the client credentials (HTTP 401)."""


class TransportError(TokenFlowError):
    """Unexpected HTTP status or network failure."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TokenFlowError):
    """The response body or the returned token could not be decoded."""
