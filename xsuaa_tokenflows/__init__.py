# __init__.py

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

from .decoder import Jwt, TokenDecoder
from .exceptions import (
    AuthenticationError,
    DecodeError,
    TokenFlowError,
    TransportError,
    ValidationError
)
from .factory import TokenFlows
from .flows import (
    PUBLIC_CLIENT_BODY,
    PUBLIC_CLIENT_QUERY,
    ClientCredentialsTokenFlow,
    RefreshTokenFlow,
    UserTokenFlow,
    execute_flow
)
from .request import TokenFlowRequest
from .transport import DEFAULT_TIMEOUT, HttpResponse, RequestsTransport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TokenFlows",
    "ClientCredentialsTokenFlow",
    "RefreshTokenFlow",
    "UserTokenFlow",
    "TokenFlowRequest",
    "execute_flow",
    "PUBLIC_CLIENT_QUERY",
    "PUBLIC_CLIENT_BODY",
    "RequestsTransport",
    "HttpResponse",
    "DEFAULT_TIMEOUT",
    "TokenDecoder",
    "Jwt",
    "TokenFlowError",
    "ValidationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError"
]
