# factory.py

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

from .flows import (
    PUBLIC_CLIENT_BODY,
    PUBLIC_CLIENT_QUERY,
    ClientCredentialsTokenFlow,
    RefreshTokenFlow,
    UserTokenFlow,
)
from .request import TokenFlowRequest
from .utils import derive_endpoints

logger = logging.getLogger(__name__)


def _endpoints(uri, authorize_uri, key_set_uri):
    if authorize_uri is None and key_set_uri is None:
        return derive_endpoints(uri)
    if uri is None:
        raise ValueError("Token endpoint URI must not be None.")
    if authorize_uri is None:
        raise ValueError("Authorize endpoint URI must not be None.")
    if key_set_uri is None:
        raise ValueError("Key set endpoint URI must not be None.")
    return str(uri), str(authorize_uri), str(key_set_uri)


class TokenFlows:
    """Entry point for creating XSUAA token flows.

    Pass either the XSUAA base URI, from which the token, authorize and key set
    endpoints are derived, or all three endpoint URIs explicitly.

        flows = TokenFlows(RequestsTransport(), TokenDecoder())
        jwt = flows.client_credentials_token_flow("https://tenant.authentication.example.com") \\
            .client(client_id).secret(client_secret).execute()

    The transport and decoder are shared by every flow created here.
    """

    def __init__(self, transport, decoder, public_client_credentials=None):
        if transport is None:
            raise ValueError("Transport must not be None.")
        if decoder is None:
            raise ValueError("TokenDecoder must not be None.")
        if public_client_credentials not in (None, PUBLIC_CLIENT_QUERY, PUBLIC_CLIENT_BODY):
            raise ValueError(f"Unsupported public_client_credentials: {public_client_credentials!r}")
        self.transport = transport
        self.decoder = decoder
        self.public_client_credentials = public_client_credentials

    def _request(self, uri, authorize_uri, key_set_uri):
        token_endpoint, authorize_endpoint, key_set_endpoint = _endpoints(uri, authorize_uri, key_set_uri)
        logger.debug("Creating token flow for %s", token_endpoint)
        return TokenFlowRequest(token_endpoint, authorize_endpoint, key_set_endpoint)

    def client_credentials_token_flow(self, uri, authorize_uri=None, key_set_uri=None):
        return ClientCredentialsTokenFlow(self.transport, self.decoder, self._request(uri, authorize_uri, key_set_uri))

    def refresh_token_flow(self, uri, authorize_uri=None, key_set_uri=None):
        return RefreshTokenFlow(
            self.transport,
            self.decoder,
            self._request(uri, authorize_uri, key_set_uri),
            self.public_client_credentials,
        )

    def user_token_flow(self, uri, authorize_uri=None, key_set_uri=None):
        return UserTokenFlow(
            self.transport,
            self.decoder,
            self._request(uri, authorize_uri, key_set_uri),
            self.public_client_credentials,
        )
