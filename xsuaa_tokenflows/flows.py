# flows.py

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

import json
import logging
import urllib.parse
from collections import namedtuple

from .exceptions import AuthenticationError, DecodeError, TokenFlowError, TransportError, ValidationError
from .utils import (
    CONTENT_TYPE,
    FORM_URLENCODED,
    add_accept_header,
    add_basic_auth_header,
    build_authorities,
    build_request_uri,
)

logger = logging.getLogger(__name__)

ACCESS_TOKEN = "access_token"
GRANT_TYPE = "grant_type"
AUTHORITIES = "authorities"

# Where a public client (no secret) puts its client_id.
PUBLIC_CLIENT_QUERY = "query"
PUBLIC_CLIENT_BODY = "body"
PUBLIC_CLIENT_LOCATIONS = (PUBLIC_CLIENT_QUERY, PUBLIC_CLIENT_BODY)


class Grant(namedtuple("Grant", ["name", "description", "required", "confidential_only", "params"])):
    """Describes one grant type: its mandatory fields and its query parameters."""

    def required_fields(self, public_client=None):
        if self.confidential_only or public_client is None:
            return self.required + ("client_secret",)
        return self.required


def _client_credentials_params(request):
    return {
        GRANT_TYPE: "client_credentials",
        AUTHORITIES: build_authorities(request.additional_authorization_attributes),
    }


def _refresh_token_params(request):
    return {
        GRANT_TYPE: "refresh_token",
        "refresh_token": request.refresh_token,
    }


def _user_token_params(request):
    return {
        GRANT_TYPE: "user_token",
        "response_type": "token",
        "client_id": request.client_id,
        "assertion": request.subject_token,
        "scope": " ".join(request.scopes) if request.scopes else None,
        "subdomain": request.subdomain or None,
        "disable_cache": "true" if request.disable_cache else None,
        AUTHORITIES: build_authorities(request.additional_authorization_attributes),
    }


CLIENT_CREDENTIALS = Grant(
    "client_credentials", "Client credentials", ("client_id",), True, _client_credentials_params
)
REFRESH_TOKEN = Grant(
    "refresh_token", "Refresh token", ("client_id", "refresh_token"), False, _refresh_token_params
)
USER_TOKEN = Grant(
    "user_token", "User token", ("client_id", "subject_token"), False, _user_token_params
)


def _check_request(grant, request, public_client):
    missing = request.missing_fields(grant.required_fields(public_client))
    if missing:
        logger.warning("%s flow request is missing %s", grant.description, ", ".join(missing))
        raise ValidationError(
            f"{grant.description} flow request is not valid. Make sure all mandatory fields are set. "
            f"Missing: {', '.join(missing)}."
        )


def _build_request(grant, request, public_client):
    params = grant.params(request)
    headers = add_accept_header({})
    body = None
    if request.client_secret:
        add_basic_auth_header(headers, request.client_id, request.client_secret)
    elif public_client == PUBLIC_CLIENT_BODY and "client_id" not in params:
        headers[CONTENT_TYPE] = FORM_URLENCODED
        body = urllib.parse.urlencode({"client_id": request.client_id})
    elif public_client == PUBLIC_CLIENT_QUERY:
        params.setdefault("client_id", request.client_id)
    return build_request_uri(request.token_endpoint, params), headers, body


def _extract_access_token(grant, response):
    status = response.status_code
    if status == 401:
        logger.warning("XSUAA rejected client credentials (grant_type: %s)", grant.name)
        raise AuthenticationError(
            f"Error retrieving JWT token. Received status code {status}. "
            f"Call to XSUAA was not successful (grant_type: {grant.name}). Client credentials invalid."
        )
    if status != 200:
        logger.warning("Token request failed with HTTP %s (grant_type: %s)", status, grant.name)
        raise TransportError(
            f"Error retrieving JWT token. Received status code {status}. "
            f"Call to XSUAA was not successful (grant_type: {grant.name}).",
            status_code=status,
        )

    try:
        data = json.loads(response.body)
    except (TypeError, ValueError) as e:
        logger.warning("Token response is not valid JSON (grant_type: %s)", grant.name)
        raise DecodeError(f"Token response is not valid JSON (grant_type: {grant.name}): {e}") from e

    access_token = data.get(ACCESS_TOKEN) if isinstance(data, dict) else None
    if not access_token or not isinstance(access_token, str):
        logger.warning("Token response is missing %s (grant_type: %s)", ACCESS_TOKEN, grant.name)
        raise DecodeError(f"Token response is missing required field: {ACCESS_TOKEN} (grant_type: {grant.name}).")
    return access_token


def _decode(decoder, encoded_token, key_set_endpoint):
    # Only decode: verifying the signature is up to whoever receives the token.
    try:
        return decoder.decode(encoded_token, key_set_endpoint)
    except TokenFlowError:
        raise
    except Exception as e:
        logger.warning("Failed to decode JWT: %s", e)
        raise DecodeError(f"Error decoding JWT token: {e}") from e


def execute_flow(transport, decoder, grant, request, public_client=None):
    """Run one grant against the token endpoint and return the decoded token.

    Validation happens before anything is sent, and exactly one POST is made
    per call. Every failure is raised as a TokenFlowError subclass.
    """
    _check_request(grant, request, public_client)

    uri, headers, body = _build_request(grant, request, public_client)
    logger.debug("Requesting %s token from %s", grant.name, request.token_endpoint)

    try:
        response = transport.post(uri, headers, body)
    except TokenFlowError:
        raise
    except Exception as e:
        logger.warning("Token request to %s failed (grant_type: %s): %s", request.token_endpoint, grant.name, e)
        raise TransportError(
            f"Error retrieving JWT token. Call to XSUAA failed (grant_type: {grant.name}): {e}"
        ) from e
    encoded_token = _extract_access_token(grant, response)
    token = _decode(decoder, encoded_token, request.key_set_endpoint)

    logger.debug("Retrieved %s token from %s", grant.name, request.token_endpoint)
    return token


class TokenFlow:
    grant = None

    def __init__(self, transport, decoder, request, public_client=None):
        if public_client is not None and public_client not in PUBLIC_CLIENT_LOCATIONS:
            raise ValueError(f"public_client must be one of {PUBLIC_CLIENT_LOCATIONS} or None, got {public_client!r}")
        self._transport = transport
        self._decoder = decoder
        self._request = request
        self._public_client = public_client
        self._executed = False

    @property
    def request(self):
        return self._request

    def _set(self, **changes):
        self._request = self._request.with_values(**changes)
        return self

    def client(self, client_id):
        """Sets the ID of the OAuth 2.0 client requesting the token."""
        return self._set(client_id=client_id)

    def secret(self, client_secret):
        """Sets the secret of the OAuth 2.0 client requesting the token."""
        return self._set(client_secret=client_secret)

    def execute(self):
        """Executes the flow and returns the Jwt issued by XSUAA.

        Raises TokenFlowError (or one of its subclasses) on any failure.
        """
        if self._executed:
            raise ValidationError(f"{self.grant.description} flow was already executed. Create a new flow.")
        self._executed = True
        return execute_flow(self._transport, self._decoder, self.grant, self._request, self._public_client)


class ClientCredentialsTokenFlow(TokenFlow):
    grant = CLIENT_CREDENTIALS

    def attributes(self, additional_authorization_attributes):
        """Requests additional attributes in the 'az_attr' claim of the token."""
        return self._set(additional_authorization_attributes=additional_authorization_attributes)


class RefreshTokenFlow(TokenFlow):
    grant = REFRESH_TOKEN

    def refresh_token(self, refresh_token):
        return self._set(refresh_token=refresh_token)


class UserTokenFlow(TokenFlow):
    grant = USER_TOKEN

    def token(self, subject_token):
        """Sets the user token to exchange."""
        if isinstance(subject_token, bytes):
            subject_token = subject_token.decode("ascii")
        return self._set(subject_token=str(subject_token) if subject_token is not None else None)

    def subdomain(self, subdomain):
        return self._set(subdomain=subdomain)

    def scopes(self, *scopes):
        return self._set(scopes=scopes)

    def disable_cache(self, disable=True):
        return self._set(disable_cache=bool(disable))

    def attributes(self, additional_authorization_attributes):
        return self._set(additional_authorization_attributes=additional_authorization_attributes)
