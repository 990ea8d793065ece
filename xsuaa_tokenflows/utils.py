# utils.py

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

import base64
import json
import urllib.parse

TOKEN_ENDPOINT_PATH = "/oauth/token"
AUTHORIZE_ENDPOINT_PATH = "/oauth/authorize"
KEY_SET_ENDPOINT_PATH = "/token_keys"

ACCEPT = "Accept"
AUTHORIZATION = "Authorization"
CONTENT_TYPE = "Content-Type"
APPLICATION_JSON = "application/json"
FORM_URLENCODED = "application/x-www-form-urlencoded"


def _append_path(base_uri, path):
    parts = urllib.parse.urlsplit(str(base_uri))
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Base URI must be absolute: {base_uri!r}")
    new_path = parts.path.rstrip("/") + path
    return urllib.parse.urlunsplit((parts.scheme, parts.netloc, new_path, "", ""))


def derive_endpoints(base_uri):
    if base_uri is None:
        raise ValueError("XSUAA base URI must not be None.")
    return (
        _append_path(base_uri, TOKEN_ENDPOINT_PATH),
        _append_path(base_uri, AUTHORIZE_ENDPOINT_PATH),
        _append_path(base_uri, KEY_SET_ENDPOINT_PATH),
    )


def basic_auth_header(client_id, client_secret):
    if not client_id:
        raise ValueError("Client ID must not be empty.")
    if not client_secret:
        raise ValueError("Client secret must not be empty.")
    credentials = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def add_accept_header(headers):
    headers[ACCEPT] = APPLICATION_JSON
    return headers


def add_basic_auth_header(headers, client_id, client_secret):
    headers[AUTHORIZATION] = basic_auth_header(client_id, client_secret)
    return headers


def build_authorities(attributes):
    """Serialize additional authorization attributes to a JSON object string.

    Returns None when there is nothing to send. The result goes into a query
    component, so non-ASCII characters are escaped before percent-encoding.
    """
    if not attributes:
        return None
    return json.dumps({str(k): str(v) for k, v in attributes.items()}, ensure_ascii=True)


def build_request_uri(endpoint, params):
    parts = urllib.parse.urlsplit(str(endpoint))
    query = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    query.extend((k, v) for k, v in params.items() if v is not None)
    return urllib.parse.urlunsplit(
        (parts.scheme, parts.netloc, parts.path, urllib.parse.urlencode(query, quote_via=urllib.parse.quote), parts.fragment)
    )
