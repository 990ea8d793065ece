# transport.py

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
from collections import namedtuple

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds

HttpResponse = namedtuple("HttpResponse", ["status_code", "headers", "body"])


class RequestsTransport:
    """Blocking HTTP transport backed by a requests Session.

    A single instance may be shared by all flows created from one factory.
    """

    def __init__(self, session=None, timeout=DEFAULT_TIMEOUT):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def post(self, uri, headers, body=None):
        return self._send("POST", uri, headers, body)

    def get(self, uri, headers=None):
        return self._send("GET", uri, headers, None)

    def _send(self, method, uri, headers, body):
        try:
            resp = self.session.request(method, uri, headers=dict(headers or {}), data=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("HTTP %s to %s failed: %s", method, _strip_query(uri), e)
            raise TransportError(f"HTTP {method} to {_strip_query(uri)} failed: {e}") from e
        return HttpResponse(resp.status_code, dict(resp.headers), resp.text)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _strip_query(uri):
    # Query strings carry refresh tokens and assertions.
    return str(uri).split("?", 1)[0]
