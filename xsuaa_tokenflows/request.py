# request.py

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

from dataclasses import dataclass, field, fields, replace


@dataclass(frozen=True)
class TokenFlowRequest:
    token_endpoint: str
    authorize_endpoint: str
    key_set_endpoint: str
    client_id: str = None
    client_secret: str = None
    refresh_token: str = None
    subject_token: str = None
    additional_authorization_attributes: dict = field(default_factory=dict)
    scopes: tuple = ()
    subdomain: str = None
    disable_cache: bool = False

    def with_values(self, **changes):
        if "additional_authorization_attributes" in changes:
            changes["additional_authorization_attributes"] = dict(changes["additional_authorization_attributes"] or {})
        if "scopes" in changes:
            changes["scopes"] = tuple(changes["scopes"] or ())
        return replace(self, **changes)

    def missing_fields(self, required):
        names = {f.name for f in fields(self)}
        missing = []
        for name in required:
            if name not in names:
                raise ValueError(f"Unknown flow request field: {name}")
            if not getattr(self, name):
                missing.append(name)
        return missing

    def is_valid(self, required):
        return not self.missing_fields(required)

    def __repr__(self):
        # Credentials and tokens stay out of reprs and log lines.
        return (
            f"TokenFlowRequest(token_endpoint={self.token_endpoint!r}, "
            f"client_id={self.client_id!r}, "
            f"scopes={self.scopes!r}, subdomain={self.subdomain!r}, "
            f"disable_cache={self.disable_cache!r})"
        )
