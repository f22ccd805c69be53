# Copyright 2016-2026, Pulumi Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Scopes attached to a resource server, and their translation to and from the Cognito wire format.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pulumi.errors import InputPropertyError

from .errors import ResourceServerStateError

MAX_SCOPES = 100
MAX_SCOPE_LENGTH = 256

# The character class Cognito accepts for scope names: printable ASCII except
# space, double quote, forward slash and backslash.
SCOPE_NAME_PATTERN = re.compile(r"[\x21\x23-\x2E\x30-\x5B\x5D-\x7E]+")


@dataclass(frozen=True)
class Scope:
    """
    Scope is a named permission offered by a resource server.
    """

    scope_name: str
    scope_description: str

    @classmethod
    def from_input(cls, value: Union["Scope", Mapping[str, Any]]) -> "Scope":
        """
        Builds a Scope from either a Scope or a `{scope_name, scope_description}` mapping, the shape
        Pulumi hands to providers.
        """
        if isinstance(value, Scope):
            return value
        for key in ("scope_name", "scope_description"):
            if not isinstance(value.get(key), str):
                raise InputPropertyError(f"scope.{key}", f"Missing required property '{key}'")
        return cls(value["scope_name"], value["scope_description"])

    def to_dict(self) -> Dict[str, str]:
        return {"scope_name": self.scope_name, "scope_description": self.scope_description}


ScopeInput = Union[Scope, Mapping[str, Any]]


def expand_scopes(scopes: Iterable[ScopeInput]) -> List[Dict[str, str]]:
    """
    Converts scopes into the `ResourceServerScopeType` list accepted by CreateResourceServer and
    UpdateResourceServer. The order of the result follows iteration order of `scopes`.
    """
    expanded = []
    for scope in scopes:
        scope = Scope.from_input(scope)
        expanded.append({"ScopeName": scope.scope_name, "ScopeDescription": scope.scope_description})
    return expanded


def flatten_scopes(wire: Optional[Iterable[Mapping[str, Any]]]) -> List[Scope]:
    """
    Converts the `Scopes` list of a DescribeResourceServer response into Scopes, keeping the order
    Cognito returned them in.
    """
    scopes = []
    for entry in wire or []:
        name = entry.get("ScopeName")
        description = entry.get("ScopeDescription")
        if name is None or description is None:
            raise ResourceServerStateError(f"setting scope: incomplete scope in response: {dict(entry)}")
        scopes.append(Scope(name, description))
    return scopes


def scope_identifiers(identifier: str, scopes: Iterable[Scope]) -> List[str]:
    """
    Returns the fully qualified `<identifier>/<scope_name>` form of each scope, in order.
    """
    return [f"{identifier}/{scope.scope_name}" for scope in scopes]


def _check_length(value: Any, key: str) -> Optional[str]:
    if not isinstance(value, str):
        return f"{key} is required"
    if not 1 <= len(value) <= MAX_SCOPE_LENGTH:
        return f"{key} must be between 1 and {MAX_SCOPE_LENGTH} characters, got {len(value)}"
    return None


def validate_scopes(scopes: Iterable[ScopeInput]) -> List[Tuple[str, str]]:
    """
    Validates a declared scope set.

    :return: A list of `(property, reason)` pairs, empty if the scopes are valid.
    """
    failures: List[Tuple[str, str]] = []
    seen = set()
    scopes = list(scopes)
    if len(scopes) > MAX_SCOPES:
        failures.append(("scope", f"at most {MAX_SCOPES} scopes are allowed, got {len(scopes)}"))

    for scope in scopes:
        if isinstance(scope, Scope):
            scope = scope.to_dict()
        name = scope.get("scope_name")
        description = scope.get("scope_description")

        reason = _check_length(name, "scope_name")
        if reason is None and not SCOPE_NAME_PATTERN.fullmatch(name):
            reason = f"scope_name {name!r} must satisfy regular expression pattern: {SCOPE_NAME_PATTERN.pattern}"
        if reason is None and name in seen:
            reason = f"duplicate scope_name {name!r}"
        if reason is not None:
            failures.append(("scope", reason))
        if isinstance(name, str):
            seen.add(name)

        reason = _check_length(description, "scope_description")
        if reason is not None:
            failures.append(("scope", reason))

    return failures
