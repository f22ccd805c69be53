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
The Pulumi dynamic provider for Cognito resource servers.
"""

from typing import Any, Dict, List, Optional, Set, Tuple

from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    ConfigureRequest,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)
from pulumi.runtime import rpc

from .config import ProviderConfig
from .errors import ResourceServerNotFoundError
from .log import EventLogger
from .manager import ResourceServerInputs, ResourceServerManager
from .scopes import MAX_SCOPES, validate_scopes

REQUIRED_PROPERTIES = ["identifier", "name", "user_pool_id"]

# Changing any of these requires a new resource server.
REPLACE_ON_CHANGES = ["identifier", "name", "user_pool_id"]


def _is_unknown(value: Any) -> bool:
    if isinstance(value, dict):
        return any(_is_unknown(v) for v in value.values())
    if isinstance(value, list):
        return any(_is_unknown(v) for v in value)
    return value == rpc.UNKNOWN


def _scope_set(value: Any) -> Optional[Set[Tuple[Any, Any]]]:
    if value is None:
        return set()
    if _is_unknown(value):
        return None
    return {(scope.get("scope_name"), scope.get("scope_description")) for scope in value}


class ResourceServerProvider(ResourceProvider):
    """
    ResourceServerProvider implements the lifecycle of a Cognito user pool resource server.

    The provider is serialized into the program's state, so it holds only plain settings until the
    engine calls it; the Cognito client is created on first use.
    """

    _overrides: ProviderConfig
    _config: ProviderConfig
    _manager: ResourceServerManager
    _client: Any

    def __init__(self,
                 region: Optional[str] = None,
                 profile: Optional[str] = None,
                 endpoint_url: Optional[str] = None,
                 logger: Optional[EventLogger] = None,
                 client: Any = None) -> None:
        """
        :param Optional[str] region: The AWS region; overrides the `aws:region` stack setting.
        :param Optional[str] profile: The credentials profile; overrides `aws:profile`.
        :param Optional[str] endpoint_url: A Cognito endpoint; overrides `cognito:endpoint`.
        :param Optional[EventLogger] logger: Receives lifecycle events. Defaults to the Pulumi CLI.
        :param client: A `cognito-idp` client to use instead of creating one. It is not serialized
               with the provider; the engine's copy connects from its own configuration.
        """
        super().__init__()
        self._overrides = ProviderConfig(region, profile, endpoint_url)
        self._config = self._overrides
        self._manager = ResourceServerManager(logger)
        self._client = client

    def __getstate__(self) -> Dict[str, Any]:
        # boto3 clients hold sockets and SSL contexts, which cannot be pickled.
        state = self.__dict__.copy()
        state["_client"] = None
        return state

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def configure(self, req: ConfigureRequest) -> None:
        self._config = ProviderConfig.from_dynamic_config(req.config).merge(self._overrides)

    def _conn(self) -> Any:
        if self._client is None:
            self._client = self._config.connect()
        return self._client

    def check(self, _olds: Any, news: Any) -> CheckResult:
        inputs: Dict[str, Any] = dict(news)
        failures: List[CheckFailure] = []

        for key in REQUIRED_PROPERTIES:
            value = inputs.get(key)
            if value is None or value == "":
                failures.append(CheckFailure(key, f"Missing required property '{key}'"))
            elif not _is_unknown(value) and not isinstance(value, str):
                failures.append(CheckFailure(key, f"Expected '{key}' to be a string"))

        scope = inputs.get("scope")
        if scope is None:
            inputs["scope"] = []
        elif isinstance(scope, list):
            known = [s for s in scope if isinstance(s, dict) and not _is_unknown(s)]
            failures.extend(CheckFailure(p, r) for p, r in validate_scopes(known))
            if len(known) <= MAX_SCOPES < len(scope):
                failures.append(CheckFailure("scope", f"at most {MAX_SCOPES} scopes are allowed, got {len(scope)}"))
            if any(not isinstance(s, dict) and not _is_unknown(s) for s in scope):
                failures.append(CheckFailure("scope", "Expected each scope to be an object"))
        elif not _is_unknown(scope):
            failures.append(CheckFailure("scope", "Expected 'scope' to be a list"))

        return CheckResult(inputs, failures)

    def diff(self, _id: str, olds: Any, news: Any) -> DiffResult:
        replaces = [key for key in REPLACE_ON_CHANGES if olds.get(key) != news.get(key)]

        old_scopes = _scope_set(olds.get("scope"))
        new_scopes = _scope_set(news.get("scope"))
        changes = bool(replaces) or old_scopes is None or new_scopes is None or old_scopes != new_scopes

        # A replacement that keeps the user pool and identifier would collide with the old resource
        # server, so the old one has to go first.
        delete_before_replace = bool(replaces) and \
            olds.get("identifier") == news.get("identifier") and \
            olds.get("user_pool_id") == news.get("user_pool_id")

        return DiffResult(
            changes=changes,
            replaces=replaces,
            delete_before_replace=delete_before_replace,
        )

    def create(self, props: Any) -> CreateResult:
        id_, outputs = self._manager.create(self._conn(), ResourceServerInputs.from_props(props))
        return CreateResult(id_, outputs.to_props())

    def read(self, id_: str, props: Any) -> ReadResult:
        outputs = self._manager.read(self._conn(), id_)
        if outputs is None:
            # An empty ID tells the engine the resource server no longer exists.
            return ReadResult("", {})
        return ReadResult(id_, outputs.to_props())

    def update(self, id_: str, _olds: Any, news: Any) -> UpdateResult:
        outputs = self._manager.update(self._conn(), id_, ResourceServerInputs.from_props(news))
        if outputs is None:
            raise ResourceServerNotFoundError(id_, after="update")
        return UpdateResult(outputs.to_props())

    def delete(self, id_: str, _props: Any) -> None:
        self._manager.delete(self._conn(), id_)
