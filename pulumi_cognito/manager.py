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
Lifecycle management of Cognito user pool resource servers.

`ResourceServerManager` maps the four lifecycle operations onto the Cognito API. Each operation
takes its inputs explicitly and returns its results; nothing is mutated in place. The connection
to Cognito (a boto3 `cognito-idp` client) is passed to every call and is never owned by the
manager.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, cast

from botocore.exceptions import ClientError

from .errors import ResourceServerNotFoundError
from .ids import decode_resource_server_id, encode_resource_server_id
from .log import EventLogger, PulumiEventLogger
from .scopes import Scope, ScopeInput, expand_scopes, flatten_scopes, scope_identifiers

NOT_FOUND_ERROR_CODE = "ResourceNotFoundException"


class ReadMode(Enum):
    """
    ReadMode selects how a read treats a resource server that Cognito reports as missing.
    """

    FRESH_CREATE = "fresh_create"
    """
    The resource server was created during this operation, so it must exist.
    """

    RECONCILE = "reconcile"
    """
    The resource server is already recorded in state; if it is missing it was deleted out of band
    and the state should be cleared.
    """


@dataclass(frozen=True)
class ResourceServerInputs:
    """
    The declared configuration of a resource server.
    """

    identifier: str
    name: str
    user_pool_id: str
    scopes: FrozenSet[Scope] = field(default_factory=frozenset)

    @classmethod
    def build(cls,
              identifier: str,
              name: str,
              user_pool_id: str,
              scopes: Optional[Iterable[ScopeInput]] = None) -> 'ResourceServerInputs':
        return cls(identifier, name, user_pool_id, frozenset(Scope.from_input(s) for s in scopes or []))

    @classmethod
    def from_props(cls, props: Mapping[str, Any]) -> 'ResourceServerInputs':
        """
        Builds inputs from a Pulumi property bag.
        """
        return cls.build(props["identifier"], props["name"], props["user_pool_id"], props.get("scope"))


@dataclass(frozen=True)
class ResourceServerOutputs:
    """
    The live state of a resource server as read back from Cognito.
    """

    identifier: str
    name: str
    user_pool_id: str
    scopes: List[Scope]
    scope_identifiers: List[str]

    def to_props(self) -> Dict[str, Any]:
        """
        Returns the outputs as a Pulumi property bag.
        """
        return {
            "identifier": self.identifier,
            "name": self.name,
            "user_pool_id": self.user_pool_id,
            "scope": [scope.to_dict() for scope in self.scopes],
            "scope_identifiers": list(self.scope_identifiers),
        }


def is_not_found(err: ClientError) -> bool:
    return err.response.get("Error", {}).get("Code") == NOT_FOUND_ERROR_CODE


class ResourceServerManager:
    """
    ResourceServerManager creates, reads, updates and deletes resource servers.

    Errors returned by Cognito are raised unchanged, except for the two idempotent cases: deleting a
    resource server that no longer exists, and reconciling one that was deleted out of band.
    """

    _log: EventLogger

    def __init__(self, logger: Optional[EventLogger] = None) -> None:
        self._log = logger if logger is not None else PulumiEventLogger()

    def create(self, conn: Any, inputs: ResourceServerInputs) -> Tuple[str, ResourceServerOutputs]:
        """
        Creates a resource server and reads it back.

        :return: The new ID and the state read from Cognito.
        """
        params: Dict[str, Any] = {
            "Identifier": inputs.identifier,
            "Name": inputs.name,
            "UserPoolId": inputs.user_pool_id,
        }
        if inputs.scopes:
            params["Scopes"] = expand_scopes(inputs.scopes)

        self._log.debug("creating", user_pool_id=inputs.user_pool_id, identifier=inputs.identifier,
                        scopes=len(inputs.scopes))
        conn.create_resource_server(**params)

        id_ = encode_resource_server_id(inputs.user_pool_id, inputs.identifier)
        # A fresh read never returns None; it raises instead.
        outputs = cast(ResourceServerOutputs, self.read(conn, id_, ReadMode.FRESH_CREATE))
        return id_, outputs

    def read(self, conn: Any, id_: str, mode: ReadMode = ReadMode.RECONCILE) -> Optional[ResourceServerOutputs]:
        """
        Reads the live state of a resource server.

        :return: The state, or None if the resource server is gone and `mode` is `RECONCILE`.
        :raises InvalidResourceServerIdError: If `id_` is malformed.
        :raises ResourceServerNotFoundError: If the resource server is gone and `mode` is `FRESH_CREATE`.
        """
        user_pool_id, identifier = decode_resource_server_id(id_)

        self._log.debug("reading", id=id_, mode=mode.value)
        try:
            resp = conn.describe_resource_server(UserPoolId=user_pool_id, Identifier=identifier)
        except ClientError as err:
            if not is_not_found(err):
                raise
            if mode is ReadMode.FRESH_CREATE:
                raise ResourceServerNotFoundError(id_) from err
            resp = {}

        server = resp.get("ResourceServer") if resp else None
        if not server:
            if mode is ReadMode.FRESH_CREATE:
                raise ResourceServerNotFoundError(id_)
            self._log.warn("not_found_removing_from_state", id=id_)
            return None

        scopes = flatten_scopes(server.get("Scopes"))
        return ResourceServerOutputs(
            identifier=server.get("Identifier"),
            name=server.get("Name"),
            user_pool_id=server.get("UserPoolId"),
            scopes=scopes,
            scope_identifiers=scope_identifiers(server.get("Identifier"), scopes),
        )

    def update(self, conn: Any, id_: str, inputs: ResourceServerInputs) -> Optional[ResourceServerOutputs]:
        """
        Replaces the name and scope set of a resource server and reads it back. The identifier and
        user pool come from `id_`; those of `inputs` are ignored.

        :return: The state, or None if the resource server vanished before it could be read back.
        """
        user_pool_id, identifier = decode_resource_server_id(id_)

        self._log.debug("updating", id=id_, scopes=len(inputs.scopes))
        conn.update_resource_server(
            UserPoolId=user_pool_id,
            Identifier=identifier,
            Name=inputs.name,
            Scopes=expand_scopes(inputs.scopes),
        )
        return self.read(conn, id_, ReadMode.RECONCILE)

    def delete(self, conn: Any, id_: str) -> None:
        """
        Deletes a resource server. Deleting one that does not exist succeeds.
        """
        user_pool_id, identifier = decode_resource_server_id(id_)

        self._log.debug("deleting", id=id_)
        try:
            conn.delete_resource_server(UserPoolId=user_pool_id, Identifier=identifier)
        except ClientError as err:
            if not is_not_found(err):
                raise
            self._log.debug("already_deleted", id=id_)
