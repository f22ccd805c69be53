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
Encoding and decoding of resource server IDs.

Cognito has no single key for a resource server, so the ID recorded in state joins the owning
user pool ID and the resource server identifier: `<user_pool_id>|<identifier>`.
"""

from typing import Tuple

from .errors import InvalidResourceServerIdError

ID_SEPARATOR = "|"


def encode_resource_server_id(user_pool_id: str, identifier: str) -> str:
    """
    Returns the ID that represents the resource server `identifier` in the user pool `user_pool_id`.
    """
    return f"{user_pool_id}{ID_SEPARATOR}{identifier}"


def decode_resource_server_id(id_: str) -> Tuple[str, str]:
    """
    Splits an ID produced by `encode_resource_server_id` back into its user pool ID and identifier.

    :param str id_: The ID to decode.
    :return: A `(user_pool_id, identifier)` pair.
    :raises InvalidResourceServerIdError: If the ID does not contain exactly one separator.
    """
    parts = id_.split(ID_SEPARATOR)
    if len(parts) != 2:
        raise InvalidResourceServerIdError(id_)
    return parts[0], parts[1]
