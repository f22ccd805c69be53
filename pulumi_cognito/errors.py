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
Errors raised while managing Cognito resource servers.
"""


class ResourceServerError(Exception):
    """
    Base class for all errors raised by this package.
    """


class InvalidResourceServerIdError(ResourceServerError, ValueError):
    """
    Raised when a resource server ID is not of the form `UserPoolID|Identifier`.
    """

    id: str
    """
    The ID that failed to decode.
    """

    def __init__(self, id_: str) -> None:
        super().__init__(f"expected ID in format UserPoolID|Identifier, received: {id_}")
        self.id = id_


class ResourceServerNotFoundError(ResourceServerError):
    """
    Raised when a resource server that must exist, such as one that was just created,
    cannot be found.
    """

    id: str
    """
    The ID of the missing resource server.
    """

    def __init__(self, id_: str, after: str = "creation") -> None:
        super().__init__(f"reading Cognito Resource Server ({id_}): not found after {after}")
        self.id = id_


class ResourceServerStateError(ResourceServerError):
    """
    Raised when a response from Cognito cannot be turned into resource state.
    """
