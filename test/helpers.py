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

import copy
import logging

from botocore.exceptions import ClientError


def supress_unobserved_task_logging():
    """Suppresses logs about faulted unobserved tasks, which appear after
    the Pulumi mock tests finish rather than during them."""
    logging.getLogger("asyncio").setLevel(logging.CRITICAL)


supress_unobserved_task_logging()


def client_error(code, operation, message="error"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeCognito:
    """An in-memory stand-in for the resource server calls of a `cognito-idp` client."""

    def __init__(self):
        self.servers = {}
        self.calls = []

    def _get(self, operation, UserPoolId, Identifier):
        key = (UserPoolId, Identifier)
        if key not in self.servers:
            raise client_error("ResourceNotFoundException", operation,
                               f"Resource server {Identifier} does not exist.")
        return key

    def create_resource_server(self, UserPoolId, Identifier, Name, Scopes=None):
        self.calls.append("CreateResourceServer")
        key = (UserPoolId, Identifier)
        if key in self.servers:
            raise client_error("InvalidParameterException", "CreateResourceServer",
                               f"{Identifier} already exists in user pool {UserPoolId}.")
        self.servers[key] = {
            "UserPoolId": UserPoolId,
            "Identifier": Identifier,
            "Name": Name,
            "Scopes": copy.deepcopy(Scopes or []),
        }
        return {"ResourceServer": copy.deepcopy(self.servers[key])}

    def describe_resource_server(self, UserPoolId, Identifier):
        self.calls.append("DescribeResourceServer")
        key = self._get("DescribeResourceServer", UserPoolId, Identifier)
        return {"ResourceServer": copy.deepcopy(self.servers[key])}

    def update_resource_server(self, UserPoolId, Identifier, Name, Scopes=None):
        self.calls.append("UpdateResourceServer")
        key = self._get("UpdateResourceServer", UserPoolId, Identifier)
        self.servers[key].update(Name=Name, Scopes=copy.deepcopy(Scopes or []))
        return {"ResourceServer": copy.deepcopy(self.servers[key])}

    def delete_resource_server(self, UserPoolId, Identifier):
        self.calls.append("DeleteResourceServer")
        key = self._get("DeleteResourceServer", UserPoolId, Identifier)
        del self.servers[key]
        return {}


class DescribeOverrideCognito(FakeCognito):
    """A FakeCognito whose `describe_resource_server` always returns `response`, including shapes
    the real service model rejects, such as a missing `ResourceServer` or an incomplete scope."""

    def __init__(self, response):
        super().__init__()
        self.response = response

    def describe_resource_server(self, UserPoolId, Identifier):
        self.calls.append("DescribeResourceServer")
        return copy.deepcopy(self.response)
