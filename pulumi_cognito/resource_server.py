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

from typing import Any, Mapping, Optional, Sequence

import pulumi
from pulumi.dynamic import Resource

from .provider import ResourceServerProvider


@pulumi.input_type
class ResourceServerScopeArgs:
    def __init__(__self__, *,
                 scope_description: pulumi.Input[str],
                 scope_name: pulumi.Input[str]):
        """
        :param pulumi.Input[str] scope_description: A description of the scope, 1 to 256 characters.
        :param pulumi.Input[str] scope_name: The name of the scope, unique within the resource server.
        """
        pulumi.set(__self__, "scope_description", scope_description)
        pulumi.set(__self__, "scope_name", scope_name)

    @property
    @pulumi.getter
    def scope_description(self) -> pulumi.Input[str]:
        return pulumi.get(self, "scope_description")

    @scope_description.setter
    def scope_description(self, value: pulumi.Input[str]):
        pulumi.set(self, "scope_description", value)

    @property
    @pulumi.getter
    def scope_name(self) -> pulumi.Input[str]:
        return pulumi.get(self, "scope_name")

    @scope_name.setter
    def scope_name(self, value: pulumi.Input[str]):
        pulumi.set(self, "scope_name", value)


@pulumi.input_type
class ResourceServerArgs:
    def __init__(__self__, *,
                 identifier: pulumi.Input[str],
                 name: pulumi.Input[str],
                 user_pool_id: pulumi.Input[str],
                 scope: Optional[pulumi.Input[Sequence[pulumi.Input[ResourceServerScopeArgs]]]] = None):
        """
        The set of arguments for constructing a ResourceServer resource.

        :param pulumi.Input[str] identifier: The identifier of the resource server, usually the URL of the API.
        :param pulumi.Input[str] name: The display name of the resource server.
        :param pulumi.Input[str] user_pool_id: The user pool the resource server belongs to.
        :param scope: The scopes the resource server offers, at most 100.
        """
        pulumi.set(__self__, "identifier", identifier)
        pulumi.set(__self__, "name", name)
        pulumi.set(__self__, "user_pool_id", user_pool_id)
        if scope is not None:
            pulumi.set(__self__, "scope", scope)

    @property
    @pulumi.getter
    def identifier(self) -> pulumi.Input[str]:
        return pulumi.get(self, "identifier")

    @identifier.setter
    def identifier(self, value: pulumi.Input[str]):
        pulumi.set(self, "identifier", value)

    @property
    @pulumi.getter
    def name(self) -> pulumi.Input[str]:
        return pulumi.get(self, "name")

    @name.setter
    def name(self, value: pulumi.Input[str]):
        pulumi.set(self, "name", value)

    @property
    @pulumi.getter
    def user_pool_id(self) -> pulumi.Input[str]:
        return pulumi.get(self, "user_pool_id")

    @user_pool_id.setter
    def user_pool_id(self, value: pulumi.Input[str]):
        pulumi.set(self, "user_pool_id", value)

    @property
    @pulumi.getter
    def scope(self) -> Optional[pulumi.Input[Sequence[pulumi.Input[ResourceServerScopeArgs]]]]:
        return pulumi.get(self, "scope")

    @scope.setter
    def scope(self, value: Optional[pulumi.Input[Sequence[pulumi.Input[ResourceServerScopeArgs]]]]):
        pulumi.set(self, "scope", value)


class ResourceServer(Resource, module="cognito", name="ResourceServer"):
    """
    ResourceServer is an OAuth2 resource server registered with a Cognito user pool. Its ID is
    `<user_pool_id>|<identifier>`.
    """

    identifier: pulumi.Output[str]
    name: pulumi.Output[str]
    user_pool_id: pulumi.Output[str]
    scope: pulumi.Output[Sequence[Mapping[str, str]]]
    scope_identifiers: pulumi.Output[Sequence[str]]
    """
    The `<identifier>/<scope_name>` form of each scope, as used in OAuth2 token requests.
    """

    def __init__(self,
                 resource_name: str,
                 args: Optional[ResourceServerArgs] = None,
                 opts: Optional[pulumi.ResourceOptions] = None,
                 provider: Optional[ResourceServerProvider] = None,
                 **kwargs: Any) -> None:
        """
        :param str resource_name: The name of the resource.
        :param ResourceServerArgs args: The arguments to use to populate this resource's properties.
               May also be given as keyword arguments.
        :param pulumi.ResourceOptions opts: Options for the resource. `import_` adopts an existing
               resource server by ID.
        :param ResourceServerProvider provider: The provider to manage the resource server with.
        """
        if opts is None:
            opts = pulumi.ResourceOptions()
        if args is None and kwargs:
            args = ResourceServerArgs(**kwargs)

        props: dict = dict()
        if args is None:
            if not opts.id:
                raise TypeError("Missing required argument 'args'")
            props["identifier"] = None
            props["name"] = None
            props["user_pool_id"] = None
            props["scope"] = None
        else:
            for key in ("identifier", "name", "user_pool_id"):
                if getattr(args, key) is None and not opts.urn:
                    raise TypeError(f"Missing required property '{key}'")
            props["identifier"] = args.identifier
            props["name"] = args.name
            props["user_pool_id"] = args.user_pool_id
            props["scope"] = args.scope if args.scope is not None else []
        props["scope_identifiers"] = None

        super().__init__(provider if provider is not None else ResourceServerProvider(),
                         resource_name, props, opts)

    @staticmethod
    def get(resource_name: str,
            id: pulumi.Input[str],
            opts: Optional[pulumi.ResourceOptions] = None,
            provider: Optional[ResourceServerProvider] = None) -> 'ResourceServer':
        """
        Get an existing ResourceServer resource's state with the given name and ID.

        :param str resource_name: The unique name of the resulting resource.
        :param pulumi.Input[str] id: The `<user_pool_id>|<identifier>` ID of the resource server.
        :param pulumi.ResourceOptions opts: Options for the resource.
        """
        opts = pulumi.ResourceOptions.merge(opts, pulumi.ResourceOptions(id=id))
        return ResourceServer(resource_name, opts=opts, provider=provider)
