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
Provider configuration and the connection to Cognito.
"""

from typing import Any, Optional, TYPE_CHECKING

import boto3

if TYPE_CHECKING:
    from pulumi.dynamic import Config

SERVICE_NAME = "cognito-idp"

REGION_KEY = "aws:region"
PROFILE_KEY = "aws:profile"
ENDPOINT_KEY = "cognito:endpoint"


class ProviderConfig:
    """
    ProviderConfig holds the settings used to connect to Cognito. Any setting left as None is
    resolved by boto3 itself (environment variables, shared config files, instance metadata).
    """

    region: Optional[str]
    """
    The AWS region of the user pools.
    """

    profile: Optional[str]
    """
    The named profile to take credentials from.
    """

    endpoint_url: Optional[str]
    """
    An endpoint overriding the regional Cognito endpoint, e.g. a local emulator.
    """

    def __init__(self,
                 region: Optional[str] = None,
                 profile: Optional[str] = None,
                 endpoint_url: Optional[str] = None) -> None:
        self.region = region
        self.profile = profile
        self.endpoint_url = endpoint_url

    @classmethod
    def from_dynamic_config(cls, config: 'Config') -> 'ProviderConfig':
        """
        Reads the settings from the stack configuration handed to a dynamic provider's `configure`.
        """
        return cls(
            region=config.get(REGION_KEY),
            profile=config.get(PROFILE_KEY),
            endpoint_url=config.get(ENDPOINT_KEY),
        )

    def merge(self, overrides: 'ProviderConfig') -> 'ProviderConfig':
        """
        Returns a new ProviderConfig where every setting present in `overrides` wins.
        """
        return ProviderConfig(
            region=overrides.region if overrides.region is not None else self.region,
            profile=overrides.profile if overrides.profile is not None else self.profile,
            endpoint_url=overrides.endpoint_url if overrides.endpoint_url is not None else self.endpoint_url,
        )

    def connect(self) -> Any:
        """
        Creates a boto3 `cognito-idp` client for these settings.
        """
        session = boto3.session.Session(profile_name=self.profile, region_name=self.region)
        return session.client(SERVICE_NAME, endpoint_url=self.endpoint_url)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProviderConfig):
            return NotImplemented
        return (self.region, self.profile, self.endpoint_url) == \
            (other.region, other.profile, other.endpoint_url)

    def __repr__(self) -> str:
        return f"ProviderConfig(region={self.region!r}, profile={self.profile!r}, endpoint_url={self.endpoint_url!r})"
