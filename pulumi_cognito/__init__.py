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
A Pulumi dynamic provider for OAuth2 resource servers in Amazon Cognito user pools.
"""

from .config import (
    ProviderConfig,
)

from .errors import (
    InvalidResourceServerIdError,
    ResourceServerError,
    ResourceServerNotFoundError,
    ResourceServerStateError,
)

from .ids import (
    decode_resource_server_id,
    encode_resource_server_id,
)

from .log import (
    EventLogger,
    PulumiEventLogger,
    RecordingEventLogger,
)

from .manager import (
    ReadMode,
    ResourceServerInputs,
    ResourceServerManager,
    ResourceServerOutputs,
)

from .provider import (
    ResourceServerProvider,
)

from .resource_server import (
    ResourceServer,
    ResourceServerArgs,
    ResourceServerScopeArgs,
)

from .scopes import (
    Scope,
    expand_scopes,
    flatten_scopes,
    scope_identifiers,
    validate_scopes,
)
