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
Structured lifecycle events.

The resource server manager never writes to a console or a global logger directly. It reports
events such as `creating` or `not_found_removing_from_state` to an `EventLogger`, which decides
where they go. `PulumiEventLogger`, the default, forwards them to the Pulumi CLI's diagnostic
stream.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from pulumi import log

RESOURCE_NAME = "Cognito Resource Server"


def format_event(event: str, fields: Dict[str, Any]) -> str:
    """
    Renders an event as `event key=value ...`, keeping the order the fields were given in.
    """
    if not fields:
        return event
    rendered = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{event} {rendered}"


class EventLogger(ABC):
    """
    EventLogger receives structured events from the resource server manager.
    """

    @abstractmethod
    def debug(self, event: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def info(self, event: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def warn(self, event: str, **fields: Any) -> None:
        pass


class PulumiEventLogger(EventLogger):
    """
    PulumiEventLogger writes events to the Pulumi CLI, prefixed with the resource kind.
    """

    prefix: str

    def __init__(self, prefix: str = RESOURCE_NAME) -> None:
        self.prefix = prefix

    def _message(self, event: str, fields: Dict[str, Any]) -> str:
        return f"{self.prefix}: {format_event(event, fields)}"

    def debug(self, event: str, **fields: Any) -> None:
        log.debug(self._message(event, fields))

    def info(self, event: str, **fields: Any) -> None:
        log.info(self._message(event, fields))

    def warn(self, event: str, **fields: Any) -> None:
        log.warn(self._message(event, fields))


class RecordingEventLogger(EventLogger):
    """
    RecordingEventLogger keeps every event in memory as `(severity, event, fields)`. Useful in tests
    and for callers that want to inspect what happened during an operation.
    """

    events: List[Tuple[str, str, Dict[str, Any]]]

    def __init__(self) -> None:
        self.events = []

    def debug(self, event: str, **fields: Any) -> None:
        self.events.append(("debug", event, fields))

    def info(self, event: str, **fields: Any) -> None:
        self.events.append(("info", event, fields))

    def warn(self, event: str, **fields: Any) -> None:
        self.events.append(("warn", event, fields))

    def names(self) -> List[str]:
        return [event for _, event, _ in self.events]
