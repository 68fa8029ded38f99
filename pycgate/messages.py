"""Typed records for decoded C-Gate lines.

Every line decodes to exactly one of a closed set of records:

- Events (#e# lines): SecurityEvent, LevelChangeEvent, GenericEvent
- Responses ([id] code lines): OkResponse, LevelResponse, GenericResponse

``processed`` is True when the line matched a fully validated sub-grammar,
False for well-formed lines passed through generically (heartbeats,
unexpected response codes).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import ClassVar, Union

from .address import NetworkAddress
from .const import SOURCE_UNIT_KEY

FieldValue = Union[int, float, str]

_EMPTY_FIELDS: Mapping[str, FieldValue] = MappingProxyType({})


class MessageType(str, Enum):
    """Top level kinds of line."""

    EVENT = "event"
    RESPONSE = "response"


class LineKind(Enum):
    """Result of classifying a raw line by its prefix."""

    EVENT = auto()
    RESPONSE = auto()


@dataclass(frozen=True)
class CGateMessage:
    """Base class for all decoded lines."""

    raw: str  # Original line

    type: ClassVar[MessageType]
    processed: ClassVar[bool] = False


@dataclass(frozen=True)
class Event(CGateMessage):
    """Asynchronous event notification.

    Format: #e# <time> <code> <address|cgate|-> <object id|-> <rest>
    """

    type: ClassVar[MessageType] = MessageType.EVENT

    time: str  # Verbatim, e.g. 20170204-160545.608
    code: int
    net_id: NetworkAddress | None = None
    id: str | None = None  # Object UUID
    system: bool = False  # Address slot was "cgate"
    application: str | None = None
    level: int | None = None  # 0-100 percent
    remainder: tuple[str, ...] = ()
    fields: Mapping[str, FieldValue] = field(default_factory=lambda: _EMPTY_FIELDS)
    message: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True)
class SecurityEvent(Event):
    """Security application event.

    Format: ... [security] <token> [<token> ...] sourceUnit=<n>

    Zone events carry a level: zone_unsealed = 100, zone_sealed = 0.
    """

    processed: ClassVar[bool] = True

    @property
    def source_unit(self) -> int:
        """Return the unit that raised the event."""
        return self.fields[SOURCE_UNIT_KEY]


@dataclass(frozen=True)
class LevelChangeEvent(Event):
    """Object state change.

    Format: ... new level=<raw> [key=value ...]

    ``level`` is the percent level; the raw byte stays in fields["level"].
    """

    processed: ClassVar[bool] = True


@dataclass(frozen=True)
class GenericEvent(Event):
    """Any other well-formed event, e.g. heartbeat or sync state."""


@dataclass(frozen=True)
class Response(CGateMessage):
    """Reply to a command.

    Format: [<command id>] <code> <rest>
    """

    type: ClassVar[MessageType] = MessageType.RESPONSE

    command_id: int
    code: int
    net_id: NetworkAddress | None = None
    level: int | None = None  # 0-100 percent
    message: str | None = None


@dataclass(frozen=True)
class OkResponse(Response):
    """Command acknowledged.

    Format: [id] 200 OK: <address>
    """

    processed: ClassVar[bool] = True


@dataclass(frozen=True)
class LevelResponse(Response):
    """Object level report.

    Format: [id] 300 <address>: level=<raw>
    """

    processed: ClassVar[bool] = True


@dataclass(frozen=True)
class GenericResponse(Response):
    """Any other response; the text after the code is kept in ``message``."""


# Type aliases for any decoded line
AnyEvent = Union[SecurityEvent, LevelChangeEvent, GenericEvent]
AnyResponse = Union[OkResponse, LevelResponse, GenericResponse]
AnyMessage = Union[AnyEvent, AnyResponse]
