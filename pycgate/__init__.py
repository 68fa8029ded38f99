"""pycgate - Decoder for the Clipsal C-Gate session protocol.

This package turns the text lines a C-Gate server emits into typed,
immutable records. It performs no I/O: the caller owns the connection,
splits the stream into lines and routes the records.

Main components:
- parse_line: Classify and decode one line into an event or response
- Message types: Frozen dataclasses for every line shape
- NetworkAddress: //PROJECT/network/application/group addresses
- raw_to_percent / percent_to_raw: C-Bus level conversion
- Command builders: Functions to construct C-Gate commands

Example:
    from pycgate import LevelChangeEvent, parse_line

    msg = parse_line(line)
    if isinstance(msg, LevelChangeEvent):
        print(f"{msg.net_id} is at {msg.level}%")
"""

from .address import NetworkAddress, parse_address_slot
from .exceptions import (
    CGateException,
    EmptyRemainder,
    InvalidAddress,
    InvalidCode,
    InvalidLevel,
    InvalidType,
    InvalidValue,
    LevelError,
    MissingLevel,
    OutOfRange,
    ParseError,
    Truncated,
    UnrecognizedFormat,
)
from .levels import percent_to_raw, raw_to_percent
from .messages import (
    AnyEvent,
    AnyMessage,
    AnyResponse,
    CGateMessage,
    Event,
    FieldValue,
    GenericEvent,
    GenericResponse,
    LevelChangeEvent,
    LevelResponse,
    LineKind,
    MessageType,
    OkResponse,
    Response,
    SecurityEvent,
)
from .protocol import (
    classify_line,
    coerce_value,
    parse_event,
    parse_fields,
    parse_line,
    parse_response,
)

__all__ = [
    # Protocol
    "classify_line",
    "coerce_value",
    "parse_event",
    "parse_fields",
    "parse_line",
    "parse_response",
    # Levels
    "percent_to_raw",
    "raw_to_percent",
    # Addresses
    "NetworkAddress",
    "parse_address_slot",
    # Messages
    "AnyEvent",
    "AnyMessage",
    "AnyResponse",
    "CGateMessage",
    "Event",
    "FieldValue",
    "GenericEvent",
    "GenericResponse",
    "LevelChangeEvent",
    "LevelResponse",
    "LineKind",
    "MessageType",
    "OkResponse",
    "Response",
    "SecurityEvent",
    # Exceptions
    "CGateException",
    "EmptyRemainder",
    "InvalidAddress",
    "InvalidCode",
    "InvalidLevel",
    "InvalidType",
    "InvalidValue",
    "LevelError",
    "MissingLevel",
    "OutOfRange",
    "ParseError",
    "Truncated",
    "UnrecognizedFormat",
]
