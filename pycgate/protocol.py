"""Protocol parsing for C-Gate session lines.

This module handles:
- Classifying a line as an event or a command response
- Parsing events and responses into typed records
- Coercing key=value telemetry into ints, floats or strings

All parsing is stateless - one newline-stripped line in, one record out.
Framing lines off the socket and routing records is left to the caller.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Callable

from .address import NetworkAddress, parse_address_slot
from .const import (
    EVENT_PREFIX,
    LEVEL_KEY,
    NO_VALUE,
    RESPONSE_OBJECT_STATUS,
    RESPONSE_OK,
    SECURITY_APPLICATION,
    SECURITY_TAG,
    SOURCE_UNIT_KEY,
    STATE_CHANGE_TAG,
    ZONE_SEALED,
    ZONE_UNSEALED,
)
from .exceptions import (
    EmptyRemainder,
    InvalidAddress,
    InvalidCode,
    InvalidLevel,
    InvalidValue,
    LevelError,
    MissingLevel,
    Truncated,
    UnrecognizedFormat,
)
from .levels import raw_to_percent
from .messages import (
    AnyEvent,
    AnyMessage,
    AnyResponse,
    FieldValue,
    GenericEvent,
    GenericResponse,
    LevelChangeEvent,
    LevelResponse,
    LineKind,
    OkResponse,
    SecurityEvent,
)

_LOGGER = logging.getLogger(__name__)

# Zone state reported as a level
ZONE_LEVELS = {
    ZONE_UNSEALED: 100,
    ZONE_SEALED: 0,
}

_RESPONSE_PREFIX_RE = re.compile(r"\[\d+\] \d+")
_RESPONSE_RE = re.compile(r"\[(?P<command_id>[^\]]*)\] (?P<code>\S+) ?(?P<rest>.*)")
_DIGITS_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[0-9]*\.[0-9]*")
_TIMESTAMP_RE = re.compile(r"[0-9]{8}-[0-9]{6}(\.[0-9]{3})?")
_OBJECT_ID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_OK_RE = re.compile(r"OK: (?P<address>\S+)")
_LEVEL_RE = re.compile(r"(?P<address>\S+): level=(?P<level>\S*)")


def classify_line(line: str) -> LineKind:
    """Decide which grammar a line belongs to.

    Raises:
        UnrecognizedFormat: line is neither an event nor a response
    """
    if line.startswith(EVENT_PREFIX):
        return LineKind.EVENT
    if _RESPONSE_PREFIX_RE.match(line):
        return LineKind.RESPONSE
    raise UnrecognizedFormat(f"Unrecognized line: {line!r}", line=line)


def parse_line(line: str) -> AnyMessage:
    """Parse one line from a C-Gate session.

    Args:
        line: Line without its trailing newline

    Returns:
        An event or response record

    Raises:
        ParseError: line violates the protocol grammar
    """
    kind = classify_line(line)
    _LOGGER.debug("Classified %s: %s", kind.name, line)
    return _PARSERS[kind](line)


# =============================================================================
# Fields
# =============================================================================


def coerce_value(text: str) -> FieldValue:
    """Convert a field value to int or float when it looks numeric.

    "74" -> 74, "6.5020" -> 6.502, anything else is returned unchanged.
    """
    if _DIGITS_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text) and text != ".":
        return float(text)
    return text


def _split_field(token: str) -> tuple[str, str] | None:
    key, sep, value = token.partition("=")
    if not sep or not key or not value:
        return None
    return key, value


def parse_fields(tokens: Iterable[str]) -> dict[str, FieldValue]:
    """Parse the well-formed key=value tokens, skipping anything else."""
    fields: dict[str, FieldValue] = {}
    for token in tokens:
        pair = _split_field(token)
        if pair is not None:
            fields[pair[0]] = coerce_value(pair[1])
    return fields


def _require_fields(line: str, tokens: Iterable[str]) -> dict[str, FieldValue]:
    fields: dict[str, FieldValue] = {}
    for token in tokens:
        pair = _split_field(token)
        if pair is None:
            key = token.partition("=")[0]
            raise InvalidValue(
                f"Expected key=value, got {token!r}", line=line, token=token, field=key
            )
        fields[pair[0]] = coerce_value(pair[1])
    return fields


def _parse_address(line: str, text: str) -> NetworkAddress:
    try:
        return NetworkAddress.from_string(text)
    except InvalidAddress as err:
        raise InvalidAddress(str(err), line=line, token=text) from err


def _decode_level(line: str, value: FieldValue) -> int:
    try:
        return raw_to_percent(value)
    except LevelError as err:
        raise InvalidLevel(f"Invalid level {value!r}: {err}", line=line, token=str(value)) from err


# =============================================================================
# Events
# =============================================================================


def parse_event(line: str) -> AnyEvent:
    """Parse an event line.

    Format: #e# <time> <code> <address|cgate|-> <object id|-> <rest>

    Raises:
        ParseError: line violates the event grammar
    """
    if not line.startswith(EVENT_PREFIX):
        raise UnrecognizedFormat(f"Not an event: {line!r}", line=line)

    parts = line[len(EVENT_PREFIX):].split()
    if len(parts) < 4:
        raise Truncated(f"Event is missing header tokens: {line!r}", line=line)
    time, code_text, address_text, object_id = parts[:4]
    rest = parts[4:]

    if not _DIGITS_RE.fullmatch(code_text):
        raise InvalidCode(f"Invalid event code {code_text!r}", line=line, token=code_text)
    if not _TIMESTAMP_RE.fullmatch(time):
        raise InvalidValue(f"Invalid event time {time!r}", line=line, token=time, field="time")
    try:
        net_id, system = parse_address_slot(address_text)
    except InvalidAddress as err:
        raise InvalidAddress(str(err), line=line, token=address_text) from err
    if object_id != NO_VALUE and not _OBJECT_ID_RE.fullmatch(object_id):
        raise InvalidValue(
            f"Invalid object id {object_id!r}", line=line, token=object_id, field="id"
        )

    header = {
        "raw": line,
        "time": time,
        "code": int(code_text),
        "net_id": net_id,
        "id": None if object_id == NO_VALUE else object_id,
        "system": system,
    }

    if rest and rest[0] == SECURITY_TAG:
        return _parse_security_event(line, header, rest[1:])
    if rest and rest[0] == STATE_CHANGE_TAG:
        return _parse_state_change_event(line, header, rest[1:])

    # Everything after the code, e.g. "cgate - Heartbeat."
    message = line[len(EVENT_PREFIX):].split(None, 2)[2]
    _LOGGER.debug("Generic event %s: %s", code_text, message)
    return GenericEvent(**header, fields=parse_fields(rest), message=message)


def _parse_security_event(line: str, header: dict, tokens: list[str]) -> SecurityEvent:
    """Parse the payload of a security application event.

    Format: [security] <token> [<token> ...] sourceUnit=<n>
    """
    source_unit: str | None = None
    if tokens and tokens[-1].startswith(SOURCE_UNIT_KEY + "="):
        source_unit = tokens[-1][len(SOURCE_UNIT_KEY) + 1:]
        tokens = tokens[:-1]

    if not tokens:
        raise EmptyRemainder(f"Security event has no payload: {line!r}", line=line)
    if source_unit is None:
        raise InvalidValue(
            f"Security event is missing {SOURCE_UNIT_KEY}", line=line, field=SOURCE_UNIT_KEY
        )
    value = coerce_value(source_unit)
    if not isinstance(value, int):
        raise InvalidValue(
            f"Invalid {SOURCE_UNIT_KEY} {source_unit!r}",
            line=line,
            token=source_unit,
            field=SOURCE_UNIT_KEY,
        )

    return SecurityEvent(
        **header,
        application=SECURITY_APPLICATION,
        level=ZONE_LEVELS.get(tokens[0]),
        remainder=tuple(tokens),
        fields={SOURCE_UNIT_KEY: value},
    )


def _parse_state_change_event(line: str, header: dict, tokens: list[str]) -> LevelChangeEvent:
    """Parse the payload of a state change event.

    Format: new level=<raw> [key=value ...]
    """
    fields = _require_fields(line, tokens)
    if LEVEL_KEY not in fields:
        raise MissingLevel(f"State change has no {LEVEL_KEY}: {line!r}", line=line)

    return LevelChangeEvent(
        **header,
        level=_decode_level(line, fields[LEVEL_KEY]),
        fields=fields,
    )


# =============================================================================
# Responses
# =============================================================================


def parse_response(line: str) -> AnyResponse:
    """Parse a command response line.

    Format: [<command id>] <code> <rest>

    Raises:
        ParseError: line violates the response grammar
    """
    match = _RESPONSE_RE.fullmatch(line)
    if not match:
        raise UnrecognizedFormat(f"Not a response: {line!r}", line=line)

    for name in ("command_id", "code"):
        if not _DIGITS_RE.fullmatch(match[name]):
            raise InvalidCode(f"Invalid {name} {match[name]!r}", line=line, token=match[name])

    command_id = int(match["command_id"])
    code = int(match["code"])
    rest = match["rest"]

    ok = _OK_RE.fullmatch(rest) if code == RESPONSE_OK else None
    if ok:
        return OkResponse(
            raw=line,
            command_id=command_id,
            code=code,
            net_id=_parse_address(line, ok["address"]),
        )

    status = _LEVEL_RE.fullmatch(rest) if code == RESPONSE_OBJECT_STATUS else None
    if status:
        return LevelResponse(
            raw=line,
            command_id=command_id,
            code=code,
            net_id=_parse_address(line, status["address"]),
            level=_decode_level(line, coerce_value(status["level"])),
        )

    _LOGGER.debug("Generic response %d to command %d: %s", code, command_id, rest)
    return GenericResponse(raw=line, command_id=command_id, code=code, message=rest)


# =============================================================================
# Parser Registry
# =============================================================================

_PARSERS: dict[LineKind, Callable[[str], AnyMessage]] = {
    LineKind.EVENT: parse_event,
    LineKind.RESPONSE: parse_response,
}
