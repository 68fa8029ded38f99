"""Command builders for the C-Gate protocol.

This module provides typed functions for building C-Gate command lines.
Levels are given in percent and sent as raw C-Bus levels.

Command format: COMMAND <address> [params...]
Terminated with a newline (handled by the session layer).
"""

from __future__ import annotations

from typing import Union

from .address import NetworkAddress
from .levels import percent_to_raw

Address = Union[NetworkAddress, str]


def _address(address: Address) -> str:
    """Return the validated text form of an address."""
    if isinstance(address, NetworkAddress):
        return str(address)
    return str(NetworkAddress.from_string(address))


def ramp(address: Address, percent: int, ramp_time: int = 0) -> str:
    """Build RAMP command.

    Args:
        address: Group address, e.g. //SHAC/254/56/3
        percent: Target level 0-100 percent
        ramp_time: Ramp duration in seconds; 0 switches instantly

    Returns:
        Command string
    """
    command = f"RAMP {_address(address)} {percent_to_raw(percent)}"
    if ramp_time:
        command += f" {ramp_time}s"
    return command


def on(address: Address) -> str:
    """Build ON command."""
    return f"ON {_address(address)}"


def off(address: Address) -> str:
    """Build OFF command."""
    return f"OFF {_address(address)}"


def get_level(address: Address) -> str:
    """Build GET level command.

    C-Gate answers with a 300 response carrying the raw level.
    """
    return f"GET {_address(address)} level"


def noop() -> str:
    """Build NOOP command."""
    return "NOOP"


def tag_command(command_id: int, command: str) -> str:
    """Prefix a command with its id so the response can be matched.

    C-Gate echoes the id in the response: [<id>] <code> ...
    """
    if isinstance(command_id, bool) or not isinstance(command_id, int) or command_id < 0:
        raise ValueError(f"Command id must be a non-negative integer: {command_id!r}")
    return f"[{command_id}] {command}"
