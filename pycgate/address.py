"""C-Bus network addresses.

C-Gate names objects with a path rooted at the project:

    //SHAC/254/56/116
      |    |   |  └─ group
      |    |   └─ application (56 = lighting)
      |    └─ network
      └─ project

Shorter paths name the project, a network or an application.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .const import (
    ADDRESS_PREFIX,
    ADDRESS_SEPARATOR,
    MAX_ADDRESS_SEGMENTS,
    NO_VALUE,
    SYSTEM_ADDRESS,
)
from .exceptions import InvalidAddress

_LABEL_RE = re.compile(r"[A-Za-z0-9]+")
# No zero padding, so str() gives back exactly what was parsed
_NUMBER_RE = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class NetworkAddress:
    """Hierarchical address of a C-Bus object."""

    project: str
    numbers: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not _LABEL_RE.fullmatch(self.project):
            raise InvalidAddress(f"Invalid project name: {self.project!r}", token=self.project)
        if len(self.numbers) > MAX_ADDRESS_SEGMENTS - 1:
            raise InvalidAddress(f"Too many address segments: {self.numbers}")
        if any(isinstance(n, bool) or not isinstance(n, int) or n < 0 for n in self.numbers):
            raise InvalidAddress(f"Address segments must be non-negative integers: {self.numbers}")

    @classmethod
    def from_string(cls, text: str) -> NetworkAddress:
        """Parse an address like //SHAC/254/56/116.

        Raises:
            InvalidAddress: text is not a 1-4 segment address
        """
        if not text.startswith(ADDRESS_PREFIX):
            raise InvalidAddress(f"Address must start with {ADDRESS_PREFIX}: {text!r}", token=text)

        project, *numbers = text[len(ADDRESS_PREFIX):].split(ADDRESS_SEPARATOR)
        if len(numbers) > MAX_ADDRESS_SEGMENTS - 1:
            raise InvalidAddress(f"Too many address segments: {text!r}", token=text)
        if not _LABEL_RE.fullmatch(project):
            raise InvalidAddress(f"Invalid project name in address: {text!r}", token=text)
        for number in numbers:
            if not _NUMBER_RE.fullmatch(number):
                raise InvalidAddress(f"Invalid segment {number!r} in address: {text!r}", token=text)

        return cls(project=project, numbers=tuple(int(n) for n in numbers))

    @property
    def segments(self) -> tuple[str | int, ...]:
        """Return all segments, project first."""
        return (self.project, *self.numbers)

    @property
    def network(self) -> int | None:
        """Return the network number, if present."""
        return self._number(0)

    @property
    def application(self) -> int | None:
        """Return the application number, if present."""
        return self._number(1)

    @property
    def group(self) -> int | None:
        """Return the group number, if present."""
        return self._number(2)

    def _number(self, index: int) -> int | None:
        if index < len(self.numbers):
            return self.numbers[index]
        return None

    def __str__(self) -> str:
        return ADDRESS_PREFIX + ADDRESS_SEPARATOR.join(str(s) for s in self.segments)


def parse_address_slot(token: str) -> tuple[NetworkAddress | None, bool]:
    """Parse the address slot of an event line.

    Returns:
        (address, is_system) where address is None for "-" and "cgate",
        and is_system is True only for "cgate".
    """
    if token == NO_VALUE:
        return None, False
    if token == SYSTEM_ADDRESS:
        return None, True
    return NetworkAddress.from_string(token), False
