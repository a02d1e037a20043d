"""Port numbers in ``[0, 65535]`` with IANA range classification."""

from __future__ import annotations

import functools
from typing import Self

from pydantic import BaseModel, Field, ValidationError

from domaddr.domain.errors import MalformedPortError
from domaddr.domain.types import PortType

PORT_MIN = 0
PORT_MAX = 65535

WELL_KNOWN_MAX = 1023
REGISTERED_MAX = 49151


@functools.total_ordering
class Port(BaseModel):
    """A TCP/UDP port number."""

    model_config = {"frozen": True}

    number: int = Field(ge=PORT_MIN, le=PORT_MAX)

    @classmethod
    def validate_text(cls, text: str) -> bool:
        """Whether *text* is a decimal port number in range."""
        if not text.isascii() or not text.isdigit():
            return False
        return PORT_MIN <= int(text) <= PORT_MAX

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse decimal *text*, raising MalformedPortError when invalid."""
        if not cls.validate_text(text):
            msg = f"cannot parse {text!r} as a port (must be between {PORT_MIN} and {PORT_MAX})"
            raise MalformedPortError(text, msg, segment=text)
        return cls(number=int(text))

    @classmethod
    def create(cls, number: int) -> Self:
        try:
            return cls(number=number)
        except ValidationError as exc:
            msg = f"port number {number} is out of range ({PORT_MIN}-{PORT_MAX})"
            raise MalformedPortError(str(number), msg, segment=str(number)) from exc

    @property
    def port_type(self) -> PortType:
        if self.number <= WELL_KNOWN_MAX:
            return PortType.WELL_KNOWN
        if self.number <= REGISTERED_MAX:
            return PortType.REGISTERED
        return PortType.DYNAMIC_PRIVATE

    def is_in_range(self, low: int, high: int) -> bool:
        return low <= self.number <= high

    def __int__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Port):
            return NotImplemented
        return self.number < other.number
