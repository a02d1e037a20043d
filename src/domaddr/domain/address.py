"""Address ABC: the capability surface every network address provides.

Concrete addresses render to text (optionally with a port), to bytes, and
can report whether they point at the local machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from domaddr.domain.port import Port


class Address(ABC):
    """Abstract base class for network addresses."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short textual identity of the address."""
        ...

    @abstractmethod
    def get_bytes(self) -> bytes:
        """Encoded form of :meth:`to_string`."""
        ...

    @abstractmethod
    def to_string(self, port: Port | None = None) -> str:
        """Render the address, appending ``:<port>`` when *port* is given."""
        ...

    @abstractmethod
    def is_local(self) -> bool: ...

    @abstractmethod
    def clone(self) -> Self: ...

    def is_remote(self) -> bool:
        return not self.is_local()

    def __bytes__(self) -> bytes:
        return self.get_bytes()

    def __str__(self) -> str:
        return self.to_string()
