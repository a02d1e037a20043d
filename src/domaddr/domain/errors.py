"""Typed failures raised by the domain layer.

Every failure carries the raw input it was raised for and, where one can be
named, the offending segment (a label or the port text). ``kind`` is the
stable category the service layer turns into a ``ServiceError.code``.

INVARIANT: A failed parse never yields a partially-built Domain.
"""

from __future__ import annotations

from typing import ClassVar

from domaddr.domain.types import ParseErrorKind


class AddressError(ValueError):
    """Base class for every parse or construction failure."""

    kind: ClassVar[ParseErrorKind]

    def __init__(self, raw: str, message: str | None = None, *, segment: str | None = None) -> None:
        self.raw = raw
        self.segment = segment
        super().__init__(message or f"cannot parse {raw!r}")

    def to_detail(self) -> dict[str, str | None]:
        """Structured view for ``ServiceError.detail``."""
        return {"kind": self.kind.value, "raw": self.raw, "segment": self.segment}


class MalformedPortError(AddressError):
    """Port segment is not a decimal number in ``[0, 65535]``."""

    kind = ParseErrorKind.MALFORMED_PORT


class MalformedLabelError(AddressError):
    """A label (or the overall host shape) violates the grammar."""

    kind = ParseErrorKind.MALFORMED_LABEL


class LabelParseError(MalformedLabelError):
    pass


class SLDParseError(MalformedLabelError):
    pass


class SubdomainParseError(MalformedLabelError):
    pass


class TLDParseError(MalformedLabelError):
    pass


class UnknownTLDError(AddressError, LookupError):
    """TLD-shaped label with no entry in the registry."""

    kind = ParseErrorKind.UNKNOWN_TLD


class InvalidCompositionError(AddressError):
    """Components are individually valid but cannot be combined."""

    kind = ParseErrorKind.INVALID_COMPOSITION
