"""DNS label value types: Label, SLD, and Subdomain.

A label is 1-63 characters of ``[A-Za-z0-9-]`` that neither starts nor ends
with a hyphen. Text is kept exactly as given; equality and hashing ignore
case. Labels of different classes never compare equal.

Examples:
    >>> SLD.parse("Example") == SLD.parse("example")
    True
    >>> Subdomain.validate("*")
    True
    >>> SLD.validate("-bad")
    False
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Self

from domaddr.domain import registry
from domaddr.domain.errors import (
    LabelParseError,
    MalformedLabelError,
    SLDParseError,
    SubdomainParseError,
)

LABEL_PATTERN = re.compile(r"(?!-)[A-Za-z0-9-]{1,63}(?<!-)")

WILDCARD = "*"


@dataclass(frozen=True, eq=False)
class Label:
    """A single validated DNS label."""

    value: str

    _kind: ClassVar[str] = "label"
    _error: ClassVar[type[MalformedLabelError]] = LabelParseError

    def __post_init__(self) -> None:
        if not self.validate(self.value):
            msg = f"cannot parse {self.value!r} as a valid {self._kind}"
            raise self._error(self.value, msg, segment=self.value)

    @classmethod
    def validate(cls, value: str) -> bool:
        return LABEL_PATTERN.fullmatch(value) is not None

    @classmethod
    def parse(cls, value: str) -> Self:
        """Validate *value* and wrap it, raising a MalformedLabelError subclass."""
        return cls(value)

    def equals_ignore_case(self, other: str) -> bool:
        return self.value.lower() == other.lower()

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value.lower() == other.value.lower()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value.lower()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class SLD(Label):
    """Second-level domain: the label immediately left of the TLD."""

    _kind: ClassVar[str] = "SLD"
    _error: ClassVar[type[MalformedLabelError]] = SLDParseError

    def is_known_tld(self) -> bool:
        """Whether this SLD's text is itself a registered TLD code.

        Drives the name/SLD disambiguation in :mod:`domaddr.domain.names`.
        """
        return registry.is_known(self.value)


@dataclass(frozen=True, eq=False, repr=False)
class Subdomain(Label):
    """Label left of the SLD. Also accepts the wildcard ``*``."""

    _kind: ClassVar[str] = "subdomain"
    _error: ClassVar[type[MalformedLabelError]] = SubdomainParseError

    WWW: ClassVar[Subdomain]
    WILDCARD: ClassVar[Subdomain]

    @classmethod
    def validate(cls, value: str) -> bool:
        return value == WILDCARD or super().validate(value)

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD


Subdomain.WWW = Subdomain("www")
Subdomain.WILDCARD = Subdomain(WILDCARD)
