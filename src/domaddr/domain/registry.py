"""TLD registry: entry model, syntax rules, and the load-once lookup table.

The table is built from :mod:`domaddr.domain._tld_data` exactly once, at
import time, and exposed only through a read-only mapping.

Lookup keys are lowercased with hyphens normalized to underscores, so
``"COM"``, ``"com"`` and ``"Com"`` resolve to the same entry.

INVARIANT: The registry is write-once. No lookup path mutates it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

from pydantic import BaseModel

from domaddr.domain._tld_data import SNAPSHOT_DATE, TLD_ROWS
from domaddr.domain.errors import TLDParseError, UnknownTLDError
from domaddr.domain.types import TLDType

TLD_MIN_LENGTH = 2
TLD_MAX_LENGTH = 63

_FORBIDDEN_RE = re.compile(r"[_0-9@#\"'\\$%]")


class TLDEntry(BaseModel):
    """Descriptor for one delegated top-level domain."""

    model_config = {"frozen": True}

    code: str
    type: TLDType
    provider: str | None = None
    registered_on: date | None = None
    last_updated_on: date

    def __str__(self) -> str:
        return self.code


def normalize_tld(value: str) -> str:
    """Return the registry key for *value*."""
    return value.replace("-", "_").lower()


def validate_syntax(value: str) -> bool:
    """Check the TLD shape without consulting the table.

    Length must be within ``[2, 63]`` and the text must not contain
    underscores, digits, or any of ``@ # " ' \\ $ %``.
    """
    if not TLD_MIN_LENGTH <= len(value) <= TLD_MAX_LENGTH:
        return False
    return _FORBIDDEN_RE.search(value) is None


def is_known(value: str) -> bool:
    """Whether *value* is TLD-shaped and present in the table."""
    return validate_syntax(value) and normalize_tld(value) in TLD_REGISTRY


def lookup(value: str) -> TLDEntry:
    """Resolve *value* to its :class:`TLDEntry`.

    Raises:
        TLDParseError: If *value* fails :func:`validate_syntax`.
        UnknownTLDError: If *value* is well-formed but not in the table.
    """
    if not validate_syntax(value):
        msg = f"cannot parse {value!r} as a valid TLD"
        raise TLDParseError(value, msg, segment=value)
    entry = TLD_REGISTRY.get(normalize_tld(value))
    if entry is None:
        msg = f"{value!r} is not a known TLD"
        raise UnknownTLDError(value, msg, segment=value)
    return entry


def entries(tld_type: TLDType | None = None) -> list[TLDEntry]:
    """All entries sorted by code, optionally restricted to *tld_type*."""
    selected = TLD_REGISTRY.values()
    if tld_type is not None:
        selected = [e for e in selected if e.type == tld_type]
    return sorted(selected, key=lambda e: e.code)


def _load() -> Mapping[str, TLDEntry]:
    table: dict[str, TLDEntry] = {}
    for tld_type, rows in TLD_ROWS:
        for code, provider, registered_on, last_updated_on in rows:
            key = normalize_tld(code)
            if key in table:
                msg = f"Duplicate TLD in embedded table: {code!r}"
                raise ValueError(msg)
            table[key] = TLDEntry(
                code=code,
                type=tld_type,
                provider=provider,
                registered_on=registered_on,
                last_updated_on=last_updated_on or SNAPSHOT_DATE,
            )
    return MappingProxyType(table)


TLD_REGISTRY: Mapping[str, TLDEntry] = _load()
