"""Domain composite: parsing ``host[:port]`` and rendering it back.

Parsing runs five ordered, fail-fast phases:

1. Split on ``:``; a port segment must be valid before any label work.
2. Split the host on ``.``; the rightmost label sits in the TLD position.
3. ``localhost`` branch: rightmost label is ``localhost`` (any case), every
   other label is a subdomain, and the domain carries no TLD.
4. Normal branch: the rightmost label must be a registered TLD and the next
   label a valid SLD. When that SLD is itself a registered TLD code
   (``co`` in ``example.co.uk``), the label to its left is promoted to the
   domain's *name*; everything further left is a subdomain.
5. The wildcard ``*`` may only appear as the sole subdomain.

INVARIANT: ``tld`` is None iff the SLD is ``localhost`` (for parsed values).
INVARIANT: ``parse(str(d)) == d`` for every parsed ``d``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, TypeVar

from domaddr.domain import registry
from domaddr.domain.address import Address
from domaddr.domain.errors import (
    AddressError,
    InvalidCompositionError,
    MalformedLabelError,
    MalformedPortError,
    SLDParseError,
)
from domaddr.domain.labels import SLD, Label, Subdomain
from domaddr.domain.port import Port
from domaddr.domain.registry import TLDEntry

LOCALHOST = "localhost"

_PORT_SEPARATOR = ":"
_LABEL_SEPARATOR = "."

_L = TypeVar("_L", bound=Label)


class _Components(NamedTuple):
    subdomains: tuple[Subdomain, ...]
    name: Subdomain | None
    sld: SLD
    tld: TLDEntry | None
    port: Port | None


def check_wildcard_exclusive(subdomains: Sequence[Subdomain], raw: str) -> None:
    """Reject a wildcard subdomain that is mixed with other subdomains."""
    if len(subdomains) > 1 and any(s.is_wildcard for s in subdomains):
        msg = f"{raw!r} mixes the wildcard subdomain with other subdomains"
        raise InvalidCompositionError(raw, msg, segment="*")


def _wrap(label_cls: type[_L], raw: str, text: str) -> _L:
    """Build a label, re-raising failures against the full raw input."""
    try:
        return label_cls.parse(text)
    except MalformedLabelError as exc:
        msg = f"cannot parse {raw!r} as a valid domain: {exc}"
        raise type(exc)(raw, msg, segment=text) from exc


def _split(raw: str, *, allow_trailing_dot: bool = True) -> _Components:
    # Phase 1: port
    segments = raw.split(_PORT_SEPARATOR)
    if len(segments) > 2:
        msg = f"cannot parse {raw!r} as a valid domain: more than one ':'"
        raise MalformedLabelError(raw, msg, segment=raw)
    host = segments[0]
    port: Port | None = None
    if len(segments) == 2:
        port_text = segments[1]
        if not Port.validate_text(port_text):
            msg = f"cannot parse {raw!r} as a valid domain: invalid port {port_text!r}"
            raise MalformedPortError(raw, msg, segment=port_text)
        port = Port(number=int(port_text))

    # Phase 2: labels (a single trailing dot marks an absolute name)
    if allow_trailing_dot and len(host) > 1 and host.endswith(_LABEL_SEPARATOR):
        host = host[:-1]
    labels = host.split(_LABEL_SEPARATOR)
    rightmost = labels[-1]

    # Phase 3: localhost
    if rightmost.lower() == LOCALHOST:
        subdomains = tuple(_wrap(Subdomain, raw, text) for text in labels[:-1])
        check_wildcard_exclusive(subdomains, raw)
        return _Components(subdomains, None, _wrap(SLD, raw, rightmost), None, port)

    # Phase 4: TLD, SLD, disambiguation
    try:
        tld = registry.lookup(rightmost)
    except AddressError as exc:
        msg = f"cannot parse {raw!r} as a valid domain: {exc}"
        raise type(exc)(raw, msg, segment=rightmost) from exc

    if len(labels) < 2:
        msg = f"cannot parse {raw!r} as a valid domain: missing second-level domain"
        raise SLDParseError(raw, msg, segment=None)
    sld = _wrap(SLD, raw, labels[-2])

    remaining = labels[:-2]
    name: Subdomain | None = None
    if remaining and sld.is_known_tld():
        name = _wrap(Subdomain, raw, remaining[-1])
        remaining = remaining[:-1]

    subdomains = tuple(_wrap(Subdomain, raw, text) for text in remaining)

    # Phase 5: composition
    check_wildcard_exclusive(subdomains, raw)
    return _Components(subdomains, name, sld, tld, port)


@dataclass(frozen=True)
class Domain(Address):
    """A parsed domain name.

    Attributes:
        subdomains: Labels left of the name/SLD, outermost first.
        sld: Second-level domain (``localhost`` for local domains).
        tld: Registry entry for the TLD, or None for ``localhost``.
        name_label: Label promoted by disambiguation, if any; only set
            beside a TLD-coded SLD.
    """

    subdomains: tuple[Subdomain, ...]
    sld: SLD
    tld: TLDEntry | None = None
    name_label: Subdomain | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "subdomains", tuple(self.subdomains))
        check_wildcard_exclusive(self.subdomains, self.to_string())
        if self.name_label is not None and not self.sld.is_known_tld():
            raw = self.to_string()
            msg = f"{raw!r} has name {self.name_label.value!r} but SLD {self.sld.value!r} is not a TLD code"
            raise InvalidCompositionError(raw, msg, segment=self.name_label.value)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def validate(cls, raw: str, *, allow_trailing_dot: bool = True) -> bool:
        """Whether *raw* parses. Never raises."""
        try:
            _split(raw, allow_trailing_dot=allow_trailing_dot)
        except AddressError:
            return False
        return True

    @classmethod
    def parse(cls, raw: str, *, allow_trailing_dot: bool = True) -> Domain:
        """Parse *raw* (``host[:port]``); the port, if any, is checked and dropped.

        Raises:
            AddressError: A subclass naming the failed phase; ``.raw`` is *raw*.
        """
        return parse_host_port(raw, allow_trailing_dot=allow_trailing_dot).domain

    @classmethod
    def create(
        cls,
        subdomains: Iterable[Subdomain | str],
        sld: SLD | str,
        tld: TLDEntry | str | None = None,
        *,
        name: Subdomain | str | None = None,
    ) -> Domain:
        """Assemble a domain from components.

        Strings are parsed into their label types. Wildcard exclusivity is
        re-checked, and *name* is refused unless the SLD is a TLD code; a
        TLD-less non-localhost domain is accepted as given.
        """
        return cls(
            subdomains=tuple(s if isinstance(s, Subdomain) else Subdomain.parse(s) for s in subdomains),
            sld=sld if isinstance(sld, SLD) else SLD.parse(sld),
            tld=registry.lookup(tld) if isinstance(tld, str) else tld,
            name_label=Subdomain.parse(name) if isinstance(name, str) else name,
        )

    # ------------------------------------------------------------------
    # Address
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """The promoted name label when present, otherwise the SLD."""
        if self.name_label is not None:
            return self.name_label.value
        return self.sld.value

    def is_local(self) -> bool:
        return self.tld is None and self.sld.equals_ignore_case(LOCALHOST)

    def get_bytes(self) -> bytes:
        return self.to_string().encode("ascii")

    def to_string(self, port: Port | int | None = None) -> str:
        parts = [s.value for s in self.subdomains]
        if self.name_label is not None:
            parts.append(self.name_label.value)
        parts.append(self.sld.value)
        if self.tld is not None:
            parts.append(self.tld.code)
        text = _LABEL_SEPARATOR.join(parts)
        if port is None:
            return text
        if isinstance(port, int):
            port = Port.create(port)
        return f"{text}{_PORT_SEPARATOR}{port}"

    def clone(self) -> Domain:
        return dataclasses.replace(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of the components."""
        return {
            "domain": self.to_string(),
            "subdomains": [s.value for s in self.subdomains],
            "name": self.name_label.value if self.name_label is not None else None,
            "sld": self.sld.value,
            "tld": self.tld.model_dump(mode="json") if self.tld is not None else None,
            "local": self.is_local(),
        }


@dataclass(frozen=True)
class HostPort:
    """A parsed domain together with the port it was written with."""

    domain: Domain
    port: Port | None = None

    def __str__(self) -> str:
        return self.domain.to_string(self.port)


def parse_host_port(raw: str, *, allow_trailing_dot: bool = True) -> HostPort:
    """Parse *raw* keeping the port segment."""
    parts = _split(raw, allow_trailing_dot=allow_trailing_dot)
    domain = Domain(
        subdomains=parts.subdomains,
        sld=parts.sld,
        tld=parts.tld,
        name_label=parts.name,
    )
    return HostPort(domain=domain, port=parts.port)
