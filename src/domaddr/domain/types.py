"""Classification enums for TLDs, ports, and parse failures."""

from __future__ import annotations

from enum import StrEnum


class TLDType(StrEnum):
    """Root zone classification of a top-level domain."""

    GENERIC = "generic"
    SPONSORED = "sponsored"
    COUNTRY_CODE = "country-code"
    INFRASTRUCTURE = "infrastructure"
    GENERIC_RESTRICTED = "generic-restricted"
    TEST = "test"


class PortType(StrEnum):
    """IANA port number ranges."""

    WELL_KNOWN = "well-known"
    REGISTERED = "registered"
    DYNAMIC_PRIVATE = "dynamic-private"


class ParseErrorKind(StrEnum):
    """Failure categories surfaced by parsing and construction."""

    MALFORMED_PORT = "malformed_port"
    MALFORMED_LABEL = "malformed_label"
    UNKNOWN_TLD = "unknown_tld"
    INVALID_COMPOSITION = "invalid_composition"
