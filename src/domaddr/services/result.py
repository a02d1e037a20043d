"""Result types handed back by every domaddr service.

A bad ``host[:port]`` is data, not an exception: services catch
:class:`AddressError` and return ``ok=False`` with a stable ``error.code``
derived from the failure kind (``MALFORMED_PORT``, ``MALFORMED_LABEL``,
``UNKNOWN_TLD``, ``INVALID_COMPOSITION``). Strict validation adds
``VALIDATION_FAILED``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from domaddr.domain.errors import AddressError


def error_code(exc: AddressError) -> str:
    return str(exc.kind).upper()


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_address_error(cls, exc: AddressError) -> ServiceError:
        """Carry the raw input and offending segment through as ``detail``."""
        return cls(code=error_code(exc), message=str(exc), detail=exc.to_detail())


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``op`` names the call (``parse``, ``validate``, ``tld_show``,
    ``tld_list``, ``tld_check``) and picks the renderer. ``meta`` holds the
    telemetry span tree when tracing is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
