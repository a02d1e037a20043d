"""RegistryService: inspect the embedded TLD table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from domaddr.domain import registry
from domaddr.domain.errors import AddressError
from domaddr.domain.registry import TLDEntry
from domaddr.domain.types import TLDType
from domaddr.services.base import BaseService
from domaddr.services.result import ServiceResult
from domaddr.services.telemetry import trace_span, traced


def entry_payload(entry: TLDEntry, *, dates: bool = True) -> dict[str, Any]:
    """JSON-ready view of an entry; *dates* False drops the date fields."""
    if dates:
        return entry.model_dump(mode="json")
    return entry.model_dump(mode="json", exclude={"registered_on", "last_updated_on"})


class RegistryService(BaseService):
    """Lookups, listings, and syntax checks against the TLD registry."""

    @traced
    def show(self, code: str) -> ServiceResult:
        """Look up a single TLD code."""
        op = "tld_show"
        try:
            entry = registry.lookup(code)
        except AddressError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=entry_payload(entry, dates=self.config.registry.show_dates))

    @traced
    def list_entries(
        self,
        *,
        tld_type: TLDType | None = None,
        limit: int | None = None,
    ) -> ServiceResult:
        """List entries sorted by code, optionally filtered by *tld_type*.

        *limit* defaults to ``[registry] list_limit``; 0 means unlimited.
        """
        op = "tld_list"
        show_dates = self.config.registry.show_dates
        if limit is None:
            limit = self.config.registry.list_limit

        with trace_span("registry.entries"):
            selected = registry.entries(tld_type)

        total = len(selected)
        warnings: list[str] = []
        if limit and total > limit:
            selected = selected[:limit]
            warnings.append(f"Showing {limit} of {total} entries")

        data = {
            "items": [entry_payload(e, dates=show_dates) for e in selected],
            "count": len(selected),
            "total": total,
            "type": str(tld_type) if tld_type is not None else None,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def check(self, codes: Iterable[str]) -> ServiceResult:
        """Report syntax validity and registration for each code."""
        op = "tld_check"
        items: list[dict[str, Any]] = []
        for code in codes:
            syntax_ok = registry.validate_syntax(code)
            entry = registry.TLD_REGISTRY.get(registry.normalize_tld(code)) if syntax_ok else None
            items.append(
                {
                    "code": code,
                    "syntax_ok": syntax_ok,
                    "known": entry is not None,
                    "type": str(entry.type) if entry is not None else None,
                }
            )
        data = {
            "items": items,
            "known_count": sum(1 for item in items if item["known"]),
        }
        return ServiceResult(ok=True, op=op, data=data)
