"""ParseService: parse and validate ``host[:port]`` inputs."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from domaddr.domain.errors import AddressError
from domaddr.domain.names import HostPort, parse_host_port
from domaddr.services.base import BaseService
from domaddr.services.result import ServiceError, ServiceResult, error_code
from domaddr.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def host_port_payload(raw: str, parsed: HostPort) -> dict[str, Any]:
    """JSON-ready view of a parse, including the port when one was given."""
    domain = parsed.domain
    port: dict[str, Any] | None = None
    if parsed.port is not None:
        port = {"number": parsed.port.number, "type": str(parsed.port.port_type)}
    return {
        "input": raw,
        **domain.to_dict(),
        "address_name": domain.name,
        "port": port,
        "rendered": str(parsed),
    }


class ParseService(BaseService):
    """Parse single inputs or validate batches of them."""

    @traced
    def parse(self, raw: str) -> ServiceResult:
        """Parse *raw* into its components.

        Failures become ``ok=False`` with code ``MALFORMED_PORT``,
        ``MALFORMED_LABEL``, ``UNKNOWN_TLD`` or ``INVALID_COMPOSITION``.
        """
        op = "parse"
        allow_trailing_dot = self.config.parse.allow_trailing_dot
        warnings: list[str] = []

        with trace_span("parse_host_port") as span:
            try:
                parsed = parse_host_port(raw, allow_trailing_dot=allow_trailing_dot)
            except AddressError as exc:
                if span:
                    span.annotate("error", error_code(exc))
                return self._failure(op, exc)

        if allow_trailing_dot and raw.split(":", 1)[0].endswith("."):
            warnings.append(f"Trailing dot dropped from {raw!r}")

        with trace_span("render"):
            data = host_port_payload(raw, parsed)

        logger.debug("parsed %r as %s", raw, data["rendered"])
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def validate(self, inputs: Iterable[str], *, strict: bool = False) -> ServiceResult:
        """Check every input, reporting validity and the failure kind per item.

        With *strict*, any invalid input makes the whole result fail with
        code ``VALIDATION_FAILED``.
        """
        op = "validate"
        allow_trailing_dot = self.config.parse.allow_trailing_dot
        items: list[dict[str, Any]] = []

        with trace_span("validate_inputs") as span:
            for raw in inputs:
                try:
                    parse_host_port(raw, allow_trailing_dot=allow_trailing_dot)
                except AddressError as exc:
                    items.append(
                        {
                            "input": raw,
                            "valid": False,
                            "code": error_code(exc),
                            "segment": exc.segment,
                            "message": str(exc),
                        }
                    )
                else:
                    items.append({"input": raw, "valid": True})
            if span:
                span.annotate("count", len(items))

        invalid = [item["input"] for item in items if not item["valid"]]
        data = {
            "items": items,
            "valid_count": len(items) - len(invalid),
            "invalid_count": len(invalid),
        }

        if strict and invalid:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=f"{len(invalid)} of {len(items)} inputs are invalid",
                    detail={"invalid": invalid},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)
