"""BaseService: config holder and failure mapping for domaddr services."""

from __future__ import annotations

import logging

from domaddr.config.models import DomaddrConfig
from domaddr.domain.errors import AddressError
from domaddr.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Services take an optional :class:`DomaddrConfig`; defaults apply when omitted."""

    def __init__(self, config: DomaddrConfig | None = None) -> None:
        self._config = config or DomaddrConfig()

    @property
    def config(self) -> DomaddrConfig:
        return self._config

    @staticmethod
    def _failure(op: str, exc: AddressError, warnings: list[str] | None = None) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError.from_address_error(exc),
        )
