"""BaseService — shared foundation for datectl services.

Every service receives the frozen :class:`DatectlSettings` at
construction time and reads defaults (timezone, display formats, pages
directory) from it. Services hold no other state between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from datectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from datectl.config.settings import DatectlSettings
    from datectl.domain.outcomes import Invalid, Rejected

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class DateService(BaseService):
            def validate_date(self, text: str, timezone: str | None = None) -> ServiceResult:
                tz = self._timezone(timezone)
                ...
    """

    def __init__(self, settings: DatectlSettings) -> None:
        self._settings = settings

    def _timezone(self, timezone: str | None) -> str:
        """Explicit *timezone*, else the configured default."""
        return timezone if timezone is not None else self._settings.dates.default_timezone

    @staticmethod
    def _rejected(
        op: str,
        outcome: Rejected | Invalid,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Translate a core failure into a failed ServiceResult."""
        logger.debug("%s rejected: %s (%s)", op, outcome.reason, outcome.code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=str(outcome.code),
                message=outcome.reason,
                detail=detail or {},
            ),
        )
