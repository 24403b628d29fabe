"""PageService — planner page lookup by validated date or month."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datectl.domain.formats import FormatId
from datectl.domain.outcomes import Rejected
from datectl.domain.parser import parse_date, parse_month
from datectl.domain.timezones import DEFAULT_TIMEZONE
from datectl.infrastructure.filesystem import daily_page_path, monthly_overview_path, read_page
from datectl.services.base import BaseService
from datectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _pad(value: str | int) -> str:
    return str(value).strip().zfill(2)


class PageService(BaseService):
    """Looks up daily pages and monthly overviews under the pages directory.

    Path components are validated through the strict parser first, so only
    real calendar dates are ever turned into filesystem paths.
    """

    def daily_page(self, year: str | int, month: str | int, day: str | int) -> ServiceResult:
        op = "get_daily_page"
        date_string = f"{str(year).strip()}-{_pad(month)}-{_pad(day)}"
        outcome = parse_date(date_string, DEFAULT_TIMEZONE)
        if isinstance(outcome, Rejected) or outcome.matched_format != FormatId.ISO:
            reason = outcome.reason if isinstance(outcome, Rejected) else "expected YYYY-MM-DD"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_DATE",
                    message=f"Invalid date: {reason}",
                    detail={"date": date_string},
                ),
            )

        moment = outcome.instant
        path = daily_page_path(self._settings.pages_dir, moment.year, moment.month, moment.day)
        return self._lookup(op, path, "date", date_string, "Page not found")

    def monthly_overview(self, year: str | int, month: str | int) -> ServiceResult:
        op = "get_monthly_overview"
        month_string = f"{str(year).strip()}-{_pad(month)}"
        outcome = parse_month(month_string, DEFAULT_TIMEZONE)
        if isinstance(outcome, Rejected) or outcome.matched_format != FormatId.YEAR_MONTH:
            reason = outcome.reason if isinstance(outcome, Rejected) else "expected YYYY-MM"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_MONTH",
                    message=f"Invalid month: {reason}",
                    detail={"month": month_string},
                ),
            )

        moment = outcome.instant
        path = monthly_overview_path(self._settings.pages_dir, moment.year, moment.month)
        return self._lookup(op, path, "month", month_string, "Monthly overview not found")

    @staticmethod
    def _lookup(op: str, path: Path, key: str, value: str, missing: str) -> ServiceResult:
        content = read_page(path)
        if content is None:
            logger.debug("No page at %s", path)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="PAGE_NOT_FOUND",
                    message=missing,
                    detail={key: value, "expected_path": str(path), "exists": False},
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={key: value, "path": str(path), "content": content, "exists": True},
        )
