"""
scrapco_admin.services.rates

Versioned scrap rate management.

Responsibilities:
- Project the currently active rate per scrap type (latest effective_from wins).
- Set a new rate by deactivating the active row(s) and inserting a new active row.

Invariant: at most one `scrap_rates` row per `scrap_type_id` has `is_active = true`.
Old rows are deactivated, never deleted, so price history is retained.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any

from scrapco_admin.data_service.client import DataService, Row
from scrapco_admin.errors import UpstreamError, ValidationError, upstream_errors
from scrapco_admin.observability.logging import get_logger
from scrapco_admin.services.validation import text, to_number

log = get_logger(__name__)

RATES_TABLE = "scrap_rates"
RATE_COLUMNS = "id,scrap_type_id,rate_per_kg,effective_from,is_active"

# Rows without a usable effective_from sort before every dated row.
EARLIEST = datetime.min.replace(tzinfo=UTC)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def parse_instant(value: Any) -> datetime:
    if isinstance(value, datetime):
        instant = value
    elif not value:
        return EARLIEST
    else:
        try:
            instant = datetime.fromisoformat(str(value))
        except ValueError:
            return EARLIEST
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant


def _id_key(row: Row) -> tuple[int, int, str]:
    row_id = row.get("id")
    if isinstance(row_id, int) and not isinstance(row_id, bool):
        return (0, row_id, "")
    return (1, 0, "" if row_id is None else str(row_id))


def recency_key(row: Row) -> tuple[datetime, tuple[int, int, str]]:
    """
    Ordering used to pick the active rate: effective_from first, then row id.

    The id tie-break makes equal timestamps resolve the same way regardless of the
    order rows arrive in.
    """

    return (parse_instant(row.get("effective_from")), _id_key(row))


def latest_by_scrap_type(rows: Iterable[Row]) -> dict[Any, Row]:
    latest: dict[Any, Row] = {}
    for row in rows:
        scrap_type_id = row.get("scrap_type_id")
        prev = latest.get(scrap_type_id)
        # Later-or-equal wins.
        if prev is None or recency_key(row) >= recency_key(prev):
            latest[scrap_type_id] = row
    return latest


class RateManager:
    def __init__(
        self,
        client: DataService,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._client = client
        self._clock = clock

    async def active_rates(self) -> dict[Any, Row]:
        with upstream_errors():
            rows = await self._client.select_rows(
                RATES_TABLE,
                columns=RATE_COLUMNS,
                filters={"is_active": True},
            )
        return latest_by_scrap_type(rows or [])

    async def set_rate(self, scrap_type_id: Any, rate_per_kg: Any) -> Row:
        scrap_type = text(scrap_type_id)
        if not scrap_type:
            raise ValidationError("scrapTypeId is required")
        rate = to_number(rate_per_kg)
        if rate is None or rate <= 0:
            raise ValidationError("ratePerKg must be a positive number")

        # Two sequential requests, not a transaction. If the insert fails the scrap
        # type has no active rate until the next successful set_rate.
        with upstream_errors():
            await self._client.update_rows(
                RATES_TABLE,
                {"is_active": False},
                filters={"scrap_type_id": scrap_type, "is_active": True},
                returning="id",
            )

        row = {
            "scrap_type_id": scrap_type,
            "rate_per_kg": rate,
            "is_active": True,
            "effective_from": self._clock().isoformat(),
        }
        try:
            with upstream_errors():
                inserted = await self._client.insert_rows(RATES_TABLE, [row])
            if not inserted:
                raise UpstreamError("scrap rate insert returned no rows")
        except UpstreamError:
            log.warning("scrap_rate_left_without_active_row", scrap_type_id=scrap_type)
            raise

        log.info("scrap_rate_set", scrap_type_id=scrap_type, rate_per_kg=rate)
        return inserted[0]


def rate_view(row: Row) -> dict[str, Any]:
    return {
        "scrapTypeId": row.get("scrap_type_id"),
        "ratePerKg": row.get("rate_per_kg"),
        "effectiveFrom": row.get("effective_from"),
    }


# --- Module Notes -----------------------------------------------------------
# A server-side function wrapping both steps in one transaction would close the
# window where concurrent set_rate calls leave zero or two active rows.
