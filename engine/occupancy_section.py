"""Occupancy section state — one independently edited row set per status."""

import logging
from dataclasses import replace
from typing import Callable, Dict, List

from models.lease import LeaseRow
from models.section import SectionInfo
from engine.input_sanitizer import only_digits, parse_count
from engine.row_derivation import derive_rows
from config.defaults import (
    CATEGORY_COMMERCIAL, CATEGORY_STATUSES,
    DEFAULT_TOTAL_COUNT, DEFAULT_TENANT_COUNT, MIN_TOTAL_COUNT,
    USAGE_RENTED,
)

logger = logging.getLogger(__name__)

InfoRecord = Dict[str, SectionInfo]


def create_initial_info(category: str) -> InfoRecord:
    """Build the default info record: one single-row entry per applicable status."""
    is_commercial = category == CATEGORY_COMMERCIAL
    info = {}
    for status in CATEGORY_STATUSES[category]:
        rows = derive_rows(
            parse_count(DEFAULT_TOTAL_COUNT, MIN_TOTAL_COUNT),
            parse_count(DEFAULT_TENANT_COUNT),
            [],
            status,
            is_commercial,
        )
        info[status] = SectionInfo(
            total_count=DEFAULT_TOTAL_COUNT,
            tenant_count=DEFAULT_TENANT_COUNT,
            lease_rows=tuple(rows),
        )
    return info


class OccupancySection:
    """State container for one residential or commercial section.

    The active status selects which entry of ``info`` the handlers edit;
    the other entries are never touched, so switching back and forth keeps
    whatever was entered under each status. Every handler replaces the
    active entry with a new ``SectionInfo`` instead of mutating it.

    Handlers never raise: raw input is sanitized, not rejected.
    """

    def __init__(self, category: str, initial_status: str):
        if category not in CATEGORY_STATUSES:
            raise ValueError(
                f"Unknown section category: {category}. "
                f"Expected one of: {list(CATEGORY_STATUSES)}"
            )
        if initial_status not in CATEGORY_STATUSES[category]:
            raise ValueError(
                f"Status '{initial_status}' is not valid for a {category} section. "
                f"Expected one of: {CATEGORY_STATUSES[category]}"
            )
        self._category = category
        self._status = initial_status
        self._info = create_initial_info(category)

    @property
    def category(self) -> str:
        return self._category

    @property
    def is_commercial(self) -> bool:
        return self._category == CATEGORY_COMMERCIAL

    @property
    def statuses(self) -> List[str]:
        return list(CATEGORY_STATUSES[self._category])

    @property
    def status(self) -> str:
        return self._status

    @property
    def info(self) -> InfoRecord:
        return dict(self._info)

    @property
    def active_info(self) -> SectionInfo:
        return self._info[self._status]

    def _store(self, status: str, section_info: SectionInfo):
        self._info = {**self._info, status: section_info}

    def _derive(self, total: int, tenants: int, section_info: SectionInfo, status: str) -> tuple:
        return tuple(derive_rows(
            total, tenants, section_info.lease_rows, status, self.is_commercial,
        ))

    # --- Status ---

    def change_status(self, new_status: str):
        """Switch the active status and re-derive its rows from its own counts."""
        if new_status not in self._info:
            logger.warning(
                "Ignoring status '%s' for %s section (valid: %s)",
                new_status, self._category, self.statuses,
            )
            return

        current = self._info[new_status]
        rows = self._derive(
            parse_count(current.total_count, MIN_TOTAL_COUNT),
            parse_count(current.tenant_count),
            current,
            new_status,
        )
        logger.debug("%s section: status %s -> %s", self._category, self._status, new_status)
        self._status = new_status
        self._store(new_status, replace(current, lease_rows=rows))

    # --- Counts ---

    def change_total_count(self, raw_value: str):
        digits = only_digits(raw_value)
        current = self.active_info
        rows = self._derive(
            parse_count(digits, MIN_TOTAL_COUNT),
            parse_count(current.tenant_count),
            current,
            self._status,
        )
        logger.debug("%s/%s: total count -> '%s' (%d rows)",
                     self._category, self._status, digits, len(rows))
        self._store(self._status, replace(current, total_count=digits, lease_rows=rows))

    def commit_total_count(self):
        """Reset an empty or zero total count to the minimum; rows are left as they are."""
        current = self.active_info
        if not current.total_count or parse_count(current.total_count) < MIN_TOTAL_COUNT:
            self._store(self._status, replace(current, total_count=DEFAULT_TOTAL_COUNT))

    def change_tenant_count(self, raw_value: str):
        digits = only_digits(raw_value)
        current = self.active_info
        rows = self._derive(
            parse_count(current.total_count),
            parse_count(digits),
            current,
            self._status,
        )
        logger.debug("%s/%s: tenant count -> '%s' (%d rows)",
                     self._category, self._status, digits, len(rows))
        self._store(self._status, replace(current, tenant_count=digits, lease_rows=rows))

    def commit_tenant_count(self):
        """Reset an empty tenant count to zero; rows are left as they are."""
        current = self.active_info
        if not current.tenant_count:
            self._store(self._status, replace(current, tenant_count=DEFAULT_TENANT_COUNT))

    # --- Individual rows ---

    def _update_row(self, row_id: str, update: Callable[[LeaseRow], LeaseRow]):
        current = self.active_info
        rows = tuple(update(r) if r.id == row_id else r for r in current.lease_rows)
        self._store(self._status, replace(current, lease_rows=rows))

    def change_row_usage(self, row_id: str, new_usage: str):
        def update(row: LeaseRow) -> LeaseRow:
            if new_usage == USAGE_RENTED:
                return replace(row, usage=new_usage)
            # Only rented rows keep deposit and rent
            return replace(row, usage=new_usage, deposit="", rent="")

        self._update_row(row_id, update)

    def change_row_deposit(self, row_id: str, raw_value: str):
        digits = only_digits(raw_value)
        self._update_row(row_id, lambda r: replace(r, deposit=digits))

    def change_row_rent(self, row_id: str, raw_value: str):
        digits = only_digits(raw_value)
        self._update_row(row_id, lambda r: replace(r, rent=digits))

    def change_row_business_registration(self, row_id: str, value: str):
        """Set the business registration of a commercial row.

        Rows without the field (residential sections) are left alone.
        """
        def update(row: LeaseRow) -> LeaseRow:
            if not row.has_business_registration:
                return row
            return replace(row, business_registration=value or "")

        self._update_row(row_id, update)
