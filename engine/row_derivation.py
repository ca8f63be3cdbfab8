"""Derive lease table rows from the occupancy status and row counts."""

from typing import List, Optional, Sequence

from models.lease import LeaseRow
from config.defaults import (
    STATUS_RESIDENCE, STATUS_RENT, STATUS_BOTH, STATUS_SELF_USE,
    USAGE_OCCUPIED, USAGE_RENTED, USAGE_VACANT, USAGE_DIRECT_USE,
)


def owner_usage_label(is_commercial: bool) -> str:
    """Label of an owner-occupied row for the section category."""
    return USAGE_DIRECT_USE if is_commercial else USAGE_OCCUPIED


def _owner_row(position: int, is_commercial: bool) -> LeaseRow:
    return LeaseRow(
        id=str(position),
        usage=owner_usage_label(is_commercial),
        deposit="",
        rent="",
        business_registration="" if is_commercial else None,
    )


def _rent_block(
    row_count: int,
    filled_count: int,
    existing_rows: Sequence[LeaseRow],
    is_commercial: bool,
) -> List[LeaseRow]:
    """Rented rows first, then vacant ones.

    Deposit and rent are carried over by position, and only onto rented rows.
    """
    rows = []
    for i in range(row_count):
        existing: Optional[LeaseRow] = existing_rows[i] if i < len(existing_rows) else None
        rented = i < filled_count

        deposit = ""
        rent = ""
        if rented and existing is not None:
            deposit = existing.deposit or ""
            rent = existing.rent or ""

        registration = None
        if is_commercial:
            registration = (existing.business_registration or "") if existing is not None else ""

        rows.append(LeaseRow(
            id=str(i + 1),
            usage=USAGE_RENTED if rented else USAGE_VACANT,
            deposit=deposit,
            rent=rent,
            business_registration=registration,
        ))
    return rows


def derive_rows(
    desired_count: int,
    filled_count: int,
    existing_rows: Sequence[LeaseRow],
    status: str,
    is_commercial: bool = False,
) -> List[LeaseRow]:
    """Build the lease rows for an occupancy status.

    - residence / self-use: every row is owner-occupied, nothing carried over.
    - rent: ``filled_count`` rented rows, the rest vacant.
    - both: the rent block followed by exactly one owner-occupied row.

    Row ids are positional ("1", "2", ...). Unknown statuses return the
    existing rows unchanged.
    """
    if status in (STATUS_RESIDENCE, STATUS_SELF_USE):
        row_count = max(desired_count, filled_count, 1)
        return [_owner_row(i + 1, is_commercial) for i in range(row_count)]

    if status == STATUS_RENT:
        row_count = max(desired_count, filled_count, 1)
        return _rent_block(row_count, filled_count, existing_rows, is_commercial)

    if status == STATUS_BOTH:
        # One row is reserved for the owner and always goes last
        rent_row_count = max(desired_count - 1, filled_count)
        rows = _rent_block(rent_row_count, filled_count, existing_rows, is_commercial)
        rows.append(_owner_row(rent_row_count + 1, is_commercial))
        return rows

    return list(existing_rows)
