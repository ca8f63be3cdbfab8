"""Tests for lease row derivation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.lease import LeaseRow
from engine.row_derivation import derive_rows
from config.defaults import (
    STATUS_RESIDENCE, STATUS_RENT, STATUS_BOTH, STATUS_SELF_USE,
    USAGE_OCCUPIED, USAGE_RENTED, USAGE_VACANT, USAGE_DIRECT_USE,
)


def make_row(row_id="1", usage=USAGE_RENTED, deposit="", rent="", registration=None):
    return LeaseRow(row_id, usage, deposit, rent, registration)


def usages(rows):
    return [r.usage for r in rows]


class TestOwnerOccupied:
    def test_residence_row_count(self):
        for desired, filled, expected in [(0, 0, 1), (1, 0, 1), (3, 0, 3), (2, 5, 5)]:
            rows = derive_rows(desired, filled, [], STATUS_RESIDENCE)
            assert len(rows) == expected
            assert all(r.usage == USAGE_OCCUPIED for r in rows)
            assert all(r.deposit == "" and r.rent == "" for r in rows)

    def test_residence_has_no_business_registration(self):
        rows = derive_rows(2, 0, [], STATUS_RESIDENCE)
        assert all(r.business_registration is None for r in rows)

    def test_self_use_commercial_rows(self):
        rows = derive_rows(2, 0, [], STATUS_SELF_USE, is_commercial=True)
        assert usages(rows) == [USAGE_DIRECT_USE, USAGE_DIRECT_USE]
        assert all(r.business_registration == "" for r in rows)

    def test_existing_amounts_are_dropped(self):
        existing = [make_row(deposit="500", rent="50")]
        rows = derive_rows(1, 0, existing, STATUS_RESIDENCE)
        assert rows[0].deposit == ""
        assert rows[0].rent == ""

    def test_ids_are_positional(self):
        rows = derive_rows(3, 0, [], STATUS_RESIDENCE)
        assert [r.id for r in rows] == ["1", "2", "3"]


class TestRent:
    def test_rented_then_vacant(self):
        rows = derive_rows(3, 2, [], STATUS_RENT, False)
        assert usages(rows) == [USAGE_RENTED, USAGE_RENTED, USAGE_VACANT]
        assert all(r.deposit == "" and r.rent == "" for r in rows)

    def test_at_least_one_row(self):
        rows = derive_rows(0, 0, [], STATUS_RENT)
        assert usages(rows) == [USAGE_VACANT]

    def test_tenants_exceed_total(self):
        rows = derive_rows(2, 4, [], STATUS_RENT)
        assert usages(rows) == [USAGE_RENTED] * 4

    def test_amounts_carried_over_by_position(self):
        existing = [
            make_row("1", deposit="500", rent="50"),
            make_row("2", deposit="700", rent="70"),
        ]
        rows = derive_rows(3, 2, existing, STATUS_RENT)
        assert (rows[0].deposit, rows[0].rent) == ("500", "50")
        assert (rows[1].deposit, rows[1].rent) == ("700", "70")
        assert (rows[2].deposit, rows[2].rent) == ("", "")

    def test_row_turning_vacant_loses_amounts(self):
        existing = [
            make_row("1", deposit="500", rent="50"),
            make_row("2", deposit="700", rent="70"),
        ]
        rows = derive_rows(2, 1, existing, STATUS_RENT)
        assert rows[0].deposit == "500"
        assert rows[1].usage == USAGE_VACANT
        assert rows[1].deposit == ""
        assert rows[1].rent == ""

    def test_residential_rows_have_no_business_registration(self):
        rows = derive_rows(2, 1, [], STATUS_RENT)
        assert all(r.business_registration is None for r in rows)

    def test_commercial_rows_keep_business_registration(self):
        existing = [make_row("1", registration="Registered")]
        rows = derive_rows(2, 1, existing, STATUS_RENT, is_commercial=True)
        assert rows[0].business_registration == "Registered"
        assert rows[1].business_registration == ""


class TestBoth:
    def test_owner_row_is_last(self):
        rows = derive_rows(3, 1, [], STATUS_BOTH, False)
        assert usages(rows) == [USAGE_RENTED, USAGE_VACANT, USAGE_OCCUPIED]
        assert rows[-1].id == "3"

    def test_single_unit_is_owner_only(self):
        rows = derive_rows(1, 0, [], STATUS_BOTH)
        assert usages(rows) == [USAGE_OCCUPIED]
        assert rows[0].id == "1"

    def test_tenants_grow_rent_block(self):
        rows = derive_rows(2, 3, [], STATUS_BOTH)
        assert usages(rows) == [USAGE_RENTED] * 3 + [USAGE_OCCUPIED]
        assert rows[-1].id == "4"

    def test_commercial_owner_row(self):
        existing = [make_row("1", deposit="100", rent="10", registration="Registered")]
        rows = derive_rows(2, 1, existing, STATUS_BOTH, is_commercial=True)
        assert usages(rows) == [USAGE_RENTED, USAGE_DIRECT_USE]
        assert rows[0].deposit == "100"
        assert rows[0].business_registration == "Registered"
        assert rows[1].business_registration == ""
        assert rows[1].deposit == ""

    def test_owner_row_never_carries_amounts(self):
        existing = [make_row("1"), make_row("2", deposit="900", rent="90")]
        rows = derive_rows(2, 1, existing, STATUS_BOTH)
        assert rows[1].usage == USAGE_OCCUPIED
        assert rows[1].deposit == ""


class TestDeterminism:
    def test_same_inputs_same_output(self):
        existing = [make_row("1", deposit="500", rent="50")]
        first = derive_rows(3, 1, existing, STATUS_BOTH, True)
        second = derive_rows(3, 1, existing, STATUS_BOTH, True)
        assert first == second

    def test_existing_rows_not_modified(self):
        existing = [make_row("1", deposit="500", rent="50")]
        snapshot = list(existing)
        derive_rows(2, 0, existing, STATUS_RENT)
        assert existing == snapshot

    def test_unknown_status_returns_existing(self):
        existing = [make_row("1", deposit="500"), make_row("2", usage=USAGE_VACANT)]
        assert derive_rows(5, 1, existing, "unknown") == existing


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
