"""Summaries and tabular exports of occupancy sections."""

import io
from dataclasses import dataclass
from typing import Dict, List

import pandas as pd

from engine.input_sanitizer import parse_count
from engine.occupancy_section import OccupancySection
from engine.row_derivation import owner_usage_label
from config.defaults import CATEGORY_LABELS, STATUS_LABELS, USAGE_RENTED, USAGE_VACANT


@dataclass
class SectionSummary:
    category: str
    status: str
    total_rows: int
    rented_rows: int
    vacant_rows: int
    owner_rows: int
    total_deposit: int
    total_monthly_rent: int

    @property
    def vacancy_rate(self) -> float:
        tenantable = self.rented_rows + self.vacant_rows
        return self.vacant_rows / tenantable if tenantable > 0 else 0.0


def summarize_section(section: OccupancySection) -> SectionSummary:
    """Count rows by usage and total the lease amounts of the active status."""
    rows = section.active_info.lease_rows
    owner_label = owner_usage_label(section.is_commercial)
    return SectionSummary(
        category=section.category,
        status=section.status,
        total_rows=len(rows),
        rented_rows=sum(1 for r in rows if r.usage == USAGE_RENTED),
        vacant_rows=sum(1 for r in rows if r.usage == USAGE_VACANT),
        owner_rows=sum(1 for r in rows if r.usage == owner_label),
        total_deposit=sum(parse_count(r.deposit) for r in rows),
        total_monthly_rent=sum(parse_count(r.rent) for r in rows),
    )


def section_to_dataframe(section: OccupancySection) -> pd.DataFrame:
    """Lease rows of the active status as a display table."""
    records = []
    for r in section.active_info.lease_rows:
        record = {
            "No.": r.id,
            "Usage": r.usage,
            "Deposit": r.deposit,
            "Monthly Rent": r.rent,
        }
        if section.is_commercial:
            record["Business Registration"] = r.business_registration or ""
        records.append(record)

    columns = ["No.", "Usage", "Deposit", "Monthly Rent"]
    if section.is_commercial:
        columns.append("Business Registration")
    return pd.DataFrame(records, columns=columns)


def summaries_to_dataframe(summaries: List[SectionSummary]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Section": CATEGORY_LABELS.get(s.category, s.category),
        "Status": STATUS_LABELS.get(s.category, {}).get(s.status, s.status),
        "Rows": s.total_rows,
        "Rented": s.rented_rows,
        "Vacant": s.vacant_rows,
        "Owner": s.owner_rows,
        "Total Deposit": s.total_deposit,
        "Total Monthly Rent": s.total_monthly_rent,
    } for s in summaries])


def export_sections_xlsx(sections: Dict[str, OccupancySection]) -> bytes:
    """Write one worksheet per section and return the workbook bytes."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for category, section in sections.items():
            sheet_name = CATEGORY_LABELS.get(category, category)
            section_to_dataframe(section).to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()
