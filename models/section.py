from dataclasses import dataclass, field
from typing import Tuple

from models.lease import LeaseRow


@dataclass(frozen=True)
class SectionInfo:
    """Counts and lease rows kept for one occupancy status."""
    total_count: str = "1"        # digit string, desired row count
    tenant_count: str = "0"       # digit string, tenanted rows
    lease_rows: Tuple[LeaseRow, ...] = field(default_factory=tuple)
