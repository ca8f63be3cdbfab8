from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LeaseRow:
    id: str                       # 1-based position, regenerated on every derivation
    usage: str                    # "Occupied", "Rented", "Vacant", "Direct Use"
    deposit: str = ""             # digit string, empty when not applicable
    rent: str = ""                # digit string, empty when not applicable
    business_registration: Optional[str] = None  # commercial sections only

    @property
    def has_business_registration(self) -> bool:
        return self.business_registration is not None
