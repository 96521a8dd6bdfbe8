from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Employee:
    id: int
    store_id: int
    full_name: str
    employee_code: str
    mobile_number: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "Employee":
        return cls(
            id=int(row["id"]),
            store_id=int(row.get("store_id") or 0),
            full_name=row.get("full_name") or "",
            employee_code=row.get("employee_code") or "",
            mobile_number=row.get("mobile_number") or "",
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
