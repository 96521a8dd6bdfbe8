from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Store:
    """A grocery store owned by a user.

    Note: plain data object, no HTTP access here.
    """

    store_id: int
    user_id: int
    store_name: str
    address: str
    is_deleted: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    updated_by: Optional[str] = None

    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "Store":
        return cls(
            store_id=int(row["store_id"]),
            user_id=int(row["user_id"]),
            store_name=row.get("store_name") or "",
            address=row.get("address") or "",
            is_deleted=bool(row.get("is_deleted", False)),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
            updated_by=row.get("updated_by"),
        )
