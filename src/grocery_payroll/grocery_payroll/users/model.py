from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class User:
    """Logged-in user as kept in the session.

    The backend record also carries a password; it is never copied here.
    """

    user_id: int
    full_name: str = ""
    username: str = ""
    email: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=int(data["user_id"]),
            full_name=data.get("full_name") or "",
            username=data.get("username") or "",
            email=data.get("email") or "",
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
