from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BlockedPhone:
    phone_number: str
    reason: str
    is_blocked: bool = True

    def to_api(self) -> Dict[str, Any]:
        return {"phone_number": self.phone_number, "reason": self.reason, "is_blocked": self.is_blocked}
