from __future__ import annotations

from typing import Protocol

from .model import BlockedPhone


class BlockedPhoneRepository(Protocol):
    def is_blocked(self, phone_number: str) -> bool:
        raise NotImplementedError

    def add(self, record: BlockedPhone) -> None:
        raise NotImplementedError
