from __future__ import annotations

from typing import Protocol, Sequence

from .model import Store


class StoreRepository(Protocol):
    """Store access as seen by the service layer."""

    def list_for_user(self, user_id: int) -> Sequence[Store]:
        raise NotImplementedError

    def create(self, *, user_id: int, store_name: str, address: str) -> None:
        raise NotImplementedError
