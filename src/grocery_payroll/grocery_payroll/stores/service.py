from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from .model import Store
from .repository import StoreRepository

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(self, stores: StoreRepository):
        self._stores = stores

    def list_stores(self, user_id: int) -> Sequence[Store]:
        return list(self._stores.list_for_user(int(user_id)))

    def create_store(self, *, user_id: int, store_name: str, address: str) -> None:
        store_name = require_non_empty(store_name, "Store name")
        address = require_non_empty(address, "Address")
        self._stores.create(user_id=int(user_id), store_name=store_name, address=address)
        logger.info("Created store %r for user %s", store_name, user_id)
