from __future__ import annotations

from typing import List

from ..api.client import BackendClient
from ..api.payloads import parse_rows
from .model import Store
from .repository import StoreRepository


class HttpStoreRepository(StoreRepository):
    LIST_PATH = "/store/get"
    CREATE_PATH = "/store/create"

    def __init__(self, client: BackendClient):
        self._client = client

    def list_for_user(self, user_id: int) -> List[Store]:
        data = self._client.post(self.LIST_PATH, {"user_id": int(user_id)})
        return parse_rows(data, Store.from_api, endpoint=self.LIST_PATH)

    def create(self, *, user_id: int, store_name: str, address: str) -> None:
        self._client.post(
            self.CREATE_PATH,
            {"user_id": int(user_id), "store_name": store_name, "address": address},
        )
