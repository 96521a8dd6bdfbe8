from __future__ import annotations

from ..api.client import BackendClient
from ..api.payloads import as_dict
from .model import BlockedPhone
from .repository import BlockedPhoneRepository


class HttpBlockedPhoneRepository(BlockedPhoneRepository):
    CHECK_PATH = "/blocked-phone/check"
    ADD_PATH = "/blocked-phone/add"

    def __init__(self, client: BackendClient):
        self._client = client

    def is_blocked(self, phone_number: str) -> bool:
        data = as_dict(self._client.post(self.CHECK_PATH, {"phone": phone_number}), endpoint=self.CHECK_PATH)
        return data.get("is_blocked") is True

    def add(self, record: BlockedPhone) -> None:
        self._client.post(self.ADD_PATH, record.to_api())
