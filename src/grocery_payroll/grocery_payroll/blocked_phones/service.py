from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.exceptions import ApiError
from .model import BlockedPhone
from .repository import BlockedPhoneRepository

logger = logging.getLogger(__name__)


class BlockedPhoneService:
    def __init__(self, blocked: BlockedPhoneRepository):
        self._blocked = blocked

    def is_blocked(self, phone_number: str) -> bool:
        """Current block status; a failed lookup counts as not blocked."""
        try:
            return self._blocked.is_blocked(phone_number)
        except ApiError:
            logger.exception("Error checking blocked phone %s", phone_number)
            return False

    def block(self, phone_number: str, reason: str) -> BlockedPhone:
        record = BlockedPhone(
            phone_number=require_non_empty(phone_number, "Phone number"),
            reason=require_non_empty(reason, "Reason"),
            is_blocked=True,
        )
        self._blocked.add(record)
        logger.info("Blocked phone %s", record.phone_number)
        return record
