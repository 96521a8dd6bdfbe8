from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from ..core.constants import SESSION_USER_KEY
from .model import User

logger = logging.getLogger(__name__)


def load_user(session: MutableMapping) -> Optional[User]:
    data = session.get(SESSION_USER_KEY)
    if not data:
        return None
    try:
        return User.from_dict(data)
    except (KeyError, TypeError, ValueError):
        logger.exception("Error parsing user data from session")
        return None


def save_user(session: MutableMapping, user: User) -> None:
    session[SESSION_USER_KEY] = user.to_dict()


def clear_user(session: MutableMapping) -> None:
    session.pop(SESSION_USER_KEY, None)
