from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging once for the web app and scripts."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
