from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_API_TIMEOUT


class BackendClient:
    """Client for the payroll backend, one per container.

    Every call is an independent JSON request; there is no retry and no caching.
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def post(self, path: str, payload: dict) -> Any:
        return self._send("POST", path, payload)

    def put(self, path: str, payload: dict) -> Any:
        return self._send("PUT", path, payload)

    def _send(self, method: str, path: str, payload: dict) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s %s", method, url, payload)
        try:
            resp = self._session.request(method, url, json=payload, timeout=self._config.timeout)
        except requests.RequestException as e:
            raise ApiError(f"{method} {path} failed: {e}", endpoint=path) from e

        if not resp.ok:
            raise ApiError(
                f"{method} {path} returned HTTP {resp.status_code}",
                endpoint=path,
                status_code=resp.status_code,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"{method} {path} returned a non-JSON body", endpoint=path, status_code=resp.status_code) from e
