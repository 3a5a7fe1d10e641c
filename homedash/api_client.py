import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from .errors import (
    HttpError,
    InvalidPayload,
    NetworkUnreachable,
    NotFound,
    RateLimited,
    RequestTimeout,
    Unauthorized,
)

DEFAULT_TIMEOUT = 8.0

USER_AGENT = "homedash/0.1"

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
}

GENERIC_MESSAGE = "An unexpected error occurred"


def _create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    # One attempt per request; the caller's timeout is the only budget.
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _raise_for_status(resp: requests.Response, url: str) -> None:
    status = resp.status_code
    if 200 <= status < 300:
        return
    if status == 401:
        raise Unauthorized(url)
    if status == 404:
        raise NotFound(url)
    if status == 429:
        raise RateLimited(url)
    raise HttpError(status, resp.reason, url)


class ApiClient:
    """Bounded-timeout JSON GET with uniform error classification.

    The blocking requests call runs in a worker thread and is raced against
    the timeout budget. When the budget elapses first, RequestTimeout is
    raised and whatever response arrives later is dropped unread.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session_factory: Callable[[], requests.Session] = _create_session,
    ) -> None:
        self.timeout = timeout
        self._session_factory = session_factory

    def _get(self, url: str, params: Optional[Dict[str, Any]], timeout: float) -> requests.Response:
        session = self._session_factory()
        try:
            return session.get(url, params=params, timeout=timeout)
        finally:
            session.close()

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        budget = self.timeout if timeout is None else timeout
        logging.debug("GET %s params=%s", url, params)
        try:
            resp = await asyncio.wait_for(
                asyncio.to_thread(self._get, url, params, budget),
                timeout=budget,
            )
        except asyncio.TimeoutError as e:
            raise RequestTimeout(url, budget) from e
        except requests.Timeout as e:
            raise RequestTimeout(url, budget) from e
        except requests.ConnectionError as e:
            raise NetworkUnreachable(f"Network error while fetching {url} ({e})") from e

        _raise_for_status(resp, url)
        try:
            return resp.json()
        except ValueError as e:
            raise InvalidPayload(f"Response from {url} is not valid JSON") from e


def describe_error(error: BaseException) -> str:
    """Map an error to the short message shown to the user."""
    if isinstance(error, RequestTimeout):
        return "Request timed out. Please try again."
    if isinstance(error, NetworkUnreachable):
        return "Network error. Please check your internet connection."
    if isinstance(error, Unauthorized):
        return "Invalid API key. Please check your configuration."
    if isinstance(error, RateLimited):
        return "Rate limit exceeded. Please try again later."
    return str(error) or GENERIC_MESSAGE
