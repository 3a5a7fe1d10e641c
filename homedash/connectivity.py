import asyncio
import logging
from typing import Awaitable, Callable

import requests

PROBE_URL = "https://www.gstatic.com/generate_204"
PROBE_TIMEOUT = 3.0

Probe = Callable[[], Awaitable[bool]]
Callback = Callable[[], Awaitable[None]]


def _probe_once(url: str, timeout: float) -> bool:
    try:
        requests.head(url, timeout=timeout, allow_redirects=False)
        return True
    except requests.RequestException:
        return False


async def http_probe(url: str = PROBE_URL, timeout: float = PROBE_TIMEOUT) -> bool:
    return await asyncio.to_thread(_probe_once, url, timeout)


class ConnectivityMonitor:
    """Tracks online state and fires callbacks on transitions only."""

    def __init__(
        self,
        probe: Probe,
        on_online: Callback,
        on_offline: Callback,
        online: bool = True,
    ) -> None:
        self._probe = probe
        self._on_online = on_online
        self._on_offline = on_offline
        self.online = online

    async def check(self) -> bool:
        now_online = await self._probe()
        previous = self.online
        self.online = now_online
        if previous and not now_online:
            logging.warning("Connectivity lost")
            await self._on_offline()
        elif not previous and now_online:
            logging.info("Connectivity restored")
            await self._on_online()
        return now_online
