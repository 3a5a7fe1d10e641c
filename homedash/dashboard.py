import asyncio
import logging
import time
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

from . import views
from .activity import fetch_activity
from .api_client import ApiClient, describe_error
from .config import Settings
from .connectivity import ConnectivityMonitor, Probe, http_probe
from .location import Locator, current_location, ip_locator
from .models import Location
from .news import DEFAULT_CATEGORY, fetch_news
from .quotes import fetch_quote
from .resilient import FetchResult, Tier
from .surface import PANELS, Board
from .weather import fetch_weather

INIT_FAILURE_MESSAGE = "Failed to initialize the dashboard. Please refresh the page."
OFFLINE_MESSAGE = "You are offline. Some features may not work."
ONLINE_MESSAGE = "Back online! Refreshing data..."


class PanelState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    RENDERED_FALLBACK = "rendered_fallback"
    RENDERED_SAMPLE = "rendered_sample"
    FAILED = "failed"


STATE_BY_TIER = {
    Tier.PRIMARY: PanelState.RENDERED,
    Tier.SECONDARY: PanelState.RENDERED_FALLBACK,
    Tier.SAMPLE: PanelState.RENDERED_SAMPLE,
}


class Dashboard:
    def __init__(
        self,
        settings: Settings,
        board: Board,
        client: Optional[ApiClient] = None,
        locator: Optional[Locator] = None,
        probe: Optional[Probe] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings
        self.board = board
        self.client = client or ApiClient(timeout=settings.request_timeout)
        if locator is None and settings.geolocation_enabled:
            locator = ip_locator(self.client, settings.geolocation_timeout)
        self._locator = locator
        self.location = Location(settings.default_latitude, settings.default_longitude)
        self.news_category = DEFAULT_CATEGORY
        self.states: Dict[str, PanelState] = {name: PanelState.IDLE for name in PANELS}
        self.connectivity = ConnectivityMonitor(
            probe or http_probe,
            on_online=self._went_online,
            on_offline=self._went_offline,
        )
        self._clock = clock
        self._last_refresh = clock()

    async def _load_panel(
        self,
        panel: str,
        pipeline: Callable[[], Awaitable[FetchResult[Any]]],
        render: Callable[[Any], str],
    ) -> PanelState:
        self.states[panel] = PanelState.LOADING
        self.board.show(panel, views.loading_block(panel))
        try:
            result = await pipeline()
            html = render(result.value)
        except Exception as e:
            logging.exception("Error in %s panel", panel)
            self.board.show(panel, views.error_block(describe_error(e)))
            state = PanelState.FAILED
        else:
            self.board.show(panel, html)
            state = STATE_BY_TIER[result.tier]
            logging.info("%s rendered from %s", panel, result.source)
        self.states[panel] = state
        return state

    async def load_weather(self) -> PanelState:
        location = self.location
        return await self._load_panel(
            "weather",
            lambda: fetch_weather(self.client, self.settings, location),
            views.render_weather,
        )

    async def load_news(self, category: Optional[str] = None) -> PanelState:
        if category:
            self.news_category = category
            self.board.news_category = category
        selected = self.news_category
        return await self._load_panel(
            "news",
            lambda: fetch_news(self.client, self.settings, selected),
            views.render_news,
        )

    async def load_quote(self) -> PanelState:
        return await self._load_panel("quote", lambda: fetch_quote(self.client), views.render_quote)

    async def load_activity(self) -> PanelState:
        return await self._load_panel("activity", lambda: fetch_activity(self.client), views.render_activity)

    async def change_news_category(self, category: str) -> PanelState:
        return await self.load_news(category)

    async def load_all(self) -> Dict[str, PanelState]:
        loaders = [self.load_weather(), self.load_news(), self.load_quote(), self.load_activity()]
        outcomes = await asyncio.gather(*loaders, return_exceptions=True)
        results: Dict[str, PanelState] = {}
        for panel, outcome in zip(PANELS, outcomes):
            if isinstance(outcome, BaseException):
                logging.error("%s panel load raised: %s", panel, outcome)
                results[panel] = PanelState.FAILED
            else:
                results[panel] = outcome
        return results

    async def locate(self) -> Location:
        default = Location(self.settings.default_latitude, self.settings.default_longitude)
        self.location = await current_location(self._locator, default)
        return self.location

    async def start(self) -> bool:
        started = time.perf_counter()
        try:
            await self.locate()
            await self.load_all()
            self._last_refresh = self._clock()
        except Exception:
            logging.exception("Failed to initialize dashboard")
            self.board.show_modal(INIT_FAILURE_MESSAGE)
            return False
        logging.info("Dashboard initialized in %.2fms", (time.perf_counter() - started) * 1000)
        return True

    async def retry(self) -> Dict[str, PanelState]:
        self.board.hide_modal()
        return await self.load_all()

    async def _went_offline(self) -> None:
        self.board.notify(OFFLINE_MESSAGE, "warning")

    async def _went_online(self) -> None:
        self.board.notify(ONLINE_MESSAGE, "success")
        await self.load_all()
        self._last_refresh = self._clock()

    async def tick(self) -> bool:
        """Check connectivity, then refresh everything if the interval has passed.

        Returns True when this step triggered a periodic refresh.
        """
        was_online = self.connectivity.online
        online = await self.connectivity.check()
        if not (online and was_online):
            # offline, or the online transition already reloaded everything
            return False
        if self._clock() - self._last_refresh < self.settings.refresh_interval:
            return False
        await self.load_all()
        self._last_refresh = self._clock()
        logging.info("Auto-refreshed data")
        return True

    async def run_forever(self) -> None:
        await self.start()
        interval = max(1.0, min(self.settings.connectivity_interval, self.settings.refresh_interval))
        while True:
            await asyncio.sleep(interval)
            await self.tick()
