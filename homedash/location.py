import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from .api_client import ApiClient
from .errors import Unsupported
from .models import Location

GEOLOCATION_URL = "https://ipapi.co/json/"

Locator = Callable[[], Awaitable[Location]]


def from_ipapi(data: Dict[str, Any]) -> Location:
    return Location(latitude=float(data["latitude"]), longitude=float(data["longitude"]))


def ip_locator(client: ApiClient, timeout: float) -> Locator:
    async def locate() -> Location:
        data = await client.get_json(GEOLOCATION_URL, timeout=timeout)
        return from_ipapi(data)
    return locate


async def current_location(locator: Optional[Locator], default: Location) -> Location:
    """Best-effort device position; any failure yields the default."""
    try:
        if locator is None:
            raise Unsupported("Geolocation is not supported")
        location = await locator()
        logging.info("Located device at %.4f, %.4f", location.latitude, location.longitude)
        return location
    except Unsupported as e:
        logging.debug("%s; using default location", e)
    except Exception as e:
        logging.warning("Geolocation failed: %s", e)
    return default
