from dataclasses import dataclass
from typing import Optional, Union

Reading = Union[int, float, str]  # number, or "unknown" when the source lacks it

UNKNOWN = "unknown"


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherView:
    temperature: int  # °C
    description: str
    humidity: Reading  # percent
    wind_speed: float  # m/s
    pressure: Reading  # hPa
    feels_like: int
    location_label: str
    icon: str


@dataclass(frozen=True)
class NewsArticle:
    title: str
    url: str
    published_at: str  # ISO 8601
    description: Optional[str] = None
    source_name: Optional[str] = None


@dataclass(frozen=True)
class Quote:
    content: str
    author: str = "Unknown"


def price_label(price: float) -> str:
    if price == 0:
        return "Free"
    if price <= 0.3:
        return "$"
    if price <= 0.6:
        return "$$"
    return "$$$"


@dataclass(frozen=True)
class Activity:
    activity: str
    category: str
    participants: int = 1
    price: float = 0.0  # normalized 0.0-1.0
    link: Optional[str] = None

    @property
    def price_label(self) -> str:
        return price_label(self.price)
