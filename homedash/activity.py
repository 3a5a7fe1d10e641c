import random
from typing import Any, Dict

from .api_client import ApiClient
from .models import Activity
from .resilient import Attempt, FetchResult, resilient_fetch

BORED_API_URL = "https://www.boredapi.com/api/activity"

SAMPLE_ACTIVITIES = [
    Activity(activity="Read a book you've been meaning to read", category="education", participants=1, price=0),
    Activity(activity="Go for a 30-minute walk", category="recreational", participants=1, price=0),
]


def from_bored_api(data: Dict[str, Any]) -> Activity:
    participants = max(1, int(data.get("participants") or 1))
    price = min(1.0, max(0.0, float(data.get("price") or 0)))
    return Activity(
        activity=data["activity"],
        category=data.get("type") or "general",
        participants=participants,
        price=price,
        link=data.get("link") or None,
    )


def sample_activity() -> Activity:
    return random.choice(SAMPLE_ACTIVITIES)


async def fetch_activity(client: ApiClient) -> FetchResult[Activity]:
    return await resilient_fetch("activity", [
        Attempt("boredapi", lambda: client.get_json(BORED_API_URL), from_bored_api),
    ], sample_activity)
