import random
from typing import Any, Dict, List

from .api_client import ApiClient
from .models import Quote
from .resilient import Attempt, FetchResult, resilient_fetch

QUOTABLE_URL = "https://api.quotable.io/random"
TYPEFIT_URL = "https://type.fit/api/quotes"

# quotable answers quickly or not at all
QUOTABLE_TIMEOUT = 5.0

SAMPLE_QUOTES = [
    Quote(content="The only way to do great work is to love what you do.", author="Steve Jobs"),
    Quote(content="Life is what happens when you're busy making other plans.", author="John Lennon"),
]


def _author(value: Any) -> str:
    if not value:
        return "Unknown"
    # type.fit appends its own name to every author
    author = str(value).replace(", type.fit", "").strip()
    return author or "Unknown"


def from_quotable(data: Dict[str, Any]) -> Quote:
    return Quote(content=data["content"], author=_author(data.get("author")))


def from_typefit(data: List[Dict[str, Any]]) -> Quote:
    entry = random.choice(data)
    return Quote(content=entry["text"], author=_author(entry.get("author")))


def sample_quote() -> Quote:
    return random.choice(SAMPLE_QUOTES)


async def fetch_quote(client: ApiClient) -> FetchResult[Quote]:
    return await resilient_fetch("quote", [
        Attempt("quotable", lambda: client.get_json(QUOTABLE_URL, timeout=QUOTABLE_TIMEOUT), from_quotable),
        Attempt("type.fit", lambda: client.get_json(TYPEFIT_URL), from_typefit),
    ], sample_quote)
