from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List

from .api_client import ApiClient
from .config import Settings
from .models import NewsArticle
from .resilient import Attempt, FetchResult, resilient_fetch

NEWSAPI_URL = "https://newsapi.org/v2/top-headlines"
PLACEHOLDER_POSTS_URL = "https://jsonplaceholder.typicode.com/posts"

MAX_ARTICLES = 6
POST_EXCERPT_CHARS = 120
PLACEHOLDER_SOURCE = "Sample News"

DEFAULT_CATEGORY = "general"
CATEGORIES = ["general", "business", "entertainment", "health", "science", "sports", "technology"]

SAMPLE_ARTICLES = [
    NewsArticle(
        title="Local library extends weekend opening hours",
        description="Branches across the city will stay open until 8 PM on Saturdays and Sundays starting next month.",
        source_name=PLACEHOLDER_SOURCE,
        published_at="",
        url="https://example.com/news/library-hours",
    ),
    NewsArticle(
        title="Community garden project wins regional award",
        description="Volunteers turned an empty lot into a shared vegetable garden that now supplies a nearby food bank.",
        source_name=PLACEHOLDER_SOURCE,
        published_at="",
        url="https://example.com/news/community-garden",
    ),
    NewsArticle(
        title="New bike lanes open along the river front",
        description="The protected lanes connect the downtown core with the east side parks.",
        source_name=PLACEHOLDER_SOURCE,
        published_at="",
        url="https://example.com/news/bike-lanes",
    ),
]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def from_newsapi(data: Dict[str, Any]) -> List[NewsArticle]:
    articles: List[NewsArticle] = []
    for item in data["articles"][:MAX_ARTICLES]:
        source = item.get("source") or {}
        articles.append(NewsArticle(
            title=item.get("title") or "",
            description=item.get("description") or None,
            source_name=source.get("name"),
            published_at=item.get("publishedAt") or "",
            url=item.get("url") or "",
        ))
    return articles


def from_placeholder_posts(posts: List[Dict[str, Any]]) -> List[NewsArticle]:
    published_at = _now_iso()
    return [
        NewsArticle(
            title=post["title"],
            description=post["body"][:POST_EXCERPT_CHARS] + "...",
            source_name=PLACEHOLDER_SOURCE,
            published_at=published_at,
            url=f"{PLACEHOLDER_POSTS_URL}/{post['id']}",
        )
        for post in posts[:MAX_ARTICLES]
    ]


def sample_news() -> List[NewsArticle]:
    published_at = _now_iso()
    return [replace(a, published_at=published_at) for a in SAMPLE_ARTICLES]


async def fetch_news(client: ApiClient, settings: Settings, category: str = DEFAULT_CATEGORY) -> FetchResult[List[NewsArticle]]:
    def newsapi():
        return client.get_json(NEWSAPI_URL, params={
            "category": category,
            "country": "us",
            "apiKey": settings.news_api_key,
            "pageSize": MAX_ARTICLES,
        })

    def placeholder_posts():
        return client.get_json(PLACEHOLDER_POSTS_URL, params={"_limit": MAX_ARTICLES})

    return await resilient_fetch("news", [
        Attempt("newsapi", newsapi, from_newsapi, enabled=settings.has_news_key),
        Attempt("jsonplaceholder", placeholder_posts, from_placeholder_posts),
    ], sample_news)
