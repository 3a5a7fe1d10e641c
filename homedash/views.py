"""
HTML fragments for the four panels.

Every interpolated value goes through html.escape, so rendering is a pure
function of the view model and safe for untrusted API text.
"""
from datetime import datetime
from html import escape
from typing import Iterable, Optional

from .models import Activity, NewsArticle, Quote, WeatherView

TITLE_LIMIT = 80
DESCRIPTION_LIMIT = 150
ELLIPSIS = "..."

LOADING_MESSAGES = {
    "weather": "Loading weather data...",
    "news": "Loading latest news...",
    "quote": "Loading inspiration...",
    "activity": "Finding activities...",
}


def truncate_text(text: Optional[str], max_length: int) -> str:
    if not text:
        return "No content available"
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def format_date(value: str) -> str:
    """Render an ISO timestamp as e.g. 'Oct 19, 02:30 PM'."""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return value or ""
    return f"{dt:%b} {dt.day}, {dt:%I:%M %p}"


def loading_block(panel: str) -> str:
    message = LOADING_MESSAGES.get(panel, "Loading...")
    return (
        '<div class="loading">'
        '<div class="spinner"></div>'
        f"<p>{escape(message)}</p>"
        "</div>"
    )


def error_block(message: str) -> str:
    return (
        '<div class="error">'
        '<i class="fas fa-exclamation-triangle"></i>'
        "<h3>Oops! Something went wrong</h3>"
        f"<p>{escape(message)}</p>"
        '<button onclick="location.reload()" class="btn-primary">'
        '<i class="fas fa-redo"></i> Reload Page'
        "</button>"
        "</div>"
    )


def _detail(icon: str, label: str, value: str) -> str:
    return (
        '<div class="weather-detail">'
        f'<i class="fas fa-{icon}"></i>'
        f"<div>{label}</div>"
        f"<div>{escape(value)}</div>"
        "</div>"
    )


def render_weather(w: WeatherView) -> str:
    return (
        '<div class="weather-card">'
        f'<div class="weather-icon"><i class="fas fa-{escape(w.icon)}"></i></div>'
        f'<div class="temperature">{w.temperature}°C</div>'
        f'<div class="weather-description">{escape(w.description)}</div>'
        f'<div class="location"><i class="fas fa-map-marker-alt"></i> {escape(w.location_label)}</div>'
        '<div class="weather-details">'
        + _detail("eye", "Feels like", f"{w.feels_like}°C")
        + _detail("tint", "Humidity", f"{w.humidity}%")
        + _detail("wind", "Wind Speed", f"{w.wind_speed} m/s")
        + _detail("thermometer-half", "Pressure", f"{w.pressure} hPa")
        + "</div></div>"
    )


def render_article(article: NewsArticle) -> str:
    title = truncate_text(article.title, TITLE_LIMIT)
    description = truncate_text(article.description or "No description available", DESCRIPTION_LIMIT)
    source = article.source_name or "Unknown Source"
    return (
        '<div class="news-card">'
        f'<h3 class="news-title">{escape(title)}</h3>'
        f'<p class="news-description">{escape(description)}</p>'
        '<div class="news-meta">'
        f'<span><i class="fas fa-newspaper"></i> {escape(source)}</span>'
        f'<span><i class="fas fa-clock"></i> {escape(format_date(article.published_at))}</span>'
        "</div>"
        f'<a href="{escape(article.url)}" target="_blank" rel="noopener noreferrer" class="news-link">'
        '<i class="fas fa-external-link-alt"></i> Read More'
        "</a>"
        "</div>"
    )


def render_news(articles: Iterable[NewsArticle]) -> str:
    return "".join(render_article(a) for a in articles)


def render_quote(quote: Quote) -> str:
    return (
        '<div class="quote-card">'
        f'<p class="quote-text">{escape(quote.content)}</p>'
        f'<p class="quote-author">— {escape(quote.author)}</p>'
        "</div>"
    )


def render_activity(activity: Activity) -> str:
    plural = "s" if activity.participants > 1 else ""
    parts = [
        '<div class="activity-card">',
        f'<h3 class="activity-title">{escape(activity.activity)}</h3>',
        f'<span class="activity-type">{escape(activity.category)}</span>',
        f'<p class="activity-participants"><i class="fas fa-users"></i> {activity.participants} participant{plural}</p>',
        f'<p class="activity-price"><i class="fas fa-dollar-sign"></i> Cost: {activity.price_label}</p>',
    ]
    if activity.link:
        parts.append(
            f'<p><a href="{escape(activity.link)}" target="_blank" rel="noopener noreferrer" '
            'class="news-link">Learn More</a></p>'
        )
    parts.append("</div>")
    return "".join(parts)
