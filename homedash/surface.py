import logging
import time
from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, List, Optional

from .news import CATEGORIES, DEFAULT_CATEGORY

PANELS = ("weather", "news", "quote", "activity")

NOTIFICATION_TTL = 5.0  # seconds

PANEL_TITLES = {
    "weather": "Weather",
    "news": "Latest News",
    "quote": "Quote of the Moment",
    "activity": "Activity Suggestion",
}


@dataclass(frozen=True)
class Notification:
    message: str
    level: str
    expires_at: float


class Board:
    """In-memory UI surface: four panel regions, a modal slot and toasts."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._panels: Dict[str, str] = {name: "" for name in PANELS}
        self._notifications: List[Notification] = []
        self.modal_message: Optional[str] = None
        self.news_category = DEFAULT_CATEGORY

    def show(self, panel: str, html: str) -> None:
        if panel not in self._panels:
            raise KeyError(f"Unknown panel: {panel}")
        self._panels[panel] = html

    def content(self, panel: str) -> str:
        return self._panels[panel]

    def show_modal(self, message: str) -> None:
        logging.error("Modal: %s", message)
        self.modal_message = message

    def hide_modal(self) -> None:
        self.modal_message = None

    def notify(self, message: str, level: str = "info") -> Notification:
        log = logging.warning if level == "warning" else logging.info
        log("Notification (%s): %s", level, message)
        note = Notification(message=message, level=level, expires_at=self._clock() + NOTIFICATION_TTL)
        self._notifications.append(note)
        return note

    def notifications(self) -> List[Notification]:
        now = self._clock()
        self._notifications = [n for n in self._notifications if n.expires_at > now]
        return list(self._notifications)

    def _category_selector(self) -> str:
        options = "".join(
            f'<option value="{c}"{" selected" if c == self.news_category else ""}>{c.title()}</option>'
            for c in CATEGORIES
        )
        return f'<select id="news-category">{options}</select>'

    def render_page(self) -> str:
        sections = []
        for name in PANELS:
            extra = self._category_selector() if name == "news" else ""
            sections.append(
                f'<section class="panel" id="{name}-panel">'
                f"<h2>{PANEL_TITLES[name]}</h2>{extra}"
                f'<div id="{name}-content">{self._panels[name]}</div>'
                "</section>"
            )
        toasts = "".join(
            f'<div class="notification notification-{escape(n.level)}">'
            f'<i class="fas fa-info-circle"></i><span>{escape(n.message)}</span></div>'
            for n in self.notifications()
        )
        modal = ""
        if self.modal_message:
            modal = (
                '<div id="error-modal" class="modal" style="display: block">'
                f'<p id="error-message">{escape(self.modal_message)}</p>'
                '<button id="retry-btn" class="btn-primary">Retry</button>'
                "</div>"
            )
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en"><head><meta charset="utf-8"><title>Dashboard</title></head>'
            f'<body><main class="dashboard">{"".join(sections)}</main>{modal}{toasts}</body></html>\n'
        )
