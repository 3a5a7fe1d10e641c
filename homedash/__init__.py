"""Weather, news, quote and activity panels, each with its own fallback chain."""
from .config import Settings
from .dashboard import Dashboard, PanelState
from .surface import Board

__all__ = [
    "Board",
    "Dashboard",
    "PanelState",
    "Settings",
]
