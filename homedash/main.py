import asyncio
import logging
import os

from .config import Settings
from .dashboard import Dashboard
from .surface import Board


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

    settings = Settings.from_env()
    if not settings.has_weather_key:
        logging.info("OPENWEATHER_API_KEY not set; weather uses Open-Meteo.")
    if not settings.has_news_key:
        logging.info("NEWS_API_KEY not set; news uses sample posts.")

    board = Board()
    dashboard = Dashboard(settings, board)

    if settings.run_once:
        ok = asyncio.run(dashboard.start())
        print(board.render_page())
        return 0 if ok else 1

    try:
        asyncio.run(dashboard.run_forever())
    except KeyboardInterrupt:
        logging.info("Stopped.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
