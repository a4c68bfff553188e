import sys

# --- Settings/Logging ---
from facr_scraper.logging.setup import setup_logging
from facr_scraper.config.settings import settings

setup_logging()

from loguru import logger

import uvicorn
from rich import print
from rich.panel import Panel

from facr_scraper.api.app import API_VERSION, create_app

app = create_app()


def main() -> None:
    """Main entry point for the application."""
    print(
        Panel.fit(
            f"FACR Scraper API v{API_VERSION}\n"
            f"Listening on http://{settings.host}:{settings.port}\n"
            f"Logo search via {settings.search_api_url}",
            title="facr-scraper",
        )
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the Loguru intercept installed by setup_logging
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
