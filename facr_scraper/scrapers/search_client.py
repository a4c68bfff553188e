# facr_scraper/scrapers/search_client.py

from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from facr_scraper.config.settings import settings
from facr_scraper.models.club import LogoCandidate, LogoSearchPayload
from facr_scraper.models.enums import Source

from .base_scraper import BaseScraper, ScraperError


class SearchApiClient(BaseScraper):
    """Queries the club search endpoint of this service for logo candidates."""

    source: Source = Source.SEARCH_API

    def __init__(self, *args, search_url: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.search_url = search_url or settings.search_api_url

    async def search(self, query: str) -> Optional[List[LogoCandidate]]:
        """Returns the candidates for a query, or None when the lookup failed."""
        try:
            response = await self._make_request(
                "GET", self.search_url, params={"q": query}
            )
            payload = LogoSearchPayload.model_validate_json(response.content)
        except ScraperError as e:
            logger.warning(f"Logo search for '{query}' failed: {e}")
            return None
        except ValidationError as e:
            logger.warning(f"Logo search for '{query}' returned an unexpected payload: {e}")
            return None
        return payload.results
