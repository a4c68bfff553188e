# facr_scraper/scrapers/fotbal_scraper.py

from typing import List

from loguru import logger

from facr_scraper.models.club import Competition, SearchResult
from facr_scraper.models.enums import ClubType, Source
from facr_scraper.normalization.club_page import parse_search_results
from facr_scraper.utils.misc_utils import last_path_segment
from facr_scraper.utils.urls import CLUB_SEARCH_URL, club_page_url

from .base_scraper import (
    BROWSER_HEADERS,
    BaseScraper,
    ScraperError,
    UpstreamStatusError,
)

# Headers for the second search attempt
SEARCH_RETRY_HEADERS = {
    "User-Agent": BROWSER_HEADERS["User-Agent"],
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def _quoted_if_short_tokens(query: str) -> str:
    """Wraps the query in quotes when any word has two characters or fewer."""
    if any(len(token) <= 2 for token in query.split()):
        return f'"{query}"'
    return query


class FotbalScraper(BaseScraper):
    """Fetches club, search and competition pages from www.fotbal.cz."""

    source: Source = Source.FOTBAL_CZ
    headers = BROWSER_HEADERS

    async def fetch_club_page(self, club_type: ClubType, club_id: str) -> str:
        """Fetches the club page; errors propagate since nothing works without it."""
        url = club_page_url(club_type, club_id)
        logger.info(f"Fetching {club_type.value} club page {url}")
        return await self.fetch_html(url)

    async def search_clubs(self, query: str) -> List[SearchResult]:
        """Runs the fotbal.cz club search.

        A non-200 answer is retried once, quoting the query when it has very
        short words. A second non-200 answer means no results. Transport
        failures raise ScraperError on the first attempt and a 502
        UpstreamStatusError on the retry.
        """
        try:
            html = await self.fetch_html(
                CLUB_SEARCH_URL,
                params={"q": query},
                headers={"Referer": CLUB_SEARCH_URL},
            )
        except UpstreamStatusError as e:
            logger.warning(f"Club search for '{query}' failed with {e.status_code}, retrying once")
            retry_query = _quoted_if_short_tokens(query)
            try:
                html = await self.fetch_html(
                    CLUB_SEARCH_URL,
                    params={"q": retry_query},
                    headers=SEARCH_RETRY_HEADERS,
                )
            except UpstreamStatusError as retry_error:
                logger.warning(
                    f"Club search retry for '{retry_query}' failed with {retry_error.status_code}; returning no results"
                )
                return []
            except ScraperError as retry_error:
                raise UpstreamStatusError(502, CLUB_SEARCH_URL) from retry_error

        results = parse_search_results(html)
        logger.info(f"Club search for '{query}' returned {len(results)} results")
        return results

    async def fetch_competition_page(self, competition: Competition) -> str:
        html = await self.fetch_html(competition.matches_link)
        self.save_debug_html(
            f"fotbal_comp_{last_path_segment(competition.matches_link)}.html", html
        )
        return html
