# facr_scraper/scrapers/is_scraper.py

from loguru import logger

from facr_scraper.models.club import Competition
from facr_scraper.models.enums import ClubType, Source
from facr_scraper.utils.urls import is_competition_detail_url, is_standings_url

from .base_scraper import BaseScraper


class ISScraper(BaseScraper):
    """Fetches competition detail and standings pages from is.fotbal.cz."""

    source: Source = Source.IS_FOTBAL

    async def fetch_competition_detail(
        self, club_type: ClubType, competition: Competition
    ) -> str:
        url = is_competition_detail_url(club_type, competition.id)
        logger.debug(f"Fetching IS match list for competition {competition.id}")
        html = await self.fetch_html(url)
        self.save_debug_html(
            f"is_comp_{competition.id}_{club_type.sport_param}.html", html
        )
        return html

    async def fetch_standings(self, club_type: ClubType, competition: Competition) -> str:
        url = is_standings_url(club_type, competition.id)
        logger.debug(f"Fetching IS standings for competition {competition.id}")
        return await self.fetch_html(url)
