import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

from facr_scraper.config.settings import settings
from facr_scraper.models.club import ClubInfo, Competition, SearchResponse
from facr_scraper.models.enums import ClubType, Source
from facr_scraper.normalization.normalizer import Normalizer
from facr_scraper.reconciliation.reconciler import reconcile_matches
from facr_scraper.scrapers.base_scraper import ScraperError
from facr_scraper.scrapers.fotbal_scraper import FotbalScraper
from facr_scraper.scrapers.is_scraper import ISScraper
from facr_scraper.scrapers.search_client import SearchApiClient
from facr_scraper.services.logo_resolver import LogoResolver
from facr_scraper.storage.logo_cache import LogoCache

CompetitionWorker = Callable[[ClubInfo, Competition], Awaitable[None]]


class ClubService:
    """Club search, club info with matches, and club standings."""

    def __init__(
        self,
        fotbal: FotbalScraper,
        is_scraper: ISScraper,
        normalizer: Normalizer,
        max_concurrency: Optional[int] = None,
        search_client: Optional[SearchApiClient] = None,
    ):
        self.fotbal = fotbal
        self.is_scraper = is_scraper
        self.normalizer = normalizer
        self.search_client = search_client
        self.max_concurrency = max_concurrency or settings.max_concurrent_competitions

    @classmethod
    def create(cls, cache: Optional[LogoCache] = None) -> "ClubService":
        """Builds the service with its own HTTP clients and a logo cache."""
        search_client = SearchApiClient()
        resolver = LogoResolver(search_client, cache or LogoCache())
        return cls(
            fotbal=FotbalScraper(),
            is_scraper=ISScraper(),
            normalizer=Normalizer(resolver),
            search_client=search_client,
        )

    async def search_clubs(self, query: str) -> SearchResponse:
        results = await self.fotbal.search_clubs(query)
        return SearchResponse(query=query, count=len(results), results=results)

    async def load_club(self, club_type: ClubType, club_id: str) -> ClubInfo:
        """Fetches and parses the club page. Failures propagate to the caller."""
        html = await self.fotbal.fetch_club_page(club_type, club_id)
        return self.normalizer.club_info(html, club_type, club_id)

    async def get_club_info(self, club_type: ClubType, club_id: str) -> ClubInfo:
        club = await self.load_club(club_type, club_id)
        await self._for_each_competition(club, self._attach_matches)
        return club

    async def get_club_tables(self, club_type: ClubType, club_id: str) -> ClubInfo:
        club = await self.load_club(club_type, club_id)
        await self._for_each_competition(club, self._attach_table)
        return club

    async def _for_each_competition(self, club: ClubInfo, worker: CompetitionWorker) -> None:
        """Runs worker for every competition with bounded concurrency.

        Competitions are updated in place, so the response keeps the club
        page's order. A failing competition is logged and left without the
        sub-resource.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(competition: Competition) -> None:
            async with semaphore:
                try:
                    await worker(club, competition)
                except Exception as e:
                    logger.exception(
                        f"Unexpected error processing competition {competition.id} of {club.club_id}: {e}"
                    )

        await asyncio.gather(*(run(c) for c in club.competitions))

    async def _fetch_or_none(self, source: Source, fetch: Awaitable[str], competition: Competition) -> Optional[str]:
        try:
            return await fetch
        except ScraperError as e:
            logger.error(f"{source.value} fetch failed for competition {competition.id}: {e}")
            return None

    async def _attach_matches(self, club: ClubInfo, competition: Competition) -> None:
        context = club.context()
        public_html, is_html = await asyncio.gather(
            self._fetch_or_none(
                Source.FOTBAL_CZ, self.fotbal.fetch_competition_page(competition), competition
            ),
            self._fetch_or_none(
                Source.IS_FOTBAL,
                self.is_scraper.fetch_competition_detail(club.club_type, competition),
                competition,
            ),
        )
        public_matches = (
            await self.normalizer.matches(Source.FOTBAL_CZ, public_html, context)
            if public_html is not None
            else []
        )
        is_matches = (
            await self.normalizer.matches(Source.IS_FOTBAL, is_html, context)
            if is_html is not None
            else []
        )
        matches = reconcile_matches(public_matches, is_matches)
        competition.matches = matches or None
        logger.info(
            f"Competition {competition.id} ({competition.name}): "
            f"public={len(public_matches)} is={len(is_matches)} -> {len(matches)} matches"
        )

    async def _attach_table(self, club: ClubInfo, competition: Competition) -> None:
        html = await self._fetch_or_none(
            Source.IS_FOTBAL,
            self.is_scraper.fetch_standings(club.club_type, competition),
            competition,
        )
        if html is None:
            return
        competition.table = await self.normalizer.standings(html)
        logger.info(
            f"Competition {competition.id} ({competition.name}): {len(competition.table.overall)} standings rows"
        )

    async def close(self) -> None:
        await self.fotbal.close()
        await self.is_scraper.close()
        if self.search_client is not None:
            await self.search_client.close()
