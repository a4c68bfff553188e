from typing import List

from loguru import logger

from facr_scraper.models.club import ClubContext, ClubInfo, CompetitionTable
from facr_scraper.models.enums import ClubType, Source
from facr_scraper.models.match import Match
from facr_scraper.services.logo_resolver import LogoResolver

from .club_page import parse_club_page
from .is_matches import parse_is_matches
from .public_matches import parse_public_matches
from .standings import parse_standings


class NormalizationError(Exception):
    """Custom exception for data normalization errors."""

    pass


class Normalizer:
    """Turns fetched fotbal.cz / is.fotbal.cz documents into API models.

    Match adapters filter rows for the queried club and backfill its id
    before logos are resolved, so only kept rows cost a logo lookup.
    """

    def __init__(self, logo_resolver: LogoResolver):
        self.logo_resolver = logo_resolver

    def club_info(self, html: str, club_type: ClubType, club_id: str) -> ClubInfo:
        try:
            return parse_club_page(html, club_type, club_id)
        except (AttributeError, TypeError, ValueError) as e:
            logger.exception(f"Error parsing club page for {club_id}: {e}")
            raise NormalizationError(f"Could not parse club page for {club_id}") from e

    async def matches(self, source: Source, html: str, club: ClubContext) -> List[Match]:
        """Runs the adapter for source; a broken document yields no matches."""
        try:
            if source == Source.FOTBAL_CZ:
                matches = parse_public_matches(html, club)
            elif source == Source.IS_FOTBAL:
                matches = parse_is_matches(html, club)
            else:
                logger.warning(f"Match normalization not implemented for source: {source.value}")
                return []
        except (AttributeError, TypeError, ValueError) as e:
            logger.exception(f"Error normalizing {source.value} matches: {e}")
            return []

        for match in matches:
            match.home_logo_url = await self.logo_resolver.resolve(match.home, match.home_id)
            match.away_logo_url = await self.logo_resolver.resolve(match.away, match.away_id)
        logger.debug(f"Normalized {len(matches)} matches from {source.value}")
        return matches

    async def standings(self, html: str) -> CompetitionTable:
        try:
            rows = parse_standings(html)
        except (AttributeError, TypeError, ValueError) as e:
            logger.exception(f"Error normalizing standings: {e}")
            rows = []
        for row in rows:
            row.team_logo_url = await self.logo_resolver.resolve(row.team, row.team_id)
        return CompetitionTable(overall=rows)
