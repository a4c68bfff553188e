from typing import List, Optional, Protocol, Sequence

from loguru import logger

from facr_scraper.models.club import LogoCandidate
from facr_scraper.normalization.names import (
    contains_fold,
    equals_fold,
    normalize_name,
    simplify_club_name,
)
from facr_scraper.storage.logo_cache import LogoCache
from facr_scraper.utils.urls import PLACEHOLDER_LOGO_URL, club_logo_url

# Slots that denote "no opponent this round" rather than a team
NO_OPPONENT_MARKERS = ("volno", "volný los", "volny los", "bye")


class LogoLookup(Protocol):
    async def search(self, query: str) -> Optional[List[LogoCandidate]]:
        """Candidates for a query, or None when the lookup itself failed."""
        ...


def is_no_opponent(team_name: str) -> bool:
    name = normalize_name(team_name)
    return not name or any(marker in name for marker in NO_OPPONENT_MARKERS)


def select_logo(team_name: str, candidates: Sequence[LogoCandidate]) -> str:
    """Picks a logo: exact name, then containment either way, then the first hit."""
    key = normalize_name(team_name)
    rules = (
        lambda c: equals_fold(c.name, team_name),
        lambda c: contains_fold(c.name, key) or contains_fold(key, c.name),
    )
    for rule in rules:
        for candidate in candidates:
            if candidate.logo_url and rule(candidate):
                return candidate.logo_url
    return candidates[0].logo_url if candidates else ""


class LogoResolver:
    """Finds a logo URL for a team by id, by cached search, or falls back to a placeholder."""

    def __init__(self, lookup: LogoLookup, cache: LogoCache):
        self.lookup = lookup
        self.cache = cache

    async def resolve(self, team_name: str, team_id: Optional[str] = None) -> str:
        if is_no_opponent(team_name):
            return PLACEHOLDER_LOGO_URL
        # Ids are unique where names are not, so they never need a lookup
        team_id = (team_id or "").strip()
        if team_id:
            return club_logo_url(team_id)
        logo = await self.search_logo(team_name)
        return logo or PLACEHOLDER_LOGO_URL

    async def search_logo(self, team_name: str) -> str:
        """Searches by simplified token, then by full name; caches the outcome."""
        key = normalize_name(team_name)
        if not key:
            return ""
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        query = simplify_club_name(team_name) or team_name
        candidates = await self.lookup.search(query)
        if not candidates:
            candidates = await self.lookup.search(team_name)
            if candidates is None:
                # Transport failure is not cached so a later request can retry
                logger.warning(f"Logo lookup unavailable for '{team_name}'")
                return ""

        logo = select_logo(team_name, candidates)
        self.cache.set(key, logo)
        return logo
