from typing import List

from loguru import logger

from facr_scraper.models.match import Match


def reconcile_matches(public_matches: List[Match], is_matches: List[Match]) -> List[Match]:
    """Chooses the authoritative match list of one competition.

    The is.fotbal.cz list wins whenever it has any row, since it carries the
    registered team names; it replaces the public list entirely, even a
    longer one. Lists are never merged.
    """
    if is_matches:
        logger.debug(
            f"Using {len(is_matches)} IS matches over {len(public_matches)} public matches"
        )
        return is_matches
    return public_matches
