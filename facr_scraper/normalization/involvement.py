from typing import Iterable, List, Optional

from loguru import logger

from facr_scraper.models.club import ClubContext
from facr_scraper.models.match import Match

from .names import contains_fold, equals_fold, normalize_name, simplify_club_name


def team_matches_club(team_name: str, club_name: str) -> bool:
    """Name-based match between one side of a row and the queried club.

    Full-name equality or containment in either direction first, then the
    simplified token of the club name inside the team name.
    """
    if not normalize_name(club_name) or not normalize_name(team_name):
        return False
    if (
        equals_fold(team_name, club_name)
        or contains_fold(team_name, club_name)
        or contains_fold(club_name, team_name)
    ):
        return True
    token = simplify_club_name(club_name)
    return bool(token) and contains_fold(team_name, token)


def _id_matches(team_id: Optional[str], club_id: str) -> bool:
    return bool(team_id) and equals_fold(team_id, club_id)


def is_involved(match: Match, club: ClubContext) -> bool:
    """Whether a row concerns the queried club.

    A known team id decides first since display names collide across
    same-named clubs. An empty club context admits every row.
    """
    if club.is_empty:
        return True
    club_id = club.club_id.strip()
    if club_id and (_id_matches(match.home_id, club_id) or _id_matches(match.away_id, club_id)):
        return True
    if not club.club_name.strip():
        return False
    return team_matches_club(match.home, club.club_name) or team_matches_club(
        match.away, club.club_name
    )


def backfill_team_ids(match: Match, club: ClubContext) -> None:
    """Assigns the club id to a side that has none but names the club."""
    if club.is_empty or not club.club_id.strip():
        return
    if not match.home_id and team_matches_club(match.home, club.club_name):
        match.home_id = club.club_id
    if not match.away_id and team_matches_club(match.away, club.club_name):
        match.away_id = club.club_id


def filter_for_club(matches: Iterable[Match], club: ClubContext) -> List[Match]:
    """Keeps the rows involving the club and backfills their missing ids."""
    kept: List[Match] = []
    total = 0
    for match in matches:
        total += 1
        if not is_involved(match, club):
            continue
        backfill_team_ids(match, club)
        kept.append(match)
    logger.debug(
        f"Involvement filter for '{club.club_name or club.club_id}': kept {len(kept)} of {total} rows"
    )
    return kept
