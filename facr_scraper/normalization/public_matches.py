"""Match rows from the public fotbal.cz competition page.

Each round is a ``section.js-matchRoundSection`` whose ``li.MatchRound``
entries hold the two team names, crest images (their URLs carry team ids),
the score and a meta block with the kick-off date and the venue.
"""

from typing import List, Optional

from bs4 import Tag

from facr_scraper.models.club import ClubContext
from facr_scraper.models.match import Match
from facr_scraper.utils.misc_utils import extract_uuid, normalize_score, strip_team_variant
from facr_scraper.utils.urls import match_report_url

from .html import attr_of, make_soup, strip_label, text_of
from .involvement import filter_for_club

DATE_LABELS = ("datum",)
VENUE_LABELS = ("hřiště", "hriste")


def _labelled_value(item: Tag, selector: str, labels: tuple) -> str:
    """Text of the first paragraph whose <strong> label starts with one of labels."""
    for paragraph in item.select(selector):
        label = text_of(paragraph.find("strong"))
        if label.lower().startswith(labels):
            return strip_label(text_of(paragraph), label)
    return ""


def _parse_round_item(item: Tag, club: ClubContext) -> Optional[Match]:
    anchor = item.select_one("a.MatchRound-match")
    if anchor is None:
        return None
    # (name, crest id) per side, home first; crest URLs embed the team id
    teams = []
    for side in anchor.select("ul li"):
        name = text_of(side.select_one("span.H7"))
        if name:
            teams.append((name, extract_uuid(attr_of(side.find("img"), "src"))))
    if len(teams) < 2:
        return None

    (home, home_id), (away, away_id) = teams[0], teams[1]
    match_id = extract_uuid(attr_of(anchor, "href"))
    return Match(
        date_time=_labelled_value(item, ".MatchRound-meta p", DATE_LABELS),
        home=strip_team_variant(home),
        home_id=home_id,
        away=strip_team_variant(away),
        away_id=away_id,
        score=normalize_score(text_of(anchor.select_one("strong.H4"))),
        venue=_labelled_value(item, ".js-matchRoundDetails li p", VENUE_LABELS),
        match_id=match_id,
        report_url=match_report_url(club.club_type, match_id),
    )


def parse_public_matches(html: str, club: ClubContext) -> List[Match]:
    """Candidate matches from a public competition page, filtered for the club."""
    soup = make_soup(html)
    candidates: List[Match] = []
    for item in soup.select("section.js-matchRoundSection li.MatchRound"):
        match = _parse_round_item(item, club)
        if match is not None:
            candidates.append(match)
    return filter_for_club(candidates, club)
