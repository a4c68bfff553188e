"""Match rows from the is.fotbal.cz competition detail page (``table.soutez-zapasy``)."""

from typing import List, Optional
from urllib.parse import parse_qs, urlsplit

from bs4 import Tag
from loguru import logger

from facr_scraper.models.club import ClubContext
from facr_scraper.models.match import Match
from facr_scraper.utils.misc_utils import extract_uuid, normalize_score, strip_team_variant
from facr_scraper.utils.urls import match_report_url, resolve_is_url

from .html import attr_of, data_cells, make_soup, text_of
from .involvement import filter_for_club

MIN_CELLS = 5
MATCH_ID_PARAM = "zapas"
REPORT_LINK_MARKER = "zapis-o-utkani-report.aspx"
DELEGATION_LINK_MARKER = "zapas-delegace-report.aspx"


def _match_id_from_href(href: str) -> str:
    values = parse_qs(urlsplit(href).query).get(MATCH_ID_PARAM)
    if values and values[0].strip():
        return values[0].strip()
    return ""


def _parse_row(row: Tag, club: ClubContext) -> Optional[Match]:
    cells = data_cells(row)
    if len(cells) < MIN_CELLS:
        return None

    match_id = report_href = delegation_href = ""
    # Links sit in the last column, whatever optional columns precede it
    for link in cells[-1].find_all("a"):
        href = attr_of(link, "href")
        if not href:
            continue
        match_id = _match_id_from_href(href) or match_id
        if REPORT_LINK_MARKER in href:
            report_href = resolve_is_url(href)
        if DELEGATION_LINK_MARKER in href:
            delegation_href = resolve_is_url(href)
    if not match_id:
        match_id = extract_uuid(attr_of(cells[-1].find("a"), "href"))

    return Match(
        date_time=text_of(cells[0]),
        home=strip_team_variant(text_of(cells[1])),
        home_id=extract_uuid(attr_of(cells[1].find("a"), "href")),
        away=strip_team_variant(text_of(cells[2])),
        away_id=extract_uuid(attr_of(cells[2].find("a"), "href")),
        score=normalize_score(text_of(cells[3])),
        venue=text_of(cells[4]),
        match_id=match_id,
        report_url=report_href or match_report_url(club.club_type, match_id),
        delegation_url=delegation_href,
    )


def parse_is_matches(html: str, club: ClubContext) -> List[Match]:
    """Candidate matches from an IS competition page, filtered for the club."""
    soup = make_soup(html)
    candidates: List[Match] = []
    for row in soup.select("table.soutez-zapasy tr"):
        match = _parse_row(row, club)
        if match is not None:
            candidates.append(match)
    matches = filter_for_club(candidates, club)
    logger.debug(f"IS parse summary: total rows={len(candidates)}, kept={len(matches)}")
    return matches
