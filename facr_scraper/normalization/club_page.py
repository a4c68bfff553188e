from typing import List

from bs4 import BeautifulSoup
from loguru import logger

from facr_scraper.models.club import ClubInfo, Competition, SearchResult
from facr_scraper.models.enums import ClubType
from facr_scraper.utils.misc_utils import last_path_segment
from facr_scraper.utils.urls import (
    absolute_fotbal_url,
    club_logo_url,
    club_page_url,
    competition_page_url,
)

from .html import attr_of, data_cells, make_soup, text_of

INTERNAL_ID_HEADER = "ID klubu"


def _internal_id(soup: BeautifulSoup) -> str:
    for section in soup.find_all("section"):
        if text_of(section.select_one("h3 span")) == INTERNAL_ID_HEADER:
            return text_of(section.select_one("ul li"))
    return ""


def _address(soup: BeautifulSoup) -> str:
    address = text_of(soup.select_one(".ClubAddress p"))
    if address:
        return address
    first_section = soup.find("section")
    if first_section is None:
        return ""
    return text_of(first_section.select_one("ul li"))


def parse_competitions(soup: BeautifulSoup, club_type: ClubType) -> List[Competition]:
    """Reads the club's competition list (code, name link, team count)."""
    competitions: List[Competition] = []
    for row in soup.select("table.Table tr"):
        cells = data_cells(row)
        if len(cells) < 2:
            continue
        link = cells[1].find("a")
        href = attr_of(link, "href")
        competition_id = last_path_segment(href) if "/" in href else ""
        competitions.append(
            Competition(
                id=competition_id,
                code=text_of(cells[0]),
                name=text_of(link),
                team_count=text_of(cells[2]) if len(cells) > 2 else "",
                matches_link=competition_page_url(club_type, competition_id),
            )
        )
    return competitions


def parse_club_page(html: str, club_type: ClubType, club_id: str) -> ClubInfo:
    """Builds the club header and competition list from a club page."""
    soup = make_soup(html)
    logo = attr_of(soup.select_one("img.Logo"), "src")
    club = ClubInfo(
        name=text_of(soup.select_one("h1.H4 span")),
        club_id=club_id,
        club_type=club_type,
        club_internal_id=_internal_id(soup),
        url=club_page_url(club_type, club_id),
        logo_url=absolute_fotbal_url(logo) if logo else club_logo_url(club_id),
        address=_address(soup),
        category=club_type.category,
        competitions=parse_competitions(soup, club_type),
    )
    logger.debug(
        f"Parsed club page for '{club.name}' ({club_id}) with {len(club.competitions)} competitions"
    )
    return club


def parse_search_results(html: str) -> List[SearchResult]:
    """Reads the result list of the fotbal.cz club search page."""
    soup = make_soup(html)
    results: List[SearchResult] = []
    for item in soup.select("li.ListItemSplit"):
        link = item.select_one("a.Link--inverted")
        href = attr_of(link, "href")
        if not href:
            continue
        name = text_of(link.select_one("span.H7")) or text_of(link)
        club_type = ClubType.FUTSAL if "/futsal/" in href.lower() else ClubType.FOOTBALL
        results.append(
            SearchResult(
                name=name,
                club_id=last_path_segment(href),
                club_type=club_type,
                url=absolute_fotbal_url(href),
                logo_url=attr_of(link.find("img"), "src"),
                category=text_of(item.select_one(".ClubCategories .BadgeCategory")),
                address=text_of(item.select_one(".ClubAddress p")),
            )
        )
    return results
