from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from facr_scraper.models.match import TableRow
from facr_scraper.utils.misc_utils import extract_uuid, normalize_score

from .html import attr_of, data_cells, make_soup, text_of

OVERALL_SECTION = "Tabulka celková"
MIN_CELLS = 8


def _section_table(soup: BeautifulSoup, header_text: str) -> Optional[Tag]:
    """The standings table that follows the <h3> titled header_text."""
    wanted = header_text.strip().lower()
    for header in soup.find_all("h3"):
        if text_of(header).lower() != wanted:
            continue
        for sibling in header.find_next_siblings("div"):
            classes = sibling.get("class") or []
            if "list" in classes and "tabulky" in classes:
                return sibling.select_one("table.vysledky-tabulky")
        return None
    return None


def parse_standings(html: str, header_text: str = OVERALL_SECTION) -> List[TableRow]:
    """Rows of one standings section; logos are resolved by the caller."""
    table = _section_table(make_soup(html), header_text)
    if table is None:
        return []
    rows: List[TableRow] = []
    for row in table.find_all("tr"):
        cells = data_cells(row)
        if len(cells) < MIN_CELLS:
            continue
        rows.append(
            TableRow(
                rank=text_of(cells[0]),
                team=text_of(cells[1]),
                team_id=extract_uuid(attr_of(cells[1].find("a"), "href")),
                played=text_of(cells[2]),
                wins=text_of(cells[3]),
                draws=text_of(cells[4]),
                losses=text_of(cells[5]),
                score=normalize_score(text_of(cells[6])),
                points=text_of(cells[7]),
            )
        )
    return rows
