import os

# Settings are read at import time; keep tests single-shot and off the disk
os.environ["HTTP_MAX_ATTEMPTS"] = "1"
os.environ["HTTP_RETRY_BACKOFF"] = "0"
os.environ["DEBUG_SAVE_HTML"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"

from typing import Dict, List, Optional, Sequence

import pytest

from facr_scraper.models.club import LogoCandidate
from facr_scraper.services.logo_resolver import LogoResolver
from facr_scraper.storage.logo_cache import LogoCache

CLUB_ID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
CLUB_NAME = "TJ Sokol Krnov z.s."
OPPONENT_IDS = [
    "11111111-1111-1111-1111-111111111111",
    "22222222-2222-2222-2222-222222222222",
    "33333333-3333-3333-3333-333333333333",
    "44444444-4444-4444-4444-444444444444",
]
MATCH_IDS = [
    "aaaaaaaa-0000-0000-0000-00000000000%d" % i for i in range(10)
]


class FakeLookup:
    """Logo search stand-in that records every query it receives."""

    def __init__(self, responses: Optional[Dict[str, Optional[List[LogoCandidate]]]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    async def search(self, query: str) -> Optional[List[LogoCandidate]]:
        self.calls.append(query)
        if query in self.responses:
            return self.responses[query]
        return []


def crest(team_id: str) -> str:
    return f'<img src="https://is1.fotbal.cz/media/kluby/{team_id}/{team_id}_crop.jpg">'


def public_match_item(
    home: str,
    away: str,
    match_id: str,
    score: str = "2 : 1",
    home_id: str = "",
    away_id: str = "",
    date: str = "12.08.2023 18:00",
    venue: str = "Stadion Krnov",
) -> str:
    home_img = crest(home_id) if home_id else ""
    away_img = crest(away_id) if away_id else ""
    return f"""
    <li class="MatchRound">
      <a class="MatchRound-match" href="/souteze/zapasy/zapas/{match_id}">
        <ul>
          <li>{home_img}<span class="H7">{home}</span></li>
          <li>{away_img}<span class="H7">{away}</span></li>
        </ul>
        <strong class="H4">{score}</strong>
      </a>
      <div class="MatchRound-meta">
        <p><strong>Datum:</strong> {date}</p>
        <p><strong>Číslo zápasu:</strong> 1234</p>
      </div>
      <ul class="js-matchRoundDetails">
        <li><p><strong>Hřiště:</strong> {venue}</p></li>
      </ul>
    </li>"""


def public_competition_page(items: Sequence[str]) -> str:
    return f"""<html><body>
    <section class="js-matchRoundSection">
      <h2>1. kolo</h2>
      <ul>{''.join(items)}</ul>
    </section>
    </body></html>"""


def is_match_row(
    home: str,
    away: str,
    match_id: str,
    score: str = "3 : 0",
    home_id: str = "",
    away_id: str = "",
    date: str = "12.08.2023 17:00",
    venue: str = "Krnov - tráva",
) -> str:
    def team_cell(name: str, team_id: str) -> str:
        if team_id:
            return f'<td><a href="/public/klub/klub-detail.aspx?id={team_id}">{name}</a></td>'
        return f"<td>{name}</td>"

    return f"""
    <tr>
      <td>{date}</td>
      {team_cell(home, home_id)}
      {team_cell(away, away_id)}
      <td>{score}</td>
      <td>{venue}</td>
      <td>
        <a href="../zapasy/zapis-o-utkani-report.aspx?zapas={match_id}&amp;discipline=fotbal">Zápis</a>
        <a href="/zapasy/zapas-delegace-report.aspx?zapas={match_id}">Delegace</a>
      </td>
    </tr>"""


def is_competition_page(rows: Sequence[str]) -> str:
    return f"""<html><body>
    <table class="soutez-zapasy">
      <tr><th>Datum</th><th>Domácí</th><th>Hosté</th><th>Skóre</th><th>Hřiště</th><th></th></tr>
      <tr><td colspan="3">Kolo 1</td></tr>
      {''.join(rows)}
    </table>
    </body></html>"""


def standings_page() -> str:
    return f"""<html><body>
    <h3>Tabulka doma</h3>
    <div class="list tabulky"><table class="vysledky-tabulky"><tbody>
      <tr><td>1.</td><td>Wrong section</td><td>1</td><td>1</td><td>0</td><td>0</td><td>1:0</td><td>3</td></tr>
    </tbody></table></div>
    <h3> Tabulka celková </h3>
    <p>Stav po 10. kole</p>
    <div class="list tabulky"><table class="vysledky-tabulky"><tbody>
      <tr><th>#</th><th>Klub</th><th>Z</th><th>V</th><th>R</th><th>P</th><th>Skóre</th><th>Body</th></tr>
      <tr><td>1.</td><td><a href="/public/klub/klub-detail.aspx?id={CLUB_ID}">TJ Sokol Krnov</a></td>
          <td>10</td><td>8</td><td>2</td><td>0</td><td>25 : 5</td><td>26</td></tr>
      <tr><td>2.</td><td>FK Bruntál</td>
          <td>10</td><td>7</td><td>2</td><td>1</td><td>20:8</td><td>23</td></tr>
      <tr><td colspan="8">Sestupové pásmo</td></tr>
    </tbody></table></div>
    </body></html>"""


def club_page(club_type_path: str = "souteze") -> str:
    return f"""<html><body>
    <h1 class="H4"><a href="https://www.fotbal.cz/{club_type_path}/club/club/{CLUB_ID}"><span>{CLUB_NAME}</span></a></h1>
    <img class="Logo" src="https://is1.fotbal.cz/media/kluby/{CLUB_ID}/{CLUB_ID}_crop.jpg">
    <div class="ClubAddress"><p>Petrovická 1, 794 01 Krnov</p></div>
    <section><h3><span>ID klubu</span></h3><ul><li>7120021</li></ul></section>
    <table class="Table">
      <thead><tr><th>Kód</th><th>Soutěž</th><th>Týmů</th></tr></thead>
      <tbody>
        <tr><td>A1A</td><td><a href="/{club_type_path}/turnaje/hlavni/comp-a">Krajský přebor</a></td><td>16</td></tr>
        <tr><td>B2B</td><td><a href="/{club_type_path}/turnaje/hlavni/comp-b">Okresní přebor</a></td><td>14</td></tr>
      </tbody>
    </table>
    </body></html>"""


def search_page() -> str:
    return f"""<html><body><ul>
    <li class="ListItemSplit">
      <a class="Link--inverted" href="/souteze/club/club/{CLUB_ID}">
        <img src="https://is1.fotbal.cz/media/kluby/{CLUB_ID}/{CLUB_ID}_crop.jpg">
        <span class="H7">TJ Sokol Krnov</span>
      </a>
      <div class="ClubCategories"><span class="BadgeCategory">Muži</span></div>
      <div class="ClubAddress"><p>Petrovická 1, Krnov</p></div>
    </li>
    <li class="ListItemSplit">
      <a class="Link--inverted" href="https://www.fotbal.cz/futsal/club/club/{OPPONENT_IDS[0]}/">
        <img src="https://is1.fotbal.cz/media/kluby/x.png">
        Futsal Krnov
      </a>
    </li>
    <li class="ListItemSplit"><a class="Link--inverted">No link</a></li>
    </ul></body></html>"""


@pytest.fixture
def logo_cache() -> LogoCache:
    return LogoCache()


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


@pytest.fixture
def logo_resolver(fake_lookup: FakeLookup, logo_cache: LogoCache) -> LogoResolver:
    return LogoResolver(fake_lookup, logo_cache)
