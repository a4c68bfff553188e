# facr_scraper/utils/urls.py
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from facr_scraper.models.enums import ClubType

FOTBAL_BASE_URL = "https://www.fotbal.cz"
IS_HOST = "is.fotbal.cz"
IS_BASE_URL = f"https://{IS_HOST}"
IS_PUBLIC_PREFIX = "/public/"
LOGO_BASE_URL = "https://is1.fotbal.cz/media/kluby"
PLACEHOLDER_LOGO_URL = f"{FOTBAL_BASE_URL}/dist/img/logo-club-empty.svg"
CLUB_SEARCH_URL = f"{FOTBAL_BASE_URL}/club/hledej"

# Query parameter dropped from rewritten is.fotbal.cz links
IS_STRIPPED_PARAM = "discipline"

CLUB_PAGE_PATHS = {
    ClubType.FOOTBALL: "/souteze/club/club",
    ClubType.FUTSAL: "/futsal/club/club",
}
COMPETITION_PAGE_PATHS = {
    ClubType.FOOTBALL: "/souteze/turnaje/table",
    ClubType.FUTSAL: "/futsal/futsal/table",
}
MATCH_REPORT_PATHS = {
    ClubType.FOOTBALL: "/souteze/zapasy/zapas",
    ClubType.FUTSAL: "/futsal/zapasy/futsal",
}


def club_page_url(club_type: ClubType, club_id: str) -> str:
    return f"{FOTBAL_BASE_URL}{CLUB_PAGE_PATHS[club_type]}/{club_id}"


def competition_page_url(club_type: ClubType, competition_id: str) -> str:
    return f"{FOTBAL_BASE_URL}{COMPETITION_PAGE_PATHS[club_type]}/{competition_id}"


def match_report_url(club_type: ClubType, match_id: str) -> str:
    if not match_id:
        return ""
    return f"{FOTBAL_BASE_URL}{MATCH_REPORT_PATHS[club_type]}/{match_id}"


def club_logo_url(club_id: str) -> str:
    return f"{LOGO_BASE_URL}/{club_id}/{club_id}_crop.jpg"


def is_competition_detail_url(club_type: ClubType, competition_id: str) -> str:
    return (
        f"{IS_BASE_URL}/public/souteze/detail-souteze.aspx"
        f"?req={competition_id}&sport={club_type.sport_param}"
    )


def is_standings_url(club_type: ClubType, competition_id: str) -> str:
    return (
        f"{IS_BASE_URL}/public/souteze/tabulky-souteze.aspx"
        f"?req={competition_id}&sport={club_type.sport_param}"
    )


def absolute_fotbal_url(href: str) -> str:
    href = (href or "").strip()
    if href.startswith(("http://", "https://")):
        return href
    if not href.startswith("/"):
        href = "/" + href
    return FOTBAL_BASE_URL + href


def _drop_param(query: str, name: str) -> str:
    pairs = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True) if k != name]
    return urlencode(pairs)


def resolve_is_url(href: str) -> str:
    """Points an is.fotbal.cz link at the public host.

    Absolute links get https, the IS host and the /public prefix for match
    pages. Relative links lose their ./ and ../ prefixes and are anchored under
    /public/. The ``discipline`` parameter is removed in both cases.
    """
    href = (href or "").strip()
    if href.startswith(("http://", "https://")):
        parts = urlsplit(href)
        path = parts.path
        if not path.startswith(IS_PUBLIC_PREFIX) and path.startswith("/zapasy/"):
            path = "/public" + path
        query = _drop_param(parts.query, IS_STRIPPED_PARAM)
        return urlunsplit(("https", IS_HOST, path, query, parts.fragment))

    if href.startswith("./"):
        href = href[2:]
    while href.startswith("../"):
        href = href[3:]
    if href.startswith("/"):
        href = href[1:]
    path, _, query = href.partition("?")
    query = _drop_param(query, IS_STRIPPED_PARAM)
    return urlunsplit(("https", IS_HOST, IS_PUBLIC_PREFIX + path, query, ""))
