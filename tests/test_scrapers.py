import httpx
import pytest
from tenacity import stop_after_attempt

from facr_scraper.models.club import Competition
from facr_scraper.models.enums import ClubType
from facr_scraper.scrapers.base_scraper import (
    BaseScraper,
    RateLimitError,
    ScraperError,
    UpstreamStatusError,
)
from facr_scraper.scrapers.is_scraper import ISScraper
from facr_scraper.scrapers.search_client import SearchApiClient

SEARCH_URL = "http://localhost:8080/club/search"


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_search_client_parses_candidates():
    seen = []

    def handler(request):
        seen.append(request.url.params.get("q"))
        return httpx.Response(
            200,
            json={
                "query": "krnov",
                "count": 1,
                "results": [
                    {"name": "TJ Sokol Krnov", "club_id": "x", "logo_url": "https://logo/krnov.png"}
                ],
            },
        )

    client = SearchApiClient(client=mock_client(handler), search_url=SEARCH_URL)
    candidates = await client.search("krnov")

    assert seen == ["krnov"]
    assert [(c.name, c.logo_url) for c in candidates] == [("TJ Sokol Krnov", "https://logo/krnov.png")]


@pytest.mark.asyncio
async def test_search_client_empty_results():
    client = SearchApiClient(
        client=mock_client(lambda request: httpx.Response(200, json={"results": []})),
        search_url=SEARCH_URL,
    )
    assert await client.search("nobody") == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, text="missing"),
        httpx.Response(200, text="<html>not json</html>"),
    ],
)
async def test_search_client_failure_is_none(response):
    client = SearchApiClient(client=mock_client(lambda request: response), search_url=SEARCH_URL)
    assert await client.search("krnov") is None


@pytest.mark.asyncio
async def test_search_client_transport_failure_is_none():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = SearchApiClient(client=mock_client(handler), search_url=SEARCH_URL)
    assert await client.search("krnov") is None


@pytest.mark.asyncio
async def test_is_scraper_builds_futsal_url():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, text="<html></html>")

    scraper = ISScraper(client=mock_client(handler))
    await scraper.fetch_competition_detail(ClubType.FUTSAL, Competition(id="c9"))

    assert seen == ["https://is.fotbal.cz/public/souteze/detail-souteze.aspx?req=c9&sport=futsal"]


@pytest.mark.asyncio
async def test_status_errors_are_typed():
    scraper = ISScraper(client=mock_client(lambda request: httpx.Response(429)))
    with pytest.raises(RateLimitError):
        await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))

    scraper = ISScraper(client=mock_client(lambda request: httpx.Response(301)))
    with pytest.raises(UpstreamStatusError) as exc_info:
        await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))
    assert exc_info.value.status_code == 301


@pytest.mark.asyncio
async def test_transport_error_is_scraper_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    scraper = ISScraper(client=mock_client(handler))
    with pytest.raises(ScraperError):
        await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))


@pytest.fixture
def two_attempts(monkeypatch):
    """Gives every scraper request a budget of two attempts."""
    monkeypatch.setattr(
        BaseScraper, "_send", BaseScraper._send.retry_with(stop=stop_after_attempt(2))
    )


def scripted(*outcomes):
    """Handler that plays back status codes or exceptions, one per request."""
    calls = []

    def handler(request):
        outcome = outcomes[len(calls)]
        calls.append(request)
        if isinstance(outcome, type) and issubclass(outcome, Exception):
            raise outcome("upstream hiccup", request=request)
        return httpx.Response(outcome, text=f"<html>{outcome}</html>")

    return handler, calls


@pytest.mark.asyncio
@pytest.mark.parametrize("first", [503, 429, httpx.ConnectError, httpx.ReadTimeout])
async def test_retryable_failure_then_success(two_attempts, first):
    handler, calls = scripted(first, 200)
    scraper = ISScraper(client=mock_client(handler))

    html = await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))

    assert html == "<html>200</html>"
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_retries_exhausted_keep_status(two_attempts):
    handler, calls = scripted(503, 502)
    scraper = ISScraper(client=mock_client(handler))

    with pytest.raises(UpstreamStatusError) as exc_info:
        await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))

    assert exc_info.value.status_code == 502
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_not_found_is_not_retried(two_attempts):
    handler, calls = scripted(404, 200)
    scraper = ISScraper(client=mock_client(handler))

    with pytest.raises(UpstreamStatusError):
        await scraper.fetch_standings(ClubType.FOOTBALL, Competition(id="c1"))

    assert len(calls) == 1
