import asyncio

import httpx
import pytest

from labcore.network import LabHTTP
from cipherlab.wordlists.keywords import BUILTIN_KEYWORDS, OFFLINE_KEYWORDS
from cipherlab.wordlists.sources import (
    CandidateKeywordSource,
    RemoteKeywordSource,
    StaticKeywordSource,
    merge_keywords,
    offline_source,
    parse_word_payload,
)

WORDLIST_URL = "https://words.test/words?ml=secret&max=50"
OFFLINE_LIST = merge_keywords(BUILTIN_KEYWORDS, OFFLINE_KEYWORDS)


def _http(handler) -> LabHTTP:
    return LabHTTP(timeout=3.0, transport=httpx.MockTransport(handler))


# --- Built-in lists --------------------------------------------------------

def test_builtin_lists_are_uppercase_and_unique():
    assert "SECRET" in BUILTIN_KEYWORDS
    assert 80 <= len(BUILTIN_KEYWORDS) <= 100
    assert 35 <= len(OFFLINE_KEYWORDS) <= 45
    for words in (BUILTIN_KEYWORDS, OFFLINE_KEYWORDS):
        assert len(set(words)) == len(words)
        assert all(word == word.upper() for word in words)


def test_merge_keywords_normalises_and_preserves_order():
    assert merge_keywords(["secret", "Code"], ["CODE", " spy ", ""]) == [
        "SECRET",
        "CODE",
        "SPY",
    ]


def test_static_source_is_deterministic():
    source = StaticKeywordSource(["b", "a", "B"])
    assert source.keywords() == ["B", "A"]
    assert source.keywords() == ["B", "A"]
    assert source.label == "static"
    assert isinstance(source, CandidateKeywordSource)


def test_offline_source_contains_both_lists():
    assert offline_source().keywords() == OFFLINE_LIST
    assert offline_source().label == "offline"


# --- Payload parsing -------------------------------------------------------

def test_parse_word_payload_filters_entries():
    payload = [
        {"word": "hush"},
        {"word": "top secret"},
        {"word": "x-ray"},
        {"word": 5},
        "loose",
        {"score": 100},
    ]
    assert parse_word_payload(payload) == ["HUSH", "TOP SECRET"]


def test_parse_word_payload_caps_word_count():
    payload = [{"word": f"word{chr(65 + i % 26)}{chr(65 + i // 26)}"} for i in range(60)]
    assert len(parse_word_payload(payload, max_words=50)) == 50


def test_parse_word_payload_rejects_non_list():
    with pytest.raises(ValueError):
        parse_word_payload({"word": "secret"})


# --- Remote source ---------------------------------------------------------

async def test_remote_success_extends_builtin_list():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"word": "hush"}, {"word": "covert op"}])

    async with _http(handler) as http:
        source = RemoteKeywordSource(WORDLIST_URL, http=http)
        outcome = await source.refresh()

    assert outcome.ok
    assert outcome.words == ["HUSH", "COVERT OP"]
    assert source.label == "remote"
    assert source.keywords() == merge_keywords(BUILTIN_KEYWORDS, ["HUSH", "COVERT OP"])


async def test_pending_fetch_uses_offline_list():
    source = RemoteKeywordSource(WORDLIST_URL, http=_http(lambda r: httpx.Response(200, json=[])))
    assert source.outcome is None
    assert source.label == "offline"
    assert source.keywords() == OFFLINE_LIST


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(404),
        httpx.Response(200, text="definitely not json"),
        httpx.Response(200, json={"word": "secret"}),
    ],
)
async def test_failed_fetch_falls_back_to_offline_list(response):
    async with _http(lambda request: response) as http:
        source = RemoteKeywordSource(WORDLIST_URL, http=http)
        outcome = await source.refresh()

    assert not outcome.ok
    assert outcome.error
    assert outcome.words == []
    assert source.keywords() == OFFLINE_LIST


async def test_transport_timeout_is_a_failed_outcome():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    async with _http(handler) as http:
        source = RemoteKeywordSource(WORDLIST_URL, http=http)
        outcome = await source.refresh()

    assert not outcome.ok
    assert source.keywords() == OFFLINE_LIST


@pytest.mark.parametrize(
    "error",
    [httpx.TooManyRedirects, httpx.DecodingError, httpx.RemoteProtocolError, httpx.UnsupportedProtocol],
)
async def test_any_request_error_falls_back_to_offline_list(error):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error("loop", request=request)

    async with _http(handler) as http:
        source = RemoteKeywordSource(WORDLIST_URL, http=http)
        outcome = await source.refresh()

    assert not outcome.ok
    assert "loop" in outcome.error
    assert source.label == "offline"
    assert source.keywords() == OFFLINE_LIST


async def test_slow_server_hits_overall_timeout():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(2)
        return httpx.Response(200, json=[{"word": "late"}])

    async with _http(handler) as http:
        source = RemoteKeywordSource(WORDLIST_URL, timeout=0.05, http=http)
        outcome = await source.refresh()

    assert not outcome.ok
    assert "Timed out" in outcome.error
    assert "LATE" not in source.keywords()


async def test_remote_list_is_fetched_once():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        return httpx.Response(200, json=[{"word": "hush"}])

    async with _http(handler) as http:
        source = RemoteKeywordSource(WORDLIST_URL, http=http)
        first = await source.refresh()
        second = await source.refresh()
        await source.fetch()

    assert first == second
    assert len(calls) == 1


async def test_remote_words_capped_by_max_words():
    payload = [{"word": f"word{chr(65 + i % 26)}{chr(65 + i // 26)}"} for i in range(30)]

    async with _http(lambda request: httpx.Response(200, json=payload)) as http:
        source = RemoteKeywordSource(WORDLIST_URL, max_words=10, http=http)
        outcome = await source.refresh()

    assert len(outcome.words) == 10
