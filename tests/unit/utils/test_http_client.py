"""Unit tests for HTTPClient URL handling."""

import pytest

from marketview.stats.utils import HTTPClient


def test_build_url_joins_relative_paths():
    client = HTTPClient("https://api.example.com/")
    assert client.build_url("/v1/mkt/markets/") == "https://api.example.com/v1/mkt/markets/"
    assert client.build_url("v1/mth/matches/1/") == "https://api.example.com/v1/mth/matches/1/"


def test_build_url_passes_absolute_urls_through():
    client = HTTPClient("https://api.example.com")
    assert client.build_url("https://other.example.com/x") == "https://other.example.com/x"


def test_build_url_without_base():
    assert HTTPClient().build_url("/relative") == "/relative"


@pytest.mark.asyncio
async def test_close_without_session_is_noop():
    client = HTTPClient("https://api.example.com")
    await client.close()
    async with HTTPClient() as other:
        assert other.base_url is None
