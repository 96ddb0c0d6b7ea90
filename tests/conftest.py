"""Shared fixtures."""

from __future__ import annotations

import pytest

from domain.enums import Region
from infrastructure.api import DataDragonClient, RiotAPIClient, clear_champion_cache
from tests.fakes import PUUID, SUMMONER_ID, FakeBackend, FakeDiscord


@pytest.fixture(autouse=True)
def _fresh_champion_cache():
    clear_champion_cache()
    yield
    clear_champion_cache()


@pytest.fixture
def riot() -> FakeBackend:
    backend = FakeBackend()
    backend.add(
        "/riot/account/v1/accounts/by-riot-id/PlayerOne/EUW",
        {"puuid": PUUID, "gameName": "PlayerOne", "tagLine": "EUW"},
    )
    backend.add(
        f"/lol/summoner/v4/summoners/by-puuid/{PUUID}",
        {"id": SUMMONER_ID, "puuid": PUUID, "summonerLevel": 300},
    )
    return backend


@pytest.fixture
def make_riot_client(riot: FakeBackend):
    def _make() -> RiotAPIClient:
        return RiotAPIClient(api_key="test-key", region=Region.EUW1, timeout=10, transport=riot.transport())
    return _make


@pytest.fixture
def ddragon() -> FakeBackend:
    backend = FakeBackend()
    backend.add("/api/versions.json", ["14.20.1", "14.19.1"])
    backend.add(
        "/cdn/14.20.1/data/en_US/champion.json",
        {"data": {
            "Ahri": {"key": "103", "name": "Ahri", "id": "Ahri"},
            "Garen": {"key": "86", "name": "Garen", "id": "Garen"},
            "MonkeyKing": {"key": "62", "name": "Wukong", "id": "MonkeyKing"},
        }},
    )
    return backend


@pytest.fixture
def make_ddragon_client(ddragon: FakeBackend):
    def _make() -> DataDragonClient:
        return DataDragonClient(
            base_url="https://ddragon.test", locale="en_US", timeout=10, transport=ddragon.transport()
        )
    return _make


@pytest.fixture
def discord() -> FakeDiscord:
    return FakeDiscord()
