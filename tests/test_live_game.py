"""Tests for the live game lookup and its best-effort enrichment."""

import pytest

from application.use_cases import LiveGameUseCase
from domain.entities import RiotId, UNRANKED
from domain.errors import NotInGameError, PlayerNotFoundError
from infrastructure.repositories import AccountRepository, LiveGameRepository, count_bans, rank_from_entries
from tests.fakes import PUUID, SUMMONER_ID

SPECTATOR_PATH = f"/lol/spectator/v5/active-games/by-summoner/{SUMMONER_ID}"


def _participant(summoner_id, team_id, champion_id, riot_id, perks=None):
    p = {"summonerId": summoner_id, "teamId": team_id, "championId": champion_id, "riotId": riot_id}
    if perks is not None:
        p["perks"] = perks
    return p


def _game(**kwargs):
    game = {
        "gameQueueConfigId": 420,
        "gameLength": 754,
        "mapId": 11,
        "participants": [
            _participant(SUMMONER_ID, 100, 103, "PlayerOne#EUW", perks={"perkStyle": 8100}),
            _participant("s-blue-2", 100, 86, "Blue Two#EUW"),
            _participant("s-red-1", 200, 62, "Red One#EUW"),
        ],
        "bannedChampions": [
            {"teamId": 100, "championId": 1},
            {"teamId": 100, "championId": -1},
            {"teamId": 200, "championId": 2},
        ],
    }
    game.update(kwargs)
    return game


GOLD_SOLO = {
    "queueType": "RANKED_SOLO_5x5", "tier": "GOLD", "rank": "II",
    "leaguePoints": 45, "wins": 20, "losses": 18, "hotStreak": True,
}
SILVER_FLEX = {
    "queueType": "RANKED_FLEX_SR", "tier": "SILVER", "rank": "I",
    "leaguePoints": 10, "wins": 1, "losses": 3, "hotStreak": False,
}


def _repo(client, ddragon=None):
    return LiveGameRepository(client, AccountRepository(client), ddragon)


class TestRankFromEntries:
    def test_prefers_solo(self):
        assert rank_from_entries([SILVER_FLEX, GOLD_SOLO]) == ("GOLD II 45LP (20W 18L - 53%)", True)

    def test_falls_back_to_flex(self):
        assert rank_from_entries([SILVER_FLEX]) == ("SILVER I 10LP (1W 3L - 25%)", False)

    def test_unranked(self):
        assert rank_from_entries([]) == (UNRANKED, False)
        assert rank_from_entries([{"queueType": "CHERRY"}]) == (UNRANKED, False)

    def test_no_games_is_zero_percent(self):
        entry = dict(GOLD_SOLO, wins=0, losses=0)
        assert rank_from_entries([entry])[0] == "GOLD II 45LP (0W 0L - 0%)"


class TestCountBans:
    def test_skips_empty_slots(self):
        bans = count_bans(_game()["bannedChampions"])
        assert (bans.blue, bans.red) == (1, 1)

    def test_missing(self):
        assert count_bans(None) is None
        assert count_bans([]) is None


class TestLiveGameRepository:
    @pytest.mark.asyncio
    async def test_builds_view(self, riot, make_riot_client, make_ddragon_client):
        riot.add(SPECTATOR_PATH, _game())
        riot.add(f"/lol/league/v4/entries/by-summoner/{SUMMONER_ID}", [GOLD_SOLO])
        riot.add("/lol/league/v4/entries/by-summoner/s-blue-2", [SILVER_FLEX])
        riot.add("/lol/league/v4/entries/by-summoner/s-red-1", [])

        async with make_riot_client() as client, make_ddragon_client() as ddragon:
            view = await _repo(client, ddragon).fetch_live_game("PlayerOne", "EUW")

        assert view.queue_name == "Ranked Solo/Duo"
        assert view.duration_seconds == 754
        assert [p.champion_name for p in view.blue_team] == ["Ahri", "Garen"]
        assert [p.champion_name for p in view.red_team] == ["Wukong"]
        assert [p.is_searched_player for p in view.participants] == [True, False, False]
        assert view.blue_team[0].rank_label == "GOLD II 45LP (20W 18L - 53%)"
        assert view.blue_team[0].hot_streak is True
        assert view.blue_team[0].rune_style == 8100
        assert view.blue_team[1].rune_style is None
        assert view.red_team[0].rank_label == UNRANKED
        assert (view.bans.blue, view.bans.red) == (1, 1)

    @pytest.mark.asyncio
    async def test_failed_rank_lookup_degrades_to_unranked(self, riot, make_riot_client):
        riot.add(SPECTATOR_PATH, _game())
        riot.add(f"/lol/league/v4/entries/by-summoner/{SUMMONER_ID}", [GOLD_SOLO])
        riot.add("/lol/league/v4/entries/by-summoner/s-blue-2", {}, status=500)
        riot.add("/lol/league/v4/entries/by-summoner/s-red-1", {}, status=429)

        async with make_riot_client() as client:
            view = await _repo(client).fetch_live_game("PlayerOne", "EUW")

        assert view.blue_team[0].rank_label.startswith("GOLD II")
        assert view.blue_team[1].rank_label == UNRANKED
        assert view.red_team[0].rank_label == UNRANKED

    @pytest.mark.asyncio
    async def test_ddragon_down_falls_back_to_champion_id(self, riot, ddragon, make_riot_client, make_ddragon_client):
        ddragon.add("/api/versions.json", {}, status=503)
        riot.add(SPECTATOR_PATH, _game())

        async with make_riot_client() as client, make_ddragon_client() as dd:
            view = await _repo(client, dd).fetch_live_game("PlayerOne", "EUW")

        assert [p.champion_name for p in view.participants] == ["Champion 103", "Champion 86", "Champion 62"]

    @pytest.mark.asyncio
    async def test_only_one_searched_player_on_same_team(self, riot, make_riot_client):
        riot.add(SPECTATOR_PATH, _game(participants=[
            _participant("s-blue-2", 100, 86, "Blue Two#EUW"),
            _participant(SUMMONER_ID, 100, 103, "PlayerOne#EUW"),
        ]))
        async with make_riot_client() as client:
            view = await _repo(client).fetch_live_game("PlayerOne", "EUW")

        assert [p.is_searched_player for p in view.blue_team] == [False, True]
        assert view.red_team == ()

    @pytest.mark.asyncio
    async def test_puuid_used_when_summoner_id_missing(self, riot, make_riot_client):
        riot.add(SPECTATOR_PATH, _game(participants=[
            {"puuid": PUUID, "teamId": 200, "championId": 103, "summonerName": "Old Name"},
            {"puuid": "other", "teamId": 200, "championId": 86},
        ]))
        async with make_riot_client() as client:
            view = await _repo(client).fetch_live_game("PlayerOne", "EUW")

        assert [p.is_searched_player for p in view.red_team] == [True, False]
        assert [p.player_label for p in view.red_team] == ["Old Name", "Unknown"]
        assert all(p.rank_label == UNRANKED for p in view.red_team)

    @pytest.mark.asyncio
    async def test_not_in_game(self, riot, make_riot_client):
        async with make_riot_client() as client:
            with pytest.raises(NotInGameError):
                await _repo(client).fetch_live_game("PlayerOne", "EUW")

    @pytest.mark.asyncio
    async def test_unknown_player_is_not_found(self, riot, make_riot_client):
        async with make_riot_client() as client:
            with pytest.raises(PlayerNotFoundError) as exc_info:
                await _repo(client).fetch_live_game("Ghost", "EUW")
        assert not isinstance(exc_info.value, NotInGameError)


class TestLiveGameUseCase:
    @pytest.mark.asyncio
    async def test_execute(self, riot, make_riot_client):
        riot.add(SPECTATOR_PATH, _game(gameQueueConfigId=450, mapId=12, bannedChampions=[]))
        async with make_riot_client() as client:
            view = await LiveGameUseCase(client).execute(RiotId.parse("PlayerOne"))
        assert view.queue_name == "ARAM"
        assert view.map_name == "Map 12"
        assert view.bans is None


class TestChampionNameCache:
    @pytest.mark.asyncio
    async def test_champion_json_loaded_once_per_version(self, ddragon, make_ddragon_client):
        async with make_ddragon_client() as first:
            assert (await first.get_champion_names())[62] == "Wukong"
        async with make_ddragon_client() as second:
            assert (await second.get_champion_names())[103] == "Ahri"

        champion_requests = [p for p in ddragon.paths() if p.endswith("champion.json")]
        assert champion_requests == ["/cdn/14.20.1/data/en_US/champion.json"]

    @pytest.mark.asyncio
    async def test_new_patch_reloads(self, ddragon, make_ddragon_client):
        async with make_ddragon_client() as first:
            await first.get_champion_names()

        ddragon.add("/api/versions.json", ["14.21.1", "14.20.1"])
        ddragon.add("/cdn/14.21.1/data/en_US/champion.json", {"data": {"Ahri": {"key": "103", "name": "Ahri"}}})
        async with make_ddragon_client() as second:
            assert await second.get_champion_names() == {103: "Ahri"}
