"""Tests for the KDA rule, Riot ID parsing and the domain errors."""

import pytest

from domain.entities import PERFECT_KDA, LiveGameView, RiotId, format_kda
from domain.enums import ErrorKind, QueueType, Region, queue_display_name
from domain.errors import (
    AuthFailureError,
    InvalidRiotIdError,
    PlayerNotFoundError,
    RateLimitedError,
    UpstreamError,
    error_from_status,
)


class TestFormatKda:
    def test_no_deaths_is_perfect(self):
        assert format_kda(10, 0, 5) == PERFECT_KDA == "Perfect"

    def test_no_deaths_and_nothing_else_is_still_perfect(self):
        assert format_kda(0, 0, 0) == "Perfect"

    def test_two_decimals(self):
        assert format_kda(5, 4, 5) == "2.50"
        assert format_kda(4, 3, 7) == "3.67"
        assert format_kda(0, 3, 0) == "0.00"


class TestRiotIdParse:
    def test_with_tag(self):
        rid = RiotId.parse("PlayerOne#1234")
        assert rid == RiotId("PlayerOne", "1234")
        assert str(rid) == "PlayerOne#1234"

    def test_missing_tag_defaults_to_euw(self):
        assert RiotId.parse("PlayerOne").tag_line == "EUW"

    def test_empty_tag_uses_default(self):
        assert RiotId.parse("PlayerOne#", default_tag="NA1").tag_line == "NA1"

    def test_strips_whitespace(self):
        assert RiotId.parse("  Player One # EUW ") == RiotId("Player One", "EUW")

    def test_splits_on_first_hash_only(self):
        assert RiotId.parse("a#b#c") == RiotId("a", "b#c")

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidRiotIdError) as exc_info:
            RiotId.parse("#EUW")
        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestErrorFromStatus:
    @pytest.mark.parametrize("status, cls, kind", [
        (404, UpstreamError, ErrorKind.UPSTREAM_ERROR),
        (401, AuthFailureError, ErrorKind.AUTH_FAILURE),
        (403, AuthFailureError, ErrorKind.AUTH_FAILURE),
        (429, RateLimitedError, ErrorKind.RATE_LIMITED),
        (500, UpstreamError, ErrorKind.UPSTREAM_ERROR),
        (418, UpstreamError, ErrorKind.UPSTREAM_ERROR),
    ])
    def test_mapping(self, status, cls, kind):
        err = error_from_status(status, "Summoner")
        assert isinstance(err, cls)
        assert err.kind is kind
        assert err.status_code == status

    def test_not_found_message_names_the_lookup(self):
        err = error_from_status(404, 'Riot ID "X#EUW"', not_found=PlayerNotFoundError)
        assert isinstance(err, PlayerNotFoundError)
        assert err.message == 'Riot ID "X#EUW" not found'

    def test_404_without_not_found_is_upstream(self):
        err = error_from_status(404, "Match EUW1_2")
        assert err.kind is ErrorKind.UPSTREAM_ERROR
        assert err.message == "Failed to fetch Match EUW1_2: HTTP 404"

    def test_not_in_game_is_not_a_fault(self):
        assert ErrorKind.NOT_IN_GAME.is_fault is False
        assert ErrorKind.NOT_FOUND.is_fault is True


class TestEnums:
    def test_ranked_queue_lookup(self):
        assert QueueType.from_queue_id(420) is QueueType.RANKED_SOLO_5x5
        assert QueueType.from_queue_id(440) is QueueType.RANKED_FLEX_SR
        assert QueueType.from_queue_id(450) is None

    def test_league_queue_names(self):
        assert QueueType.RANKED_SOLO_5x5.api_queue_name == "RANKED_SOLO_5x5"
        assert QueueType.RANKED_FLEX_SR.api_queue_name == "RANKED_FLEX_SR"

    def test_queue_display_name_fallback(self):
        assert queue_display_name(450) == "ARAM"
        assert queue_display_name(9999) == "Queue 9999"

    def test_region_routes(self):
        assert Region.EUW1.regional_route == "europe"
        assert Region.KR.regional_route == "asia"
        assert Region.NA1.regional_route == "americas"
        assert Region.from_platform("EUW1") is Region.EUW1
        assert Region.from_platform("nowhere") is Region.EUW1

    def test_map_name(self):
        assert LiveGameView(queue_id=420, duration_seconds=0, map_id=11).map_name == "Summoner's Rift"
        assert LiveGameView(queue_id=420, duration_seconds=0, map_id=12).map_name == "Map 12"
