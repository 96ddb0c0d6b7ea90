"""Discord-friendly message formatting.

Every function here is pure: same input, same text.
"""
from __future__ import annotations

from typing import List

from domain.entities import LiveGameView, ParticipantView, StatsReport
from domain.enums import ErrorKind, QueueType
from domain.errors import RiotAPIError

SEARCHED_PREFIX = "➤ "
PLAYER_PREFIX = "   "

ACTION_STATS = "fetching stats"
ACTION_LIVE = "checking live game"

_HINTS = {
    ErrorKind.NOT_FOUND: "💡 Make sure to use Riot ID format: **gameName#tagLine** (e.g., PlayerName#EUW)",
    ErrorKind.AUTH_FAILURE: "💡 Check your RIOT_API_KEY in the .env file. Development keys expire after 24 hours.",
    ErrorKind.RATE_LIMITED: "💡 You've hit the rate limit. Wait a minute and try again.",
    ErrorKind.NETWORK_ERROR: "💡 Check your internet connection or try again later.",
    ErrorKind.NOT_IN_GAME: "💡 The player is not in an active game right now.",
}


def format_stats(report: StatsReport) -> str:
    """
    Daily stats message.

    A day with no ranked games, including one with only unranked games,
    renders a single "has not played any ranked games today" line instead
    of a 0W-0L header with a 0/0/0 KDA.
    """
    if report.no_games or not report.matches:
        return f"**{report.display_name}** has not played any ranked games today."

    lines: List[str] = [f"📊 **Daily Stats for {report.display_name}**", ""]

    lines.append("**Win/Loss Record:**")
    for queue in QueueType:
        record = report.record_for(queue)
        if record.has_games:
            lines.append(f"🏆 {queue.short_name}: {record.wins}W - {record.losses}L")

    t = report.totals
    lines.append("")
    lines.append(f"**Overall K/D/A:** {t.kills}/{t.deaths}/{t.assists} ({report.overall_kda})")

    lines.append("")
    lines.append("**Match History:**")
    for index, match in enumerate(report.matches, start=1):
        result = "✅ Win" if match.win else "❌ Loss"
        lines.append(f"{index}. **{match.champion_name}** - {match.queue_kind.short_name} - {result}")
        lines.append(
            f"   K/D/A: {match.kills}/{match.deaths}/{match.assists} ({match.kda}) - {match.duration_minutes}min"
        )

    return "\n".join(lines) + "\n"


def _format_participant(player: ParticipantView) -> List[str]:
    prefix = SEARCHED_PREFIX if player.is_searched_player else PLAYER_PREFIX
    lines = [
        f"{prefix}**{player.champion_name}** - {player.player_label}",
        f"{prefix}   {player.rank_label}",
    ]
    if player.rune_style is not None:
        lines.append(f"{prefix}   Runes: Primary {player.rune_style}")
    if player.hot_streak:
        lines.append(f"{prefix}   🔥 Hot streak")
    return lines


def _format_team(team, name: str, color: str) -> List[str]:
    lines = [f"{color} **{name}**"]
    for player in team:
        lines.extend(_format_participant(player))
    lines.append("")
    return lines


def format_live_game(view: LiveGameView) -> str:
    minutes, seconds = divmod(view.duration_seconds, 60)

    lines: List[str] = [
        f"🎮 **LIVE GAME** - {view.queue_name}",
        f"⏱️ Game Duration: {minutes}:{seconds:02d}",
        f"📍 Map: {view.map_name}",
        "",
    ]
    lines.extend(_format_team(view.blue_team, "Blue Side", "🔵"))
    lines.extend(_format_team(view.red_team, "Red Side", "🔴"))

    if view.bans is not None and view.bans.any:
        lines.append(f"🚫 **Bans:** Blue ({view.bans.blue}) | Red ({view.bans.red})")

    lines.append("")
    lines.append("💡 *Note: Real-time K/D/A data not available via API. Showing rank stats.*")
    return "\n".join(lines)


def format_error(action: str, riot_id: str, error: BaseException) -> str:
    """User-facing error block with a hint picked from the error kind."""
    lines = [f'❌ **Error {action} for "{riot_id}"**', ""]
    if isinstance(error, RiotAPIError):
        lines.append(f"**Details:** {error.message}")
        hint = _HINTS.get(error.kind)
        if hint:
            lines.append("")
            lines.append(hint)
    else:
        lines.append("**Details:** Unexpected error, please try again later.")
    return "\n".join(lines)
