"""Ranked stats aggregation for the daily report."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from domain.entities import KdaTotals, MatchSummary, QueueRecord, StatsReport
from domain.enums import QueueType

logger = logging.getLogger(__name__)


def _find_participant(match: Dict[str, Any], puuid: str) -> Optional[Dict[str, Any]]:
    for participant in match.get('info', {}).get('participants', []):
        if participant.get('puuid') == puuid:
            return participant
    return None


def summarize_match(match: Dict[str, Any], puuid: str) -> Optional[MatchSummary]:
    """
    Derive the searched player's summary of one raw match.

    Returns None for non-ranked queues and for matches the player is not in.
    """
    info = match.get('info', {})
    queue = QueueType.from_queue_id(info.get('queueId'))
    if queue is None:
        return None

    participant = _find_participant(match, puuid)
    if participant is None:
        return None

    match_id = match.get('metadata', {}).get('matchId') or str(info.get('gameId', ''))
    return MatchSummary(
        match_id=match_id,
        queue_kind=queue,
        win=bool(participant.get('win')),
        kills=participant.get('kills', 0),
        deaths=participant.get('deaths', 0),
        assists=participant.get('assists', 0),
        champion_name=participant.get('championName', ''),
        duration_minutes=int(info.get('gameDuration', 0)) // 60,
    )


def aggregate(puuid: str, display_name: str, raw_matches: Iterable[Dict[str, Any]]) -> StatsReport:
    """
    Build the daily ranked report of one player.

    Only Solo/Duo (420) and Flex (440) matches count. Matches keep the
    order they were given in (newest first from the match API).
    """
    raw_matches = list(raw_matches)
    if not raw_matches:
        return StatsReport.no_games_today(display_name)

    summaries: List[MatchSummary] = []
    for match in raw_matches:
        summary = summarize_match(match, puuid)
        if summary is not None:
            summaries.append(summary)

    wins = {queue: 0 for queue in QueueType}
    losses = {queue: 0 for queue in QueueType}
    for s in summaries:
        if s.win:
            wins[s.queue_kind] += 1
        else:
            losses[s.queue_kind] += 1

    totals = KdaTotals(
        kills=sum(s.kills for s in summaries),
        deaths=sum(s.deaths for s in summaries),
        assists=sum(s.assists for s in summaries),
    )
    logger.debug(f"{display_name}: {len(summaries)}/{len(raw_matches)} ranked matches today")

    return StatsReport(
        display_name=display_name,
        solo_record=QueueRecord(wins[QueueType.RANKED_SOLO_5x5], losses[QueueType.RANKED_SOLO_5x5]),
        flex_record=QueueRecord(wins[QueueType.RANKED_FLEX_SR], losses[QueueType.RANKED_FLEX_SR]),
        totals=totals,
        matches=tuple(summaries),
    )
