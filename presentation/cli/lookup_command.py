from __future__ import annotations

import argparse
import json
from typing import List, Optional

from application.services import ACTION_LIVE, ACTION_STATS, format_error, format_live_game, format_stats
from application.use_cases import DailyStatsUseCase, LiveGameUseCase
from config import settings
from core.logging.context import context
from core.logging.logger import get_logger, StructuredLogger
from domain.entities import RiotId
from domain.errors import RiotAPIError
from infrastructure import DataDragonClient, RiotAPIClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="demacia",
        description="League of Legends daily ranked stats and live games from the terminal.",
    )
    parser.add_argument("--json", action="store_true", help="print raw data as JSON instead of the chat message")
    sub = parser.add_subparsers(dest="subcommand", required=True)

    stats = sub.add_parser("stats", help="today's ranked record of a player")
    stats.add_argument("riot_id", help="Riot ID, e.g. PlayerName#EUW")
    stats.add_argument("--count", type=int, default=None, help="max matches to fetch (default: MATCH_HISTORY_COUNT)")

    live = sub.add_parser("live", help="the game a player is in right now")
    live.add_argument("riot_id", help="Riot ID, e.g. PlayerName#EUW")
    live.add_argument("--no-ddragon", action="store_true", help="skip champion name lookup")
    return parser


class LookupCommand:
    """Runs /demacia stats|live locally and prints the message the bot would post."""

    def __init__(self) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    async def run(self, argv: Optional[List[str]] = None) -> int:
        args = build_parser().parse_args(argv)
        settings.validate()

        action = ACTION_STATS if args.subcommand == "stats" else ACTION_LIVE
        with context(command="cli", subcommand=args.subcommand, riot_id=args.riot_id):
            try:
                riot_id = RiotId.parse(args.riot_id, settings.DEFAULT_TAG_LINE)
                async with RiotAPIClient() as client:
                    if args.subcommand == "stats":
                        report = await DailyStatsUseCase(client, max_count=args.count).execute(riot_id)
                        data, text = report.to_dict(), format_stats(report)
                    elif args.no_ddragon:
                        view = await LiveGameUseCase(client).execute(riot_id)
                        data, text = view.to_dict(), format_live_game(view)
                    else:
                        async with DataDragonClient() as ddragon:
                            view = await LiveGameUseCase(client, ddragon=ddragon).execute(riot_id)
                        data, text = view.to_dict(), format_live_game(view)
            except RiotAPIError as exc:
                self.logger.warning(lambda: f"{args.subcommand} failed: {exc!r}")
                print(format_error(action, args.riot_id, exc))
                return 1

        if args.json:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(text)
        return 0
