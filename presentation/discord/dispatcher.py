"""Discord interaction dispatcher for the /demacia command."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Set

from application.services import ACTION_LIVE, ACTION_STATS, format_error, format_live_game, format_stats
from application.use_cases import DailyStatsUseCase, LiveGameUseCase
from config import settings
from core.logging.context import context
from core.logging.logger import get_logger
from domain.entities import RiotId
from domain.errors import RiotAPIError
from infrastructure import DataDragonClient, DiscordClient, RiotAPIClient

logger = logging.getLogger(__name__)

COMMAND_NAME = "demacia"
SUBCOMMANDS = ("stats", "live")


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2


class InteractionResponseType(IntEnum):
    PONG = 1
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


@dataclass(frozen=True)
class InteractionResponse:
    """What the HTTP layer sends back to Discord."""

    body: Dict[str, Any]
    status: int = 200


@dataclass(frozen=True)
class DemaciaCommand:
    """The parsed `/demacia <subcommand> riotid:<text>` invocation."""

    subcommand: str
    riot_id: str


def parse_demacia_command(data: Dict[str, Any]) -> DemaciaCommand:
    """
    Read subcommand and riotid from the command data.

    Raises:
        ValueError: options are missing or the subcommand is unknown
    """
    try:
        sub = data['options'][0]
        subcommand = sub['name']
        riot_id = str(sub['options'][0]['value'])
    except (KeyError, IndexError, TypeError) as exc:
        raise ValueError("malformed demacia options") from exc
    if subcommand not in SUBCOMMANDS:
        raise ValueError(f"unknown subcommand: {subcommand}")
    return DemaciaCommand(subcommand=subcommand, riot_id=riot_id)


def _bad_request(error: str) -> InteractionResponse:
    return InteractionResponse(body={"error": error}, status=400)


@dataclass
class InteractionDispatcher:
    """
    Acknowledges commands at once and answers later with a follow-up.

    The deferred acknowledgment goes out before any Riot call. The work
    runs in a detached task whose only visible effect is at most one
    follow-up message (the result or a formatted error).
    """

    riot_client_factory: Callable[[], RiotAPIClient] = RiotAPIClient
    discord_client_factory: Callable[[], DiscordClient] = DiscordClient
    ddragon_factory: Optional[Callable[[], DataDragonClient]] = DataDragonClient
    default_tag: str = field(default_factory=lambda: settings.DEFAULT_TAG_LINE)
    _tasks: Set["asyncio.Task[None]"] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        self.log = get_logger(__name__, service="dispatcher")

    async def handle(self, payload: Dict[str, Any]) -> InteractionResponse:
        """Answer a verified interaction payload."""
        interaction_type = payload.get('type')

        if interaction_type == InteractionType.PING:
            return InteractionResponse(body={"type": int(InteractionResponseType.PONG)})

        if interaction_type != InteractionType.APPLICATION_COMMAND:
            logger.error(f"unknown interaction type {interaction_type}")
            return _bad_request("unknown interaction type")

        data = payload.get('data') or {}
        name = data.get('name')
        if name != COMMAND_NAME:
            logger.error(f"unknown command: {name}")
            return _bad_request("unknown command")

        try:
            command = parse_demacia_command(data)
        except ValueError as exc:
            logger.error(f"bad {COMMAND_NAME} invocation: {exc}")
            return _bad_request("invalid command options")

        application_id = str(payload.get('application_id') or settings.DISCORD_APP_ID)
        token = payload.get('token', '')
        self.spawn(command, application_id, token)

        return InteractionResponse(
            body={"type": int(InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE)}
        )

    def spawn(self, command: DemaciaCommand, application_id: str, token: str) -> "asyncio.Task[None]":
        task = asyncio.create_task(self._process(command, application_id, token))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every in-flight command (shutdown, tests)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def build_message(self, command: DemaciaCommand) -> str:
        """Run the command and return the text to post; errors become text too."""
        action = ACTION_STATS if command.subcommand == "stats" else ACTION_LIVE
        try:
            riot_id = RiotId.parse(command.riot_id, self.default_tag)
            async with self.riot_client_factory() as client:
                if command.subcommand == "stats":
                    report = await DailyStatsUseCase(client).execute(riot_id)
                    return format_stats(report)
                if self.ddragon_factory is None:
                    view = await LiveGameUseCase(client).execute(riot_id)
                else:
                    async with self.ddragon_factory() as ddragon:
                        view = await LiveGameUseCase(client, ddragon=ddragon).execute(riot_id)
                return format_live_game(view)
        except RiotAPIError as exc:
            if exc.kind.is_fault:
                self.log.warning(f"{command.subcommand} failed ({exc.kind.value}): {exc}")
            else:
                self.log.info(f"{command.subcommand}: {exc}")
            return format_error(action, command.riot_id, exc)
        except Exception as exc:
            self.log.error(f"unexpected error in {command.subcommand}", exc_info=exc)
            return format_error(action, command.riot_id, exc)

    async def _process(self, command: DemaciaCommand, application_id: str, token: str) -> None:
        with context(command=COMMAND_NAME, subcommand=command.subcommand, riot_id=command.riot_id):
            message = await self.build_message(command)
            try:
                async with self.discord_client_factory() as discord:
                    await discord.send_followup(application_id, token, message)
            except Exception as exc:
                # nowhere left to report this
                self.log.error("Failed to send follow-up message", exc_info=exc)
                return
            self.log.success(f"{command.subcommand} follow-up sent")
