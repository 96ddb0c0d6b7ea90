"""Discord interactions."""
from .dispatcher import (
    InteractionDispatcher,
    InteractionResponse,
    InteractionType,
    InteractionResponseType,
    DemaciaCommand,
    parse_demacia_command,
)

__all__ = [
    "InteractionDispatcher",
    "InteractionResponse",
    "InteractionType",
    "InteractionResponseType",
    "DemaciaCommand",
    "parse_demacia_command",
]
