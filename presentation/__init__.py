"""Presentation layer - Discord interactions and the local CLI."""
from .cli import LookupCommand
from .discord import InteractionDispatcher, InteractionResponse

__all__ = [
    "LookupCommand",
    "InteractionDispatcher",
    "InteractionResponse",
]
