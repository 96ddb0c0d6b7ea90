"""Presentation CLI exports."""
from .lookup_command import LookupCommand, build_parser

__all__ = [
    "LookupCommand",
    "build_parser",
]
