"""Riot ID value object (gameName#tagLine)."""
from dataclasses import dataclass

from ..errors import InvalidRiotIdError

DEFAULT_TAG_LINE = "EUW"


@dataclass(frozen=True)
class RiotId:
    """A player's Riot ID as typed in a command."""

    game_name: str
    tag_line: str

    @classmethod
    def parse(cls, text: str, default_tag: str = DEFAULT_TAG_LINE) -> 'RiotId':
        """
        Split "gameName#tagLine" on the first '#'.

        Without a tag (or with an empty one) the default tag line is used,
        so "PlayerOne" becomes PlayerOne#EUW.
        """
        game_name, _, tag_line = (text or "").partition("#")
        game_name = game_name.strip()
        tag_line = tag_line.strip() or default_tag
        if not game_name:
            raise InvalidRiotIdError(f'Riot ID "{text}" not found')
        return cls(game_name=game_name, tag_line=tag_line)

    def __str__(self) -> str:
        return f"{self.game_name}#{self.tag_line}"
