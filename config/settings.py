"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

from domain.enums import Region

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Everything is read from the environment (or config/.env) once, at import.

    RIOT_PLATFORM picks both hosts the bot talks to:
      platform route (euw1)   → summoner, league, spectator
      regional route (europe) → account, match
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')
    RIOT_PLATFORM: str = os.getenv('RIOT_PLATFORM', 'euw1').strip().lower()

    # Riot IDs typed without "#tag" are looked up with this tag line
    DEFAULT_TAG_LINE: str = os.getenv('DEFAULT_TAG_LINE', 'EUW')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '10'))

    # ── Match history ──────────────────────────────────────────────────────
    MATCH_HISTORY_COUNT: int = int(os.getenv('MATCH_HISTORY_COUNT', '20'))

    # ── Discord ────────────────────────────────────────────────────────────
    DISCORD_APP_ID:   str = os.getenv('DISCORD_APP_ID', os.getenv('APP_ID', ''))
    DISCORD_TOKEN:    str = os.getenv('DISCORD_TOKEN', '')
    DISCORD_API_BASE: str = os.getenv('DISCORD_API_BASE', 'https://discord.com/api/v10')

    # ── Data Dragon (champion names for live games) ────────────────────────
    DDRAGON_BASE:   str = os.getenv('DDRAGON_BASE', 'https://ddragon.leagueoflegends.com')
    DDRAGON_LOCALE: str = os.getenv('DDRAGON_LOCALE', 'en_US')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def region(self) -> Region:
        return Region.from_platform(self.RIOT_PLATFORM)

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
