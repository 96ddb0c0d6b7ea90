"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="demacia-cli",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="demacia.jsonl",
    )
    # Lazy import keeps logging configured before any module logger is used
    from presentation.cli import LookupCommand
    try:
        return asyncio.run(LookupCommand().run(argv))
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
