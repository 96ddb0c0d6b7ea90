"""KDA ratio shared by single matches and daily totals."""

PERFECT_KDA = "Perfect"


def format_kda(kills: int, deaths: int, assists: int) -> str:
    """(kills + assists) / deaths with two decimals, or 'Perfect' without deaths."""
    if deaths == 0:
        return PERFECT_KDA
    return f"{(kills + assists) / deaths:.2f}"
