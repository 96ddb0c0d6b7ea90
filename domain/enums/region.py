"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host (e.g., euw1) for summoner/league/spectator
    - regional_route: routing host for account and match APIs (e.g., europe)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for account and match APIs."""
        if self.value in ("euw1", "eun1", "tr1", "ru", "me1"):
            return "europe"
        if self.value in ("kr", "jp1"):
            return "asia"
        if self.value in ("oc1", "ph2", "sg2", "th2", "tw2", "vn2"):
            return "sea"
        return "americas"

    @classmethod
    def from_platform(cls, platform: str) -> 'Region':
        """Create Region from a platform id such as 'EUW1' or 'euw1'."""
        try:
            return cls(platform.strip().lower())
        except ValueError:
            return cls.EUW1  # Default fallback
