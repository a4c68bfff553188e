from enum import Enum


class ClubType(str, Enum):
    FOOTBALL = "football"
    FUTSAL = "futsal"

    @property
    def sport_param(self) -> str:
        """Value of the ``sport`` query parameter on is.fotbal.cz."""
        return "futsal" if self is ClubType.FUTSAL else "fotbal"

    @property
    def category(self) -> str:
        return "Futsal" if self is ClubType.FUTSAL else "Fotbal"

    @classmethod
    def parse(cls, value: str) -> "ClubType":
        """Exact lookup; raises ValueError for anything but "football" or "futsal"."""
        return cls(value)


class Source(str, Enum):
    FOTBAL_CZ = "fotbal.cz"
    IS_FOTBAL = "is.fotbal.cz"
    SEARCH_API = "search-api"
    UNKNOWN = "Unknown"
