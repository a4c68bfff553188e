from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import ApiModel, OptionalText
from .enums import ClubType
from .match import Match, TableRow


class ClubContext(BaseModel):
    """The club a competition document is being filtered for.

    An empty context (no name and no id) means every row is kept.
    """

    model_config = ConfigDict(frozen=True)

    club_type: ClubType = ClubType.FOOTBALL
    club_name: str = ""
    club_id: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.club_name.strip() and not self.club_id.strip()


class CompetitionTable(ApiModel):
    """Standings sections of a competition; only the overall table is scraped."""

    overall: List[TableRow] = Field(default_factory=list)


class Competition(ApiModel):
    id: str = ""
    code: str = ""
    name: str = ""
    team_count: str = ""
    matches_link: str = ""
    matches: Optional[List[Match]] = None
    table: Optional[CompetitionTable] = None


class ClubInfo(ApiModel):
    name: str = ""
    club_id: str
    club_type: ClubType
    club_internal_id: OptionalText = None
    url: OptionalText = None
    logo_url: OptionalText = None
    address: OptionalText = None
    category: OptionalText = None
    competitions: List[Competition] = Field(default_factory=list)

    def context(self) -> ClubContext:
        return ClubContext(
            club_type=self.club_type, club_name=self.name, club_id=self.club_id
        )


class SearchResult(ApiModel):
    """One club from the fotbal.cz club search."""

    name: str = ""
    club_id: str = ""
    club_type: ClubType = ClubType.FOOTBALL
    url: str = ""
    logo_url: str = ""
    category: OptionalText = None
    address: OptionalText = None


class SearchResponse(ApiModel):
    query: str
    count: int = 0
    results: List[SearchResult] = Field(default_factory=list)


class LogoCandidate(BaseModel):
    """The part of a search result the logo lookup cares about."""

    name: str = ""
    logo_url: str = ""


class LogoSearchPayload(BaseModel):
    results: List[LogoCandidate] = Field(default_factory=list)
