from .base import ApiModel, OptionalText


class Match(ApiModel):
    """A single fixture or result of a competition, as seen from one source."""

    date_time: str = ""
    home: str = ""
    home_id: OptionalText = None
    home_logo_url: OptionalText = None
    away: str = ""
    away_id: OptionalText = None
    away_logo_url: OptionalText = None
    score: str = ""  # "home:away" or empty when not played / unparsable
    venue: str = ""
    note: OptionalText = None
    match_id: str = ""
    report_url: OptionalText = None
    delegation_url: OptionalText = None


class TableRow(ApiModel):
    """One team's line in a standings table. Counts are kept as page text."""

    rank: str = ""
    team: str = ""
    team_id: OptionalText = None
    team_logo_url: OptionalText = None
    played: str = ""
    wins: str = ""
    draws: str = ""
    losses: str = ""
    score: str = ""
    points: str = ""
