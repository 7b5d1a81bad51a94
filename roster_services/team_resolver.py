from types import MappingProxyType
from typing import Mapping

# NHL stats API team ids keyed by scoreboard abbreviation
TEAM_IDS: Mapping[str, int] = MappingProxyType({
    "NJD": 1,
    "NYI": 2,
    "NYR": 3,
    "PHI": 4,
    "PIT": 5,
    "BOS": 6,
    "BUF": 7,
    "MTL": 8,
    "OTT": 9,
    "TOR": 10,
    "CAR": 12,
    "FLA": 13,
    "TBL": 14,
    "WSH": 15,
    "CHI": 16,
    "DET": 17,
    "NSH": 18,
    "STL": 19,
    "CGY": 20,
    "COL": 21,
    "EDM": 22,
    "VAN": 23,
    "ANA": 24,
    "DAL": 25,
    "LAK": 26,
    "SJS": 28,
    "CBJ": 29,
    "MIN": 30,
    "WPG": 52,
    "ARI": 53,
    "VGK": 54,
})


class TeamResolver:
    """Maps OCR text to team ids through a fixed abbreviation table."""

    def __init__(self, team_ids: Mapping[str, int] = TEAM_IDS):
        self.team_ids = team_ids

    def resolve_teams(self, text: str) -> list[int]:
        """
        Return the ids of every known abbreviation in the text, in reading order.

        Tokens are split on runs of whitespace and matched case-sensitively.
        """
        return [self.team_ids[token] for token in text.split() if token in self.team_ids]
