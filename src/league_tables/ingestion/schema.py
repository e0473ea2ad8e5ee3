"""
Boundary schema for fixture records as published by the upstream feed.

Field names follow the feed (HomeTeam, AwayTeam, HomeTeamScore, AwayTeamScore);
a null score means the match has not been played yet.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from league_tables.engine.types import Fixture

Score = Annotated[StrictInt, Field(ge=0)]


class RawFixture(BaseModel):
    """One fixture record from a file or the web feed. Extra feed keys are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    home_team: str = Field(..., alias="HomeTeam", description="Home team name")
    away_team: str = Field(..., alias="AwayTeam", description="Away team name")
    home_score: Optional[Score] = Field(..., alias="HomeTeamScore", description="Home goals; null if unplayed")
    away_score: Optional[Score] = Field(..., alias="AwayTeamScore", description="Away goals; null if unplayed")

    @field_validator("home_team", "away_team")
    @classmethod
    def _team_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("team name must not be blank")
        return value

    @property
    def is_played(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    def to_fixture(self) -> Fixture:
        """Engine Fixture for a played record. Call only when is_played."""
        return Fixture(
            home_team=self.home_team,
            away_team=self.away_team,
            home_score=self.home_score,
            away_score=self.away_score,
        )

    def to_feed_dict(self) -> Dict[str, Any]:
        """The four feed fields, as written to local fixture files."""
        return self.model_dump(by_alias=True)
