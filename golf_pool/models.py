from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Golfer(_CamelModel):
    id: int
    name: str
    participant_id: int
    raw_score_to_par: Optional[int] = None
    score_to_par: Optional[int] = None
    missed_cut: bool = False
    cut_score: Optional[int] = None

    @model_validator(mode="after")
    def _cut_score_tracks_missed_cut(self) -> "Golfer":
        if self.missed_cut != (self.cut_score is not None):
            raise ValueError("cut_score must be set if and only if missed_cut is true")
        return self


class Participant(_CamelModel):
    id: int
    name: str
    total_score: int = 0
    rank: Optional[int] = None


class ParticipantWithGolfers(Participant):
    golfers: list[Golfer] = Field(default_factory=list)


class TournamentInfo(_CamelModel):
    status: str = "In Progress"
    round: str = "Round 1"
    cut_line: Optional[int] = None
    players_made_cut: Optional[int] = None
    last_updated: datetime


class LeaderboardResponse(_CamelModel):
    participants: list[ParticipantWithGolfers]
    tournament_info: TournamentInfo


class RefreshResponse(LeaderboardResponse):
    message: str = "Scores updated successfully"
    unmatched: list[str] = Field(default_factory=list)


class TournamentInfoResponse(_CamelModel):
    tournament_info: TournamentInfo


class ErrorResponse(_CamelModel):
    message: str


class PoolEntry(_CamelModel):
    name: str = Field(min_length=1)
    golfers: list[str] = Field(min_length=1)


class PoolDefinition(_CamelModel):
    participants: list[PoolEntry] = Field(default_factory=list)
