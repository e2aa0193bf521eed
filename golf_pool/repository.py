from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timezone
import logging

from .golf_api_client import ProviderUnavailable
from .models import (
    Golfer,
    LeaderboardResponse,
    Participant,
    ParticipantWithGolfers,
    PoolDefinition,
    TournamentInfo,
)
from .provider import PlayerScore, ScoreProvider
from .ranking import compute_standings
from .scoring import score_golfer

logger = logging.getLogger(__name__)


class RefreshFailed(RuntimeError):
    pass


@dataclass(frozen=True)
class PoolState:
    participants: tuple[Participant, ...]
    golfers: tuple[Golfer, ...]
    tournament_info: TournamentInfo


@dataclass(frozen=True)
class RefreshOutcome:
    leaderboard: LeaderboardResponse
    unmatched: list[str]


class PoolRepository:
    """Owns the pool state and serializes every mutation of it.

    State lives in a single immutable ``PoolState`` that mutations replace in
    one assignment after ranks are recomputed, so a reader holding any
    snapshot always sees totals and ranks that agree with its golfer scores.
    """

    def __init__(self, provider: ScoreProvider, state: PoolState, tournament_id: str):
        self._provider = provider
        self._tournament_id = tournament_id
        self._state = _rerank(state)
        self._lock = asyncio.Lock()

    @classmethod
    def from_pool(
        cls,
        provider: ScoreProvider,
        pool: PoolDefinition,
        tournament_id: str,
        sample_scores: Mapping[str, tuple[int, bool]] | None = None,
    ) -> "PoolRepository":
        participants: list[Participant] = []
        golfers: list[Golfer] = []
        for entry in pool.participants:
            participant_id = len(participants) + 1
            participants.append(Participant(id=participant_id, name=entry.name))
            for golfer_name in entry.golfers:
                golfer = Golfer(id=len(golfers) + 1, name=golfer_name, participant_id=participant_id)
                if sample_scores and golfer_name in sample_scores:
                    raw, missed_cut = sample_scores[golfer_name]
                    golfer = _apply_outcome(
                        golfer,
                        PlayerScore(
                            name=golfer_name,
                            provider_name=golfer_name,
                            score_to_par=raw,
                            missed_cut=missed_cut,
                        ),
                    )
                golfers.append(golfer)

        state = PoolState(
            participants=tuple(participants),
            golfers=tuple(golfers),
            tournament_info=TournamentInfo(last_updated=_utcnow()),
        )
        return cls(provider, state, tournament_id)

    @property
    def tournament_id(self) -> str:
        return self._tournament_id

    def snapshot(self) -> PoolState:
        return self._state

    def get_leaderboard(self) -> LeaderboardResponse:
        return _leaderboard_from(self._state)

    def get_participants(self) -> list[ParticipantWithGolfers]:
        return _leaderboard_from(self._state).participants

    def get_participant(self, participant_id: int) -> ParticipantWithGolfers | None:
        state = self._state
        for participant in state.participants:
            if participant.id == participant_id:
                return _with_golfers(participant, state.golfers)
        return None

    def get_golfers(self) -> list[Golfer]:
        return list(self._state.golfers)

    def get_golfers_by_participant(self, participant_id: int) -> list[Golfer]:
        return [golfer for golfer in self._state.golfers if golfer.participant_id == participant_id]

    def get_golfer(self, golfer_id: int) -> Golfer | None:
        for golfer in self._state.golfers:
            if golfer.id == golfer_id:
                return golfer
        return None

    def get_tournament_info(self) -> TournamentInfo:
        return self._state.tournament_info

    async def refresh(self) -> RefreshOutcome:
        async with self._lock:
            state = self._state
            names = list(dict.fromkeys(golfer.name for golfer in state.golfers))
            logger.info(
                "Refreshing scores for %d golfers (tournament %s)",
                len(names),
                self._tournament_id,
            )
            try:
                result = await self._provider.fetch_scores(self._tournament_id, names)
            except ProviderUnavailable as exc:
                logger.error("Score refresh failed, keeping previous standings: %s", exc)
                raise RefreshFailed("Failed to refresh scores") from exc

            unmatched: list[str] = []
            golfers: list[Golfer] = []
            for golfer in state.golfers:
                outcome = result.scores.get(golfer.name)
                if not isinstance(outcome, PlayerScore):
                    if golfer.name not in unmatched:
                        unmatched.append(golfer.name)
                        logger.warning("Player %s not found in provider leaderboard", golfer.name)
                    golfers.append(golfer)
                    continue
                golfers.append(_apply_outcome(golfer, outcome))

            tournament = result.tournament
            info = TournamentInfo(
                status=tournament.status,
                round=tournament.round,
                cut_line=tournament.cut_line,
                players_made_cut=tournament.players_made_cut,
                last_updated=_utcnow(),
            )
            new_state = _rerank(replace(state, golfers=tuple(golfers), tournament_info=info))
            self._state = new_state

        logger.info(
            "Scores refreshed: %d golfers, %d unmatched",
            len(new_state.golfers),
            len(unmatched),
        )
        return RefreshOutcome(leaderboard=_leaderboard_from(new_state), unmatched=unmatched)

    async def create_participant(self, name: str, golfer_names: list[str]) -> ParticipantWithGolfers:
        if not name.strip():
            raise ValueError("Participant name must not be empty.")
        if not golfer_names:
            raise ValueError("A participant needs at least one golfer.")

        async with self._lock:
            state = self._state
            participant_id = max((p.id for p in state.participants), default=0) + 1
            next_golfer_id = max((g.id for g in state.golfers), default=0) + 1
            participant = Participant(id=participant_id, name=name.strip())
            new_golfers = tuple(
                Golfer(id=next_golfer_id + offset, name=golfer_name, participant_id=participant_id)
                for offset, golfer_name in enumerate(golfer_names)
            )
            new_state = _rerank(
                replace(
                    state,
                    participants=state.participants + (participant,),
                    golfers=state.golfers + new_golfers,
                )
            )
            self._state = new_state

        created = next(p for p in new_state.participants if p.id == participant_id)
        return _with_golfers(created, new_state.golfers)

    async def rename_participant(self, participant_id: int, name: str) -> Participant | None:
        if not name.strip():
            raise ValueError("Participant name must not be empty.")

        async with self._lock:
            state = self._state
            if not any(p.id == participant_id for p in state.participants):
                return None
            participants = tuple(
                p.model_copy(update={"name": name.strip()}) if p.id == participant_id else p
                for p in state.participants
            )
            new_state = _rerank(replace(state, participants=participants))
            self._state = new_state

        return next(p for p in new_state.participants if p.id == participant_id)


def _apply_outcome(golfer: Golfer, outcome: PlayerScore) -> Golfer:
    scored = score_golfer(outcome.score_to_par, outcome.missed_cut)
    return golfer.model_copy(
        update={
            "raw_score_to_par": scored.raw_score_to_par,
            "score_to_par": scored.score_to_par,
            "missed_cut": scored.missed_cut,
            "cut_score": scored.cut_score,
        }
    )


def _rerank(state: PoolState) -> PoolState:
    return replace(state, participants=compute_standings(state.participants, state.golfers))


def _with_golfers(participant: Participant, golfers: tuple[Golfer, ...]) -> ParticipantWithGolfers:
    owned = [golfer for golfer in golfers if golfer.participant_id == participant.id]
    return ParticipantWithGolfers(**participant.model_dump(), golfers=owned)


def _leaderboard_from(state: PoolState) -> LeaderboardResponse:
    participants = sorted(state.participants, key=lambda p: (p.rank or 0, p.id))
    return LeaderboardResponse(
        participants=[_with_golfers(p, state.golfers) for p in participants],
        tournament_info=state.tournament_info,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
