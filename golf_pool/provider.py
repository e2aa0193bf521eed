from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import Any, Protocol, Union

from .golf_api_client import GolfApiClient
from .names import find_match
from .scoring import MISSED_CUT_STATUSES, is_missed_cut

logger = logging.getLogger(__name__)

_FIRST_NAME_KEYS = ("first_name", "firstname", "first")
_LAST_NAME_KEYS = ("last_name", "lastname", "last")
_FULL_NAME_KEYS = ("player_name", "name", "full_name")
_TO_PAR_KEYS = ("total_to_par", "score_to_par", "to_par")
_STATUS_KEYS = ("status",)
_ROUND_KEYS = ("current_round", "round")
_CUT_LINE_KEYS = ("cut_line", "cutline")
_SCORE_WORDS = re.compile(r"^(\d+)\s*(under|over)$")


@dataclass(frozen=True)
class LeaderboardEntry:
    full_name: str
    score_to_par: int
    status: str
    missed_cut: bool


@dataclass(frozen=True)
class TournamentStatus:
    status: str
    round: str
    cut_line: int
    players_made_cut: int


@dataclass(frozen=True)
class PlayerScore:
    name: str
    provider_name: str
    score_to_par: int
    missed_cut: bool

    @property
    def cut_score(self) -> int | None:
        return self.score_to_par if self.missed_cut else None


@dataclass(frozen=True)
class PlayerNotFound:
    name: str


ScoreOutcome = Union[PlayerScore, PlayerNotFound]


@dataclass(frozen=True)
class ProviderResult:
    tournament: TournamentStatus
    scores: dict[str, ScoreOutcome] = field(default_factory=dict)

    @property
    def unmatched(self) -> list[str]:
        return [name for name, outcome in self.scores.items() if isinstance(outcome, PlayerNotFound)]


class ScoreProvider(Protocol):
    async def fetch_scores(self, tournament_id: str, names: list[str]) -> ProviderResult: ...


class LeaderboardProvider:
    def __init__(self, client: GolfApiClient):
        self._client = client

    async def fetch_scores(self, tournament_id: str, names: list[str]) -> ProviderResult:
        payload = await self._client.get_leaderboard(tournament_id)
        tournament, entries = parse_leaderboard(payload)
        scores = resolve_scores(names, entries)
        logger.info(
            "Leaderboard %s: %d entries, %d/%d roster golfers matched",
            tournament_id,
            len(entries),
            sum(1 for outcome in scores.values() if isinstance(outcome, PlayerScore)),
            len(scores),
        )
        return ProviderResult(tournament=tournament, scores=scores)


def resolve_scores(names: list[str], entries: list[LeaderboardEntry]) -> dict[str, ScoreOutcome]:
    candidates = [(entry.full_name, entry) for entry in entries]
    scores: dict[str, ScoreOutcome] = {}
    for name in names:
        if name in scores:
            continue
        entry = find_match(name, candidates)
        if entry is None:
            scores[name] = PlayerNotFound(name=name)
            continue
        scores[name] = PlayerScore(
            name=name,
            provider_name=entry.full_name,
            score_to_par=entry.score_to_par,
            missed_cut=entry.missed_cut,
        )
    return scores


def parse_leaderboard(payload: Any) -> tuple[TournamentStatus, list[LeaderboardEntry]]:
    root = payload if isinstance(payload, dict) else {}
    results = root.get("results") if isinstance(root.get("results"), dict) else {}

    tournament = results.get("tournament") or root.get("tournament") or {}
    if not isinstance(tournament, dict):
        tournament = {}
    rows = results.get("leaderboard") or root.get("leaderboard") or []
    if not isinstance(rows, list):
        rows = []

    entries = [entry for entry in (_entry_from_row(row) for row in rows if isinstance(row, dict)) if entry]
    made_cut = sum(1 for entry in entries if entry.status not in MISSED_CUT_STATUSES)

    current_round = _string_from_keys(tournament, _ROUND_KEYS) or "1"
    cut_line = _score_to_par_from_value(_value_from_keys(tournament, _CUT_LINE_KEYS))
    status = TournamentStatus(
        status=_string_from_keys(tournament, ("status",)) or "In Progress",
        round=f"Round {current_round}",
        cut_line=cut_line if cut_line is not None else 0,
        players_made_cut=made_cut,
    )
    return status, entries


def _entry_from_row(row: dict[str, Any]) -> LeaderboardEntry | None:
    first = _string_from_keys(row, _FIRST_NAME_KEYS)
    last = _string_from_keys(row, _LAST_NAME_KEYS)
    if first or last:
        full_name = " ".join(part for part in (first, last) if part)
    else:
        full_name = _string_from_keys(row, _FULL_NAME_KEYS)
    if not full_name:
        return None

    score = _score_to_par_from_value(_value_from_keys(row, _TO_PAR_KEYS))
    status = (_string_from_keys(row, _STATUS_KEYS) or "active").lower()
    return LeaderboardEntry(
        full_name=full_name,
        score_to_par=score if score is not None else 0,
        status=status,
        missed_cut=is_missed_cut(status),
    )


def _score_to_par_from_value(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(round(value))
    text = str(value).strip().lower()
    if not text:
        return None
    if text in ("e", "even"):
        return 0
    match = _SCORE_WORDS.match(text)
    if match:
        amount = int(match.group(1))
        return -amount if match.group(2) == "under" else amount
    try:
        return int(round(float(text)))
    except ValueError:
        return None


def _value_from_keys(row: dict[str, Any], keys: tuple[str, ...]) -> Any:
    lowered = {str(k).lower(): v for k, v in row.items()}
    for key in keys:
        value = lowered.get(key)
        if value is not None:
            return value
    return None


def _string_from_keys(row: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    lowered = {str(k).lower(): v for k, v in row.items()}
    for key in keys:
        if key in lowered:
            value = lowered[key]
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                continue
            text = str(value).strip()
            if text:
                return text
    return None
