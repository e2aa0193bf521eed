from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Golfer

MISSED_CUT_PENALTY = 20
MISSED_CUT_STATUSES = frozenset({"cut", "wd", "dq"})


@dataclass(frozen=True)
class GolferScore:
    raw_score_to_par: int
    score_to_par: int
    missed_cut: bool
    cut_score: int | None = None


def is_missed_cut(status: str | None) -> bool:
    if status is None:
        return False
    return str(status).strip().lower() in MISSED_CUT_STATUSES


def score_golfer(raw_score_to_par: int, missed_cut: bool) -> GolferScore:
    """Compute the effective score from the provider's raw score-to-par.

    The penalty is always derived from the raw value, never from a previously
    stored effective score, so scoring the same input twice yields the same
    result.
    """
    raw = int(raw_score_to_par)
    if missed_cut:
        return GolferScore(
            raw_score_to_par=raw,
            score_to_par=raw + MISSED_CUT_PENALTY,
            missed_cut=True,
            cut_score=raw,
        )
    return GolferScore(raw_score_to_par=raw, score_to_par=raw, missed_cut=False)


def effective_score(golfer: "Golfer") -> int:
    # Unscored golfers count as even par.
    return golfer.score_to_par or 0


def format_score_to_par(value: int | None) -> str:
    if value is None:
        return "-"
    value = int(value)
    if value == 0:
        return "E"
    if value > 0:
        return f"+{value}"
    return str(value)
