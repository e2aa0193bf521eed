import pytest

from golf_pool.models import Golfer
from golf_pool.scoring import (
    MISSED_CUT_PENALTY,
    effective_score,
    format_score_to_par,
    is_missed_cut,
    score_golfer,
)


@pytest.mark.parametrize("status", ["cut", "CUT", " wd ", "dq"])
def test_missed_cut_statuses(status: str) -> None:
    assert is_missed_cut(status)


@pytest.mark.parametrize("status", ["active", "complete", "", None])
def test_active_statuses(status) -> None:
    assert not is_missed_cut(status)


def test_missed_cut_adds_penalty_and_keeps_raw_cut_score() -> None:
    scored = score_golfer(-7, missed_cut=True)
    assert scored.score_to_par == -7 + MISSED_CUT_PENALTY == 13
    assert scored.cut_score == -7
    assert scored.raw_score_to_par == -7
    assert scored.missed_cut is True


def test_made_cut_uses_raw_score_and_clears_cut_score() -> None:
    scored = score_golfer(-3, missed_cut=False)
    assert scored.score_to_par == -3
    assert scored.cut_score is None
    assert scored.missed_cut is False


def test_scoring_is_idempotent_for_same_raw_input() -> None:
    first = score_golfer(2, missed_cut=True)
    second = score_golfer(first.raw_score_to_par, missed_cut=True)
    assert first == second
    assert second.score_to_par == 22


def test_effective_score_treats_unscored_as_even() -> None:
    unscored = Golfer(id=1, name="Jon Rahm", participant_id=1)
    scored = Golfer(id=2, name="Aaron Rai", participant_id=1, score_to_par=14, missed_cut=True, cut_score=-6)
    assert effective_score(unscored) == 0
    assert effective_score(scored) == 14


def test_golfer_rejects_cut_score_without_missed_cut() -> None:
    with pytest.raises(ValueError):
        Golfer(id=1, name="Jon Rahm", participant_id=1, score_to_par=0, cut_score=0)
    with pytest.raises(ValueError):
        Golfer(id=1, name="Jon Rahm", participant_id=1, score_to_par=20, missed_cut=True)


def test_format_score_to_par() -> None:
    assert format_score_to_par(0) == "E"
    assert format_score_to_par(3) == "+3"
    assert format_score_to_par(-2) == "-2"
    assert format_score_to_par(None) == "-"
