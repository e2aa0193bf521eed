from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from .models import Golfer, Participant
from .scoring import effective_score


def participant_totals(golfers: Iterable[Golfer]) -> dict[int, int]:
    totals: dict[int, int] = defaultdict(int)
    for golfer in golfers:
        totals[golfer.participant_id] += effective_score(golfer)
    return dict(totals)


def compute_standings(
    participants: Sequence[Participant],
    golfers: Iterable[Golfer],
) -> tuple[Participant, ...]:
    """Return participants with fresh totals and ranks, in their original order.

    Every total is computed before any rank is assigned. Ranks follow a stable
    ascending sort on total score, so equal totals keep their input order and
    receive consecutive ranks.
    """
    totals = participant_totals(golfers)
    with_totals = [
        participant.model_copy(update={"total_score": totals.get(participant.id, 0)})
        for participant in participants
    ]
    ordered = sorted(range(len(with_totals)), key=lambda idx: with_totals[idx].total_score)
    ranks = {idx: position for position, idx in enumerate(ordered, start=1)}
    return tuple(
        participant.model_copy(update={"rank": ranks[idx]})
        for idx, participant in enumerate(with_totals)
    )
