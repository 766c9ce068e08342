"""
Maps a score vector onto one of a quiz's authored results.

Three tiers are tried in order and the first hit wins:

1. LABEL   - the highest-weighted label equals a result's personality label
             (case-insensitive). Equal weights go to the lexicographically
             smallest label.
2. RANGE   - the total score lies inside a result's inclusive
             [min_score, max_score] range. Missing bounds mean 0 and +inf.
3. DEFAULT - the first authored result.

When several results qualify within a tier, the earliest in authored order
is used.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from quizplay.engine.aggregator import total_score
from quizplay.engine.errors import NoResultsError
from quizplay.engine.models import Result, ScoreVector


class MatchTier(str, Enum):
    label = "label"
    range = "range"
    default = "default"


@dataclass(frozen=True)
class MatchOutcome:
    result: Result
    tier: MatchTier


def ranked_labels(scores: ScoreVector) -> List[str]:
    return [label for label, _ in sorted(scores.items(), key=lambda item: (-item[1], item[0]))]


def top_label(scores: ScoreVector) -> Optional[str]:
    ranked = ranked_labels(scores)
    return ranked[0] if ranked else None


def in_range(result: Result, total: int) -> bool:
    low = result.min_score if result.min_score is not None else 0
    high = result.max_score if result.max_score is not None else math.inf
    return low <= total <= high


def find_by_label(label: str, results: Sequence[Result]) -> Optional[Result]:
    wanted = label.lower()
    for result in results:
        if (result.personality_label or "").lower() == wanted:
            return result
    return None


def find_by_range(total: int, results: Sequence[Result]) -> Optional[Result]:
    for result in results:
        if in_range(result, total):
            return result
    return None


def match_result(scores: ScoreVector, results: Sequence[Result]) -> MatchOutcome:
    if not results:
        raise NoResultsError()

    label = top_label(scores)
    if label is not None:
        result = find_by_label(label, results)
        if result is not None:
            return MatchOutcome(result=result, tier=MatchTier.label)

    result = find_by_range(total_score(scores), results)
    if result is not None:
        return MatchOutcome(result=result, tier=MatchTier.range)

    return MatchOutcome(result=results[0], tier=MatchTier.default)
