from collections import defaultdict
from typing import Iterable

from quizplay.engine.models import Answer, ScoreVector


def aggregate(answers: Iterable[Answer]) -> ScoreVector:
    scores = defaultdict(int)

    for answer in answers:
        for label, weight in answer.scores.items():
            scores[label] += weight

    return dict(scores)


def total_score(scores: ScoreVector) -> int:
    return sum(scores.values())
