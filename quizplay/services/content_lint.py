"""
Offline checks over authored quiz content.

None of these findings stop a quiz from being played; the matcher resolves
ambiguous data deterministically. They are reported so authors can fix
content before publishing.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from quizplay.engine.models import Question, Result


class LintCode(str, Enum):
    no_questions = "NO_QUESTIONS"
    no_results = "NO_RESULTS"
    empty_question = "EMPTY_QUESTION"
    inverted_range = "INVERTED_RANGE"
    overlapping_ranges = "OVERLAPPING_RANGES"
    duplicate_label = "DUPLICATE_LABEL"
    unreachable_label = "UNREACHABLE_LABEL"
    unknown_score_label = "UNKNOWN_SCORE_LABEL"


@dataclass(frozen=True)
class LintIssue:
    code: LintCode
    message: str
    refs: List[str] = field(default_factory=list)


def _bounds(result: Result):
    low = result.min_score if result.min_score is not None else 0
    high = result.max_score if result.max_score is not None else math.inf
    return low, high


def lint_quiz(questions: Sequence[Question], results: Sequence[Result]) -> List[LintIssue]:
    issues: List[LintIssue] = []

    if not questions:
        issues.append(LintIssue(LintCode.no_questions, "Quiz has no questions"))
    if not results:
        issues.append(LintIssue(LintCode.no_results, "Quiz has no results"))

    score_labels = {}
    for question in questions:
        if not question.options:
            issues.append(LintIssue(
                LintCode.empty_question, f"Question '{question.text}' has no options", [question.id]
            ))
        for option in question.options:
            for label in option.scores:
                score_labels.setdefault(label.lower(), label)

    result_labels = {}
    for result in results:
        key = (result.personality_label or "").lower()
        if key in result_labels:
            issues.append(LintIssue(
                LintCode.duplicate_label,
                f"Results share personality label '{result.personality_label}'",
                [result_labels[key].id, result.id],
            ))
        else:
            result_labels[key] = result

        if score_labels and key not in score_labels:
            issues.append(LintIssue(
                LintCode.unreachable_label,
                f"No option scores label '{result.personality_label}'",
                [result.id],
            ))

        low, high = _bounds(result)
        if low > high:
            issues.append(LintIssue(
                LintCode.inverted_range,
                f"Result '{result.title}' has min_score {low} above max_score {high}",
                [result.id],
            ))

    for key, label in sorted(score_labels.items()):
        if results and key not in result_labels:
            issues.append(LintIssue(
                LintCode.unknown_score_label, f"Score label '{label}' matches no result", []
            ))

    for index, first in enumerate(results):
        first_low, first_high = _bounds(first)
        if first_low > first_high:
            continue
        for second in results[index + 1:]:
            second_low, second_high = _bounds(second)
            if second_low > second_high:
                continue
            if first_low <= second_high and second_low <= first_high:
                issues.append(LintIssue(
                    LintCode.overlapping_ranges,
                    f"Score ranges of '{first.title}' and '{second.title}' overlap",
                    [first.id, second.id],
                ))

    return issues
