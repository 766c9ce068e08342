import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence

from quizplay.engine.aggregator import aggregate
from quizplay.engine.errors import NoResultsError
from quizplay.engine.ledger import AnswerLedger, LedgerState
from quizplay.engine.matcher import MatchTier, match_result
from quizplay.engine.models import Answer, Question, Result, ScoreVector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionOutcome:
    quiz_id: str
    answers: List[Answer]
    scores: ScoreVector
    result: Result
    tier: MatchTier
    identity_hint: Optional[str] = None


class PlaySession:
    """One play-through of a quiz: a fresh ledger plus the quiz's result catalog."""

    def __init__(self, quiz_id: str, questions: Sequence[Question], results: Sequence[Result]):
        self.quiz_id = quiz_id
        self.results: List[Result] = list(results)
        self.ledger = AnswerLedger(questions)
        self.outcome: Optional[SubmissionOutcome] = None
        # hosts may drive one session from several request threads
        self._lock = threading.Lock()

    @property
    def state(self) -> LedgerState:
        return self.ledger.state

    def start(self, identity_hint: Optional[str] = None) -> bool:
        if self.ledger.questions and not self.results:
            raise NoResultsError(self.quiz_id)
        with self._lock:
            return self.ledger.start(identity_hint)

    def select(self, option_id: str) -> bool:
        with self._lock:
            return self.ledger.select(option_id)

    def advance(self) -> bool:
        with self._lock:
            return self.ledger.advance()

    def back(self) -> bool:
        with self._lock:
            return self.ledger.back()

    def submit(self) -> Optional[SubmissionOutcome]:
        if not self.results:
            raise NoResultsError(self.quiz_id)

        with self._lock:
            answers = self.ledger.submit()
        # only the call that moved the ledger to submitted gets answers back
        if answers is None:
            return None

        scores = aggregate(answers)
        matched = match_result(scores, self.results)
        logger.info(
            "Quiz %s submitted: result=%s tier=%s",
            self.quiz_id, matched.result.id, matched.tier.value,
        )
        self.outcome = SubmissionOutcome(
            quiz_id=self.quiz_id,
            answers=answers,
            scores=scores,
            result=matched.result,
            tier=matched.tier,
            identity_hint=self.ledger.identity_hint,
        )
        return self.outcome
