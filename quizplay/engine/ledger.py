"""
Answer ledger: the navigation state machine for one play-through.

The ledger holds at most one Answer per question, keyed by question id, and a
cursor over the questions sorted by their ``order``. Moving backward never
drops answers; selecting again for a question replaces its answer.

Navigation that is not allowed in the current state is rejected by returning
False (or None from ``submit``) rather than raising.
"""
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

from quizplay.engine.errors import InvalidQuizContentError, NoQuestionsError, UnknownOptionError
from quizplay.engine.models import Answer, Question

logger = logging.getLogger(__name__)


class LedgerState(str, Enum):
    intro = "intro"
    question = "question"
    submitted = "submitted"


class AnswerLedger:
    def __init__(self, questions: Sequence[Question]):
        ordered = sorted(questions, key=lambda q: q.order)
        orders = [q.order for q in ordered]
        if len(set(orders)) != len(orders):
            raise InvalidQuizContentError("Question order values must be unique within a quiz")
        ids = [q.id for q in ordered]
        if len(set(ids)) != len(ids):
            raise InvalidQuizContentError("Question ids must be unique within a quiz")

        self.questions: List[Question] = ordered
        self.state = LedgerState.intro
        self.position = 0
        self.identity_hint: Optional[str] = None
        self._answers: Dict[str, Answer] = {}

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.state != LedgerState.question:
            return None
        return self.questions[self.position]

    @property
    def current_answer(self) -> Optional[Answer]:
        question = self.current_question
        if question is None:
            return None
        return self._answers.get(question.id)

    @property
    def selected_option_id(self) -> Optional[str]:
        answer = self.current_answer
        return answer.selected_option_id if answer else None

    @property
    def is_last_question(self) -> bool:
        return self.state == LedgerState.question and self.position == len(self.questions) - 1

    @property
    def can_advance(self) -> bool:
        return self.current_answer is not None

    def answer_for(self, question_id: str) -> Optional[Answer]:
        return self._answers.get(question_id)

    def answers(self) -> List[Answer]:
        """Recorded answers in question order."""
        return [self._answers[q.id] for q in self.questions if q.id in self._answers]

    def start(self, identity_hint: Optional[str] = None) -> bool:
        if self.state != LedgerState.intro:
            return False
        if not self.questions:
            raise NoQuestionsError()

        # returning from intro keeps an earlier hint unless a new one is given
        if identity_hint is not None:
            self.identity_hint = identity_hint.strip() or None
        self.state = LedgerState.question
        self.position = 0
        return True

    def select(self, option_id: str) -> bool:
        question = self.current_question
        if question is None:
            logger.debug("Selection rejected in state %s", self.state.value)
            return False

        option = question.find_option(option_id)
        if option is None:
            raise UnknownOptionError(question.id, option_id)

        self._answers[question.id] = Answer.from_option(question.id, option)
        return True

    def advance(self) -> bool:
        if not self.can_advance or self.is_last_question:
            logger.debug("Advance rejected at position %s", self.position)
            return False

        self.position += 1
        return True

    def back(self) -> bool:
        if self.state != LedgerState.question:
            return False

        if self.position == 0:
            self.state = LedgerState.intro
        else:
            self.position -= 1
        return True

    def submit(self) -> Optional[List[Answer]]:
        if not self.is_last_question or not self.can_advance:
            logger.debug("Submit rejected at position %s", self.position)
            return None

        self.state = LedgerState.submitted
        return self.answers()
