"""
Best-effort persistence of completed attempts.

Recording runs after the matched result has been returned to the player, in
its own database session. A failure is logged and handed to ``on_failure``;
it is never raised to the caller and never retried here.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence
from uuid import UUID

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from quizplay.core.database import SessionLocal
from quizplay.engine.models import Answer
from quizplay.engine.session import SubmissionOutcome
from quizplay.models.quiz_db.attempt_crud import create_attempt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttemptPayload:
    quiz_id: str
    answers: Sequence[Answer]
    scores: Dict[str, int]
    result_id: Optional[str] = None
    identity_hint: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: SubmissionOutcome) -> "AttemptPayload":
        return cls(
            quiz_id=outcome.quiz_id,
            answers=list(outcome.answers),
            scores=dict(outcome.scores),
            result_id=outcome.result.id,
            identity_hint=outcome.identity_hint,
        )


@dataclass(frozen=True)
class RecordOutcome:
    attempt_id: Optional[UUID] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.attempt_id is not None


class AttemptRecorder:
    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        on_failure: Optional[Callable[[AttemptPayload, RecordOutcome], None]] = None,
    ):
        self.session_factory = session_factory
        self.on_failure = on_failure

    def record(self, payload: AttemptPayload) -> RecordOutcome:
        db = None
        try:
            db = self.session_factory()
            attempt = create_attempt(
                db,
                quiz_id=payload.quiz_id,
                answers=payload.answers,
                scores=payload.scores,
                result_id=payload.result_id,
                identity_hint=payload.identity_hint,
            )
        except Exception as exc:
            self._rollback(db)
            logger.exception("Error saving attempt for quiz %s", payload.quiz_id)
            return self._failed(payload, exc)
        finally:
            self._close(db)

        logger.info("Saved attempt %s for quiz %s", attempt.id, payload.quiz_id)
        return RecordOutcome(attempt_id=attempt.id)

    def dispatch(self, background_tasks: BackgroundTasks, outcome: SubmissionOutcome) -> AttemptPayload:
        """Schedule a single recording after the response has been sent."""
        payload = AttemptPayload.from_outcome(outcome)
        background_tasks.add_task(self.record, payload)
        return payload

    def _failed(self, payload: AttemptPayload, exc: Exception) -> RecordOutcome:
        outcome = RecordOutcome(error=str(exc) or exc.__class__.__name__)
        self._notify_failure(payload, outcome)
        return outcome

    @staticmethod
    def _rollback(db) -> None:
        if db is None:
            return
        try:
            db.rollback()
        except Exception:
            logger.exception("Rollback after failed attempt write raised")

    @staticmethod
    def _close(db) -> None:
        if db is None:
            return
        try:
            db.close()
        except Exception:
            logger.exception("Closing the attempt session raised")

    def _notify_failure(self, payload: AttemptPayload, outcome: RecordOutcome) -> None:
        if self.on_failure is None:
            return
        try:
            self.on_failure(payload, outcome)
        except Exception:
            logger.exception("Attempt failure hook raised for quiz %s", payload.quiz_id)


attempt_recorder = AttemptRecorder()


def get_recorder() -> AttemptRecorder:
    return attempt_recorder
