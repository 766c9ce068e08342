from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from quizplay.engine.models import Answer
from quizplay.models.all_models import QuizAttempt


def _as_uuid(value) -> Optional[UUID]:
    if value is None or isinstance(value, UUID):
        return value
    return UUID(str(value))


def create_attempt(
    db: Session,
    quiz_id,
    answers: Sequence[Answer],
    scores: Dict[str, int],
    result_id=None,
    identity_hint: Optional[str] = None,
    completed_at: Optional[datetime] = None,
) -> QuizAttempt:
    attempt = QuizAttempt(
        quiz_id=_as_uuid(quiz_id),
        result_id=_as_uuid(result_id),
        answers=[a.to_dict() for a in answers],
        scores=dict(scores),
        identity_hint=identity_hint,
        completed_at=completed_at or datetime.utcnow(),
    )
    db.add(attempt)
    db.commit()
    db.refresh(attempt)
    return attempt


def get_attempt(db: Session, attempt_id: UUID) -> Optional[QuizAttempt]:
    return db.query(QuizAttempt).filter(QuizAttempt.id == attempt_id).first()


def list_attempts(db: Session, quiz_id: UUID, skip: int = 0, limit: int = 100) -> List[QuizAttempt]:
    return (
        db.query(QuizAttempt)
        .filter(QuizAttempt.quiz_id == quiz_id)
        .order_by(QuizAttempt.completed_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def count_attempts(db: Session, quiz_id: UUID) -> int:
    return db.query(QuizAttempt).filter(QuizAttempt.quiz_id == quiz_id).count()


def stored_answers(attempt: QuizAttempt) -> List[Answer]:
    return [Answer.from_dict(a) for a in attempt.answers or []]
