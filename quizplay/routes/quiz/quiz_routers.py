from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from uuid import UUID
from quizplay.core.database import get_db
from quizplay.models.quiz_db.attempt_crud import count_attempts, list_attempts
from quizplay.models.quiz_db.quiz_crud import (
    count_quizzes, create_quiz, delete_quiz, get_quiz, get_quiz_by_slug, list_quizzes, to_content
)
from quizplay.schemas.attempt.attempt_base import AttemptOut
from quizplay.schemas.common.page_response import PageResponse
from quizplay.schemas.generation.generated_quiz import GeneratedQuiz
from quizplay.schemas.quiz.lint_base import LintIssueOut, LintReportOut
from quizplay.schemas.quiz.quiz_base import QuizContentOut, QuizCreate, QuizOut
from quizplay.services.content_lint import lint_quiz
from quizplay.services.generation import import_generated_quiz

quiz_router = APIRouter(prefix="/quizzes", tags=["Quiz"])


def _get_quiz_or_404(db: Session, quiz_id: UUID):
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return quiz


@quiz_router.post("/", response_model=QuizContentOut, status_code=201)
def create_quiz_route(quiz_in: QuizCreate, db: Session = Depends(get_db)):
    if quiz_in.slug and get_quiz_by_slug(db, quiz_in.slug):
        raise HTTPException(status_code=400, detail="Slug already exists")
    return create_quiz(db, quiz_in)


@quiz_router.get("/", response_model=PageResponse[QuizOut])
def list_quizzes_route(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = count_quizzes(db)
    quizzes = list_quizzes(db, skip=skip, limit=size)

    return PageResponse[QuizOut](
        page=page,
        size=size,
        total=total,
        has_next=(page * size) < total,
        has_prev=page > 1,
        items=[QuizOut.model_validate(q) for q in quizzes]
    )


@quiz_router.get("/{quiz_id}", response_model=QuizContentOut)
def get_quiz_route(quiz_id: UUID, db: Session = Depends(get_db)):
    return _get_quiz_or_404(db, quiz_id)


@quiz_router.delete("/{quiz_id}", status_code=204)
def delete_quiz_route(quiz_id: UUID, db: Session = Depends(get_db)):
    quiz = delete_quiz(db, quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return None


@quiz_router.get("/{quiz_id}/lint", response_model=LintReportOut)
def lint_quiz_route(quiz_id: UUID, db: Session = Depends(get_db)):
    content = to_content(_get_quiz_or_404(db, quiz_id))
    issues = lint_quiz(content.questions, content.results)
    return LintReportOut(
        quiz_id=quiz_id,
        ok=not issues,
        issues=[LintIssueOut(code=i.code.value, message=i.message, refs=i.refs) for i in issues],
    )


@quiz_router.post("/{quiz_id}/generated", response_model=QuizContentOut)
def import_generated_route(quiz_id: UUID, doc: GeneratedQuiz, db: Session = Depends(get_db)):
    quiz = _get_quiz_or_404(db, quiz_id)
    return import_generated_quiz(db, quiz, doc)


@quiz_router.get("/{quiz_id}/attempts", response_model=PageResponse[AttemptOut])
def list_attempts_route(
    quiz_id: UUID,
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    db: Session = Depends(get_db)
):
    _get_quiz_or_404(db, quiz_id)
    skip = (page - 1) * size
    total = count_attempts(db, quiz_id)
    attempts = list_attempts(db, quiz_id, skip=skip, limit=size)

    return PageResponse[AttemptOut](
        page=page,
        size=size,
        total=total,
        has_next=(page * size) < total,
        has_prev=page > 1,
        items=[AttemptOut.model_validate(a) for a in attempts]
    )
