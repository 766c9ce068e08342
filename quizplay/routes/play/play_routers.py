from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session
from uuid import UUID
from quizplay.core.database import get_db
from quizplay.engine.errors import (
    InvalidQuizContentError, NoQuestionsError, NoResultsError, QuizConfigurationError, UnknownOptionError
)
from quizplay.engine.session import PlaySession
from quizplay.models.quiz_db.quiz_crud import load_quiz_content
from quizplay.schemas.play.play_base import (
    PlayStateOut, QuestionPlayOut, SelectRequest, StartRequest, SubmissionOut
)
from quizplay.schemas.quiz.quiz_base import ResultOut
from quizplay.services.play_sessions import PlaySessionRegistry, get_play_sessions
from quizplay.services.recorder import AttemptRecorder, get_recorder

play_router = APIRouter(prefix="/play", tags=["Play"])


def _unavailable(exc: QuizConfigurationError) -> HTTPException:
    return HTTPException(status_code=409, detail=f"Quiz unavailable: {exc}")


def _state_out(session_id: UUID, session: PlaySession, accepted: bool = True) -> PlayStateOut:
    ledger = session.ledger
    question = ledger.current_question
    return PlayStateOut(
        session_id=session_id,
        quiz_id=UUID(session.quiz_id),
        state=ledger.state,
        accepted=accepted,
        position=ledger.position,
        total_questions=ledger.total_questions,
        question=QuestionPlayOut.from_engine(question) if question else None,
        selected_option_id=ledger.selected_option_id,
        can_advance=ledger.can_advance and not ledger.is_last_question,
        is_last_question=ledger.is_last_question,
    )


def _get_session_or_404(sessions: PlaySessionRegistry, session_id: UUID) -> PlaySession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Play session not found")
    return session


@play_router.post("/{quiz_id}/sessions", response_model=PlayStateOut, status_code=201)
def create_session(
    quiz_id: UUID,
    db: Session = Depends(get_db),
    sessions: PlaySessionRegistry = Depends(get_play_sessions)
):
    try:
        content = load_quiz_content(db, quiz_id)
    except ValidationError as exc:
        raise HTTPException(status_code=409, detail=f"Quiz unavailable: invalid content ({exc.error_count()} errors)")
    if content is None:
        raise HTTPException(status_code=404, detail="Quiz not found")

    try:
        session = PlaySession(content.quiz_id, content.questions, content.results)
    except InvalidQuizContentError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    session_id = sessions.create(session)
    return _state_out(session_id, session)


@play_router.get("/sessions/{session_id}", response_model=PlayStateOut)
def get_session(session_id: UUID, sessions: PlaySessionRegistry = Depends(get_play_sessions)):
    return _state_out(session_id, _get_session_or_404(sessions, session_id))


@play_router.post("/sessions/{session_id}/start", response_model=PlayStateOut)
def start_session(
    session_id: UUID,
    payload: Optional[StartRequest] = None,
    sessions: PlaySessionRegistry = Depends(get_play_sessions)
):
    session = _get_session_or_404(sessions, session_id)
    try:
        accepted = session.start(payload.identity_hint if payload else None)
    except (NoQuestionsError, NoResultsError) as exc:
        sessions.discard(session_id)
        raise _unavailable(exc)
    return _state_out(session_id, session, accepted)


@play_router.post("/sessions/{session_id}/select", response_model=PlayStateOut)
def select_option(
    session_id: UUID,
    payload: SelectRequest,
    sessions: PlaySessionRegistry = Depends(get_play_sessions)
):
    session = _get_session_or_404(sessions, session_id)
    try:
        accepted = session.select(payload.option_id)
    except UnknownOptionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _state_out(session_id, session, accepted)


@play_router.post("/sessions/{session_id}/next", response_model=PlayStateOut)
def next_question(session_id: UUID, sessions: PlaySessionRegistry = Depends(get_play_sessions)):
    session = _get_session_or_404(sessions, session_id)
    accepted = session.advance()
    return _state_out(session_id, session, accepted)


@play_router.post("/sessions/{session_id}/back", response_model=PlayStateOut)
def previous_question(session_id: UUID, sessions: PlaySessionRegistry = Depends(get_play_sessions)):
    session = _get_session_or_404(sessions, session_id)
    accepted = session.back()
    return _state_out(session_id, session, accepted)


@play_router.post("/sessions/{session_id}/submit", response_model=SubmissionOut)
def submit_session(
    session_id: UUID,
    background_tasks: BackgroundTasks,
    sessions: PlaySessionRegistry = Depends(get_play_sessions),
    recorder: AttemptRecorder = Depends(get_recorder)
):
    session = _get_session_or_404(sessions, session_id)
    try:
        outcome = session.submit()
    except NoResultsError as exc:
        sessions.discard(session_id)
        raise _unavailable(exc)

    if outcome is None:
        return SubmissionOut(session_id=session_id, quiz_id=UUID(session.quiz_id), accepted=False)

    sessions.discard(session_id)
    recorder.dispatch(background_tasks, outcome)

    return SubmissionOut(
        session_id=session_id,
        quiz_id=UUID(session.quiz_id),
        accepted=True,
        tier=outcome.tier,
        scores=outcome.scores,
        result=ResultOut.from_engine(outcome.result),
    )
