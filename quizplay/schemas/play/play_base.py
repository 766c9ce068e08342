from uuid import UUID

from pydantic import BaseModel
from typing import List, Dict, Optional

from quizplay.engine.ledger import LedgerState
from quizplay.engine.matcher import MatchTier
from quizplay.engine.models import Question
from quizplay.schemas.quiz.quiz_base import ResultOut


class StartRequest(BaseModel):
    identity_hint: Optional[str] = None


class SelectRequest(BaseModel):
    option_id: str


class OptionPlayOut(BaseModel):
    id: str
    text: str


class QuestionPlayOut(BaseModel):
    id: str
    text: str
    image_url: Optional[str] = None
    options: List[OptionPlayOut]

    @classmethod
    def from_engine(cls, question: Question) -> "QuestionPlayOut":
        # option scores stay server-side
        return cls(
            id=question.id,
            text=question.text,
            image_url=question.image_url,
            options=[OptionPlayOut(id=o.id, text=o.text) for o in question.options],
        )


class PlayStateOut(BaseModel):
    session_id: UUID
    quiz_id: UUID
    state: LedgerState
    accepted: bool = True
    position: int
    total_questions: int
    question: Optional[QuestionPlayOut] = None
    selected_option_id: Optional[str] = None
    can_advance: bool = False
    is_last_question: bool = False


class SubmissionOut(BaseModel):
    session_id: UUID
    quiz_id: UUID
    accepted: bool
    tier: Optional[MatchTier] = None
    scores: Dict[str, int] = {}
    result: Optional[ResultOut] = None
