from uuid import UUID
from datetime import datetime

from pydantic import BaseModel
from typing import List, Dict, Optional


class AttemptAnswer(BaseModel):
    question_id: str
    selected_option_id: str
    scores: Dict[str, int] = {}


class AttemptOut(BaseModel):
    id: UUID
    quiz_id: UUID
    result_id: Optional[UUID] = None
    answers: List[AttemptAnswer]
    scores: Dict[str, int]
    identity_hint: Optional[str] = None
    completed_at: datetime

    class Config:
        from_attributes = True
