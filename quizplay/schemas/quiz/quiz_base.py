from uuid import UUID
from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Optional

from quizplay.engine.models import Option, Question, Result
from quizplay.services.categories import QuizCategory, QuizStatus


def clean_scores(scores: Optional[Dict[str, int]]) -> Dict[str, int]:
    cleaned = {}
    for label, weight in (scores or {}).items():
        label = str(label).strip()
        if not label:
            raise ValueError("personality score labels must not be empty")
        if label in cleaned:
            raise ValueError(f"duplicate personality score label '{label}'")
        cleaned[label] = weight
    return cleaned


class OptionBase(BaseModel):
    option_order: int = 0
    option_text: str = Field(min_length=1)
    personality_scores: Dict[str, int] = Field(default_factory=dict)

    @field_validator("personality_scores", mode="before")
    @classmethod
    def _none_scores(cls, value):
        return {} if value is None else value

    @field_validator("personality_scores")
    @classmethod
    def _clean_scores(cls, value):
        return clean_scores(value)


class OptionCreate(OptionBase):
    pass


class OptionOut(OptionBase):
    id: UUID

    class Config:
        from_attributes = True

    def to_engine(self) -> Option:
        return Option(
            id=str(self.id),
            order=self.option_order,
            text=self.option_text,
            scores=dict(self.personality_scores),
        )


class QuestionBase(BaseModel):
    question_order: int
    question_text: str = Field(min_length=1)
    image_url: Optional[str] = None


class QuestionCreate(QuestionBase):
    options: List[OptionCreate] = Field(min_length=1)


class QuestionOut(QuestionBase):
    id: UUID
    options: List[OptionOut]

    class Config:
        from_attributes = True

    def to_engine(self) -> Question:
        return Question(
            id=str(self.id),
            order=self.question_order,
            text=self.question_text,
            image_url=self.image_url,
            options=[o.to_engine() for o in sorted(self.options, key=lambda o: o.option_order)],
        )


class ResultBase(BaseModel):
    result_order: int = 0
    personality_type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    min_score: Optional[int] = None
    max_score: Optional[int] = None
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None

    @field_validator("strengths", "weaknesses", mode="before")
    @classmethod
    def _none_list(cls, value):
        return [] if value is None else value


class ResultCreate(ResultBase):
    pass


class ResultOut(ResultBase):
    id: UUID

    class Config:
        from_attributes = True

    def to_engine(self) -> Result:
        return Result(
            id=str(self.id),
            personality_label=self.personality_type,
            title=self.title,
            description=self.description or "",
            min_score=self.min_score,
            max_score=self.max_score,
            strengths=list(self.strengths),
            weaknesses=list(self.weaknesses),
            order=self.result_order,
            image_url=self.image_url,
        )

    @classmethod
    def from_engine(cls, result: Result) -> "ResultOut":
        return cls(
            id=UUID(result.id),
            result_order=result.order,
            personality_type=result.personality_label,
            title=result.title,
            description=result.description,
            min_score=result.min_score,
            max_score=result.max_score,
            strengths=list(result.strengths),
            weaknesses=list(result.weaknesses),
            image_url=result.image_url,
        )


class QuizBase(BaseModel):
    title: str = Field(min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = None
    category: QuizCategory = QuizCategory.personality
    status: QuizStatus = QuizStatus.draft


class QuizCreate(QuizBase):
    questions: List[QuestionCreate] = Field(default_factory=list)
    results: List[ResultCreate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_question_order(self):
        orders = [q.question_order for q in self.questions]
        if len(set(orders)) != len(orders):
            raise ValueError("question_order values must be unique within a quiz")
        return self


class QuizOut(QuizBase):
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class QuizContentOut(QuizOut):
    questions: List[QuestionOut]
    results: List[ResultOut]
