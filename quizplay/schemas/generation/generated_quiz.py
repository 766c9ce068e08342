"""
Shape of AI-generated quiz content.

Authoring tools send a ``GenerationRequest`` to an external text generator
and get back a JSON document matching ``GeneratedQuiz``. Only the document is
handled here; the service never talks to the generator itself.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Optional

from quizplay.schemas.quiz.quiz_base import clean_scores
from quizplay.services.categories import QuizCategory


class GenerationRequest(BaseModel):
    title: str = Field(min_length=1)
    category: QuizCategory = QuizCategory.personality
    question_count: int = Field(default=10, ge=1, le=50)
    option_count: int = Field(default=4, ge=2, le=10)
    result_count: int = Field(default=4, ge=1, le=20)


class GeneratedOption(BaseModel):
    option_text: str = Field(min_length=1)
    option_order: Optional[int] = None
    personality_scores: Dict[str, int] = Field(default_factory=dict)

    @field_validator("personality_scores", mode="before")
    @classmethod
    def _none_scores(cls, value):
        return {} if value is None else value

    @field_validator("personality_scores")
    @classmethod
    def _clean_scores(cls, value):
        return clean_scores(value)


class GeneratedQuestion(BaseModel):
    question_text: str = Field(min_length=1)
    question_order: Optional[int] = None
    options: List[GeneratedOption] = Field(min_length=1)


class GeneratedResult(BaseModel):
    personality_type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = ""
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    min_score: Optional[int] = None
    max_score: Optional[int] = None

    @field_validator("personality_type")
    @classmethod
    def _strip_type(cls, value):
        return value.strip()


class GeneratedQuiz(BaseModel):
    questions: List[GeneratedQuestion] = Field(min_length=1)
    results: List[GeneratedResult] = Field(min_length=1)

    @model_validator(mode="after")
    def _score_labels_known(self):
        known = {r.personality_type.lower() for r in self.results}
        if len(known) != len(self.results):
            raise ValueError("results must use distinct personality_type values")

        unknown = set()
        for question in self.questions:
            for option in question.options:
                unknown.update(label for label in option.personality_scores if label.lower() not in known)
        if unknown:
            raise ValueError(f"personality_scores use unknown labels: {', '.join(sorted(unknown))}")
        return self

    def ordered_questions(self) -> List[GeneratedQuestion]:
        # missing orders fall back to document position
        indexed = list(enumerate(self.questions))
        indexed.sort(key=lambda item: (item[1].question_order if item[1].question_order is not None else item[0] + 1, item[0]))
        return [q for _, q in indexed]


def check_against_request(doc: GeneratedQuiz, request: GenerationRequest) -> List[str]:
    problems = []
    if len(doc.questions) != request.question_count:
        problems.append(f"expected {request.question_count} questions, got {len(doc.questions)}")
    for index, question in enumerate(doc.questions, start=1):
        if len(question.options) != request.option_count:
            problems.append(
                f"question {index}: expected {request.option_count} options, got {len(question.options)}"
            )
    if len(doc.results) != request.result_count:
        problems.append(f"expected {request.result_count} results, got {len(doc.results)}")
    return problems
