"""
Engine-side value types. Built from validated boundary data and never
mutated during play.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

ScoreVector = Dict[str, int]


@dataclass(frozen=True)
class Option:
    id: str
    order: int
    text: str
    scores: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Question:
    id: str
    order: int
    text: str
    options: List[Option] = field(default_factory=list)
    image_url: Optional[str] = None

    def find_option(self, option_id: str) -> Optional[Option]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


@dataclass(frozen=True)
class Result:
    id: str
    personality_label: str
    title: str
    description: str = ""
    min_score: Optional[int] = None
    max_score: Optional[int] = None
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    order: int = 0
    image_url: Optional[str] = None


@dataclass(frozen=True)
class Answer:
    """Chosen option plus a copy of its scores taken when it was selected."""
    question_id: str
    selected_option_id: str
    scores: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_option(cls, question_id: str, option: Option) -> "Answer":
        return cls(question_id=question_id, selected_option_id=option.id, scores=dict(option.scores))

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "selected_option_id": self.selected_option_id,
            "scores": dict(self.scores),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Answer":
        return cls(
            question_id=str(data["question_id"]),
            selected_option_id=str(data["selected_option_id"]),
            scores={str(k): int(v) for k, v in (data.get("scores") or {}).items()},
        )
