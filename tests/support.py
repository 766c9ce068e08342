"""
Shared builders for engine objects and an in-memory database.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizplay.core.database import Base
from quizplay.engine.models import Option, Question, Result
from quizplay.models import all_models  # noqa: F401


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def option(option_id, scores=None, order=0, text=None):
    return Option(id=option_id, order=order, text=text or option_id, scores=dict(scores or {}))


def question(question_id, order, *options, text=None):
    return Question(id=question_id, order=order, text=text or question_id, options=list(options))


def result(result_id, label, min_score=None, max_score=None, title=None):
    return Result(
        id=result_id,
        personality_label=label,
        title=title or result_id,
        min_score=min_score,
        max_score=max_score,
    )


def three_questions():
    return [
        question("q1", 1, option("q1a", {"x": 2}), option("q1b", {"y": 1})),
        question("q2", 2, option("q2a", {"y": 3}), option("q2b", {"x": 1, "z": 1})),
        question("q3", 3, option("q3a", {"z": 2}), option("q3b", {"x": 1})),
    ]


def quiz_payload(results=True, questions=True):
    payload = {
        "title": "Which element are you?",
        "category": "personality",
        "questions": [],
        "results": [],
    }
    if questions:
        payload["questions"] = [
            {
                "question_order": 1,
                "question_text": "Pick a season",
                "options": [
                    {"option_order": 1, "option_text": "Summer", "personality_scores": {"fire": 2}},
                    {"option_order": 2, "option_text": "Winter", "personality_scores": {"water": 3}},
                ],
            },
            {
                "question_order": 2,
                "question_text": "Pick a drink",
                "options": [
                    {"option_order": 1, "option_text": "Espresso", "personality_scores": {"fire": 1}},
                    {"option_order": 2, "option_text": "Tea", "personality_scores": {"water": 1, "earth": 1}},
                ],
            },
        ]
    if results:
        payload["results"] = [
            {"result_order": 1, "personality_type": "Fire", "title": "Flame",
             "min_score": 0, "max_score": 2, "strengths": ["Bold"], "weaknesses": ["Impatient"]},
            {"result_order": 2, "personality_type": "Water", "title": "Wave",
             "min_score": 3, "max_score": 10},
        ]
    return payload
