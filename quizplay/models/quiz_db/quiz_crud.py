from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from quizplay.engine.models import Question, Result
from quizplay.models.all_models import Quiz, QuizOption, QuizQuestion, QuizResult
from quizplay.schemas.quiz.quiz_base import QuestionOut, QuizCreate, ResultOut


@dataclass
class QuizContent:
    """Read-only snapshot of a quiz used for one play session."""
    quiz_id: str
    title: str
    questions: List[Question] = field(default_factory=list)
    results: List[Result] = field(default_factory=list)


def _content_query(db: Session):
    return db.query(Quiz).options(
        selectinload(Quiz.questions).selectinload(QuizQuestion.options),
        selectinload(Quiz.results),
    )


def build_question(question_in, quiz_id: UUID) -> QuizQuestion:
    question = QuizQuestion(
        quiz_id=quiz_id,
        question_order=question_in.question_order,
        question_text=question_in.question_text,
        image_url=question_in.image_url,
    )
    for option_in in question_in.options:
        question.options.append(QuizOption(
            option_order=option_in.option_order,
            option_text=option_in.option_text,
            personality_scores=dict(option_in.personality_scores),
        ))
    return question


def build_result(result_in, quiz_id: UUID) -> QuizResult:
    return QuizResult(
        quiz_id=quiz_id,
        result_order=result_in.result_order,
        personality_type=result_in.personality_type,
        title=result_in.title,
        description=result_in.description,
        min_score=result_in.min_score,
        max_score=result_in.max_score,
        strengths=list(result_in.strengths),
        weaknesses=list(result_in.weaknesses),
        image_url=result_in.image_url,
    )


def create_quiz(db: Session, quiz_in: QuizCreate) -> Quiz:
    quiz = Quiz(
        title=quiz_in.title,
        slug=quiz_in.slug,
        description=quiz_in.description,
        category=quiz_in.category.value,
        status=quiz_in.status.value,
    )
    db.add(quiz)
    db.flush()

    for question_in in quiz_in.questions:
        quiz.questions.append(build_question(question_in, quiz.id))
    for result_in in quiz_in.results:
        quiz.results.append(build_result(result_in, quiz.id))

    db.commit()
    db.refresh(quiz)
    return quiz


def get_quiz(db: Session, quiz_id: UUID) -> Optional[Quiz]:
    return _content_query(db).filter(Quiz.id == quiz_id).first()


def get_quiz_by_slug(db: Session, slug: str) -> Optional[Quiz]:
    return db.query(Quiz).filter(Quiz.slug == slug).first()


def list_quizzes(db: Session, skip: int = 0, limit: int = 100) -> List[Quiz]:
    return db.query(Quiz).order_by(Quiz.created_at.desc()).offset(skip).limit(limit).all()


def count_quizzes(db: Session) -> int:
    return db.query(Quiz).count()


def delete_quiz(db: Session, quiz_id: UUID) -> Optional[Quiz]:
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        return None
    db.delete(quiz)
    db.commit()
    return quiz


def to_content(quiz: Quiz) -> QuizContent:
    """Validate stored rows and convert them to engine types."""
    questions = [QuestionOut.model_validate(q).to_engine() for q in quiz.questions]
    results = [ResultOut.model_validate(r).to_engine() for r in quiz.results]
    return QuizContent(
        quiz_id=str(quiz.id),
        title=quiz.title,
        questions=sorted(questions, key=lambda q: q.order),
        results=results,
    )


def load_quiz_content(db: Session, quiz_id: UUID) -> Optional[QuizContent]:
    quiz = get_quiz(db, quiz_id)
    if not quiz:
        return None
    return to_content(quiz)
