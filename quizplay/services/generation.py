import logging

from sqlalchemy.orm import Session

from quizplay.models.quiz_db.quiz_crud import build_question, build_result
from quizplay.models.all_models import Quiz
from quizplay.schemas.generation.generated_quiz import GeneratedQuiz
from quizplay.schemas.quiz.quiz_base import OptionCreate, QuestionCreate, ResultCreate

logger = logging.getLogger(__name__)


def to_question_creates(doc: GeneratedQuiz):
    questions = []
    for position, generated in enumerate(doc.ordered_questions(), start=1):
        options = [
            OptionCreate(
                option_order=o.option_order if o.option_order is not None else index,
                option_text=o.option_text,
                personality_scores=o.personality_scores,
            )
            for index, o in enumerate(generated.options, start=1)
        ]
        questions.append(QuestionCreate(
            question_order=position,
            question_text=generated.question_text,
            options=options,
        ))
    return questions


def to_result_creates(doc: GeneratedQuiz):
    return [
        ResultCreate(
            result_order=index,
            personality_type=r.personality_type,
            title=r.title,
            description=r.description,
            min_score=r.min_score,
            max_score=r.max_score,
            strengths=r.strengths,
            weaknesses=r.weaknesses,
        )
        for index, r in enumerate(doc.results, start=1)
    ]


def import_generated_quiz(db: Session, quiz: Quiz, doc: GeneratedQuiz) -> Quiz:
    """Replace a quiz's questions and results with generated content."""
    quiz.questions.clear()
    quiz.results.clear()
    # old rows must be gone before the new question orders hit the unique constraint
    db.flush()

    for question_in in to_question_creates(doc):
        quiz.questions.append(build_question(question_in, quiz.id))
    for result_in in to_result_creates(doc):
        quiz.results.append(build_result(result_in, quiz.id))

    db.commit()
    db.refresh(quiz)
    logger.info(
        "Imported %s questions and %s results into quiz %s",
        len(doc.questions), len(doc.results), quiz.id,
    )
    return quiz
