# Importing this module registers every mapped class on Base.metadata.
from quizplay.models.quiz_db.quiz_db import Quiz
from quizplay.models.quiz_db.question_db import QuizQuestion, QuizOption
from quizplay.models.quiz_db.result_db import QuizResult
from quizplay.models.quiz_db.attempt_db import QuizAttempt

__all__ = ["Quiz", "QuizQuestion", "QuizOption", "QuizResult", "QuizAttempt"]
