import unittest
import uuid

from pydantic import ValidationError

from quizplay.engine.matcher import MatchTier
from quizplay.engine.session import PlaySession
from quizplay.models.all_models import QuizOption
from quizplay.models.quiz_db.quiz_crud import create_quiz, load_quiz_content
from quizplay.models.quiz_db.seed_quiz import seed_sample_quiz
from quizplay.schemas.quiz.quiz_base import QuizCreate
from tests.support import make_session_factory, quiz_payload


class TestQuizCrud(unittest.TestCase):

    def setUp(self):
        self.SessionFactory = make_session_factory()
        self.db = self.SessionFactory()

    def tearDown(self):
        self.db.close()

    def test_load_quiz_content_orders_questions(self):
        payload = quiz_payload()
        payload["questions"].reverse()
        quiz = create_quiz(self.db, QuizCreate(**payload))

        content = load_quiz_content(self.db, quiz.id)

        self.assertEqual(content.quiz_id, str(quiz.id))
        self.assertEqual([q.text for q in content.questions], ["Pick a season", "Pick a drink"])
        self.assertEqual(content.questions[0].options[0].scores, {"fire": 2})
        self.assertEqual(content.results[0].personality_label, "Fire")
        self.assertEqual(content.results[0].strengths, ["Bold"])

    def test_load_missing_quiz(self):
        self.assertIsNone(load_quiz_content(self.db, uuid.uuid4()))

    def test_malformed_stored_scores_are_caught_on_read(self):
        quiz = create_quiz(self.db, QuizCreate(**quiz_payload()))
        option = self.db.query(QuizOption).first()
        option.personality_scores = {"fire": "lots"}
        self.db.commit()

        with self.assertRaises(ValidationError):
            load_quiz_content(self.db, quiz.id)

    def test_seed_is_idempotent_and_playable(self):
        first = seed_sample_quiz(self.db)
        second = seed_sample_quiz(self.db)
        self.assertEqual(first.id, second.id)

        content = load_quiz_content(self.db, first.id)
        session = PlaySession(content.quiz_id, content.questions, content.results)
        session.start()
        for index, question in enumerate(content.questions):
            session.select(question.options[0].id)
            if index < len(content.questions) - 1:
                session.advance()
        outcome = session.submit()

        self.assertEqual(outcome.scores, {"host": 3, "adventurer": 8, "caretaker": 3})
        self.assertEqual(outcome.result.title, "The Adventure Seeker")
        self.assertEqual(outcome.tier, MatchTier.label)


if __name__ == "__main__":
    unittest.main()
