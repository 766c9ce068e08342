import unittest
from unittest.mock import Mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from main import app
from quizplay.core.database import get_db
from quizplay.services.play_sessions import PlaySessionRegistry, get_play_sessions
from quizplay.services.recorder import AttemptRecorder, get_recorder
from tests.support import make_session_factory, quiz_payload


class RouteTestCase(unittest.TestCase):

    def setUp(self):
        self.SessionFactory = make_session_factory()
        self.registry = PlaySessionRegistry()
        self.recorder = AttemptRecorder(session_factory=self.SessionFactory)

        def override_get_db():
            db = self.SessionFactory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_play_sessions] = lambda: self.registry
        app.dependency_overrides[get_recorder] = lambda: self.recorder
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def create_quiz(self, **kwargs):
        response = self.client.post("/quizzes/", json=quiz_payload(**kwargs))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()


class TestQuizRoutes(RouteTestCase):

    def test_create_and_get_quiz(self):
        quiz = self.create_quiz()

        response = self.client.get(f"/quizzes/{quiz['id']}")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "Which element are you?")
        self.assertEqual([q["question_order"] for q in body["questions"]], [1, 2])
        self.assertEqual(body["questions"][0]["options"][1]["personality_scores"], {"water": 3})
        self.assertEqual([r["personality_type"] for r in body["results"]], ["Fire", "Water"])

    def test_duplicate_question_order_is_rejected(self):
        payload = quiz_payload()
        payload["questions"][1]["question_order"] = 1
        response = self.client.post("/quizzes/", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_list_quizzes_is_paginated(self):
        for _ in range(3):
            self.create_quiz()

        response = self.client.get("/quizzes/", params={"page": 1, "size": 2})

        body = response.json()
        self.assertEqual(body["total"], 3)
        self.assertEqual(len(body["items"]), 2)
        self.assertTrue(body["has_next"])
        self.assertFalse(body["has_prev"])

    def test_unknown_quiz_is_404(self):
        response = self.client.get("/quizzes/00000000-0000-0000-0000-000000000000")
        self.assertEqual(response.status_code, 404)

    def test_delete_quiz(self):
        quiz = self.create_quiz()
        self.assertEqual(self.client.delete(f"/quizzes/{quiz['id']}").status_code, 204)
        self.assertEqual(self.client.get(f"/quizzes/{quiz['id']}").status_code, 404)

    def test_lint_report(self):
        quiz = self.create_quiz()

        body = self.client.get(f"/quizzes/{quiz['id']}/lint").json()

        self.assertFalse(body["ok"])
        self.assertEqual([i["code"] for i in body["issues"]], ["UNKNOWN_SCORE_LABEL"])

    def test_import_generated_content(self):
        quiz = self.create_quiz(questions=False, results=False)
        doc = {
            "questions": [{
                "question_text": "Cats or dogs?",
                "options": [
                    {"option_text": "Cats", "personality_scores": {"type1": 3}},
                    {"option_text": "Dogs", "personality_scores": {"type2": 3}},
                ],
            }],
            "results": [
                {"personality_type": "type1", "title": "Cat person", "description": "",
                 "strengths": [], "weaknesses": [], "min_score": 0, "max_score": 3},
                {"personality_type": "type2", "title": "Dog person", "description": "",
                 "strengths": [], "weaknesses": [], "min_score": 0, "max_score": 3},
            ],
        }

        response = self.client.post(f"/quizzes/{quiz['id']}/generated", json=doc)

        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(len(response.json()["questions"]), 1)
        self.assertEqual(len(response.json()["results"]), 2)

    def test_import_rejects_unknown_labels(self):
        quiz = self.create_quiz()
        doc = {
            "questions": [{"question_text": "?", "options": [{"option_text": "x", "personality_scores": {"nope": 1}}]}],
            "results": [{"personality_type": "type1", "title": "t", "min_score": 0, "max_score": 1}],
        }
        response = self.client.post(f"/quizzes/{quiz['id']}/generated", json=doc)
        self.assertEqual(response.status_code, 422)


class TestPlayRoutes(RouteTestCase):

    def start_session(self, quiz_id, identity_hint=None):
        created = self.client.post(f"/play/{quiz_id}/sessions")
        self.assertEqual(created.status_code, 201, created.text)
        session_id = created.json()["session_id"]
        self.assertEqual(created.json()["state"], "intro")
        started = self.client.post(
            f"/play/sessions/{session_id}/start", json={"identity_hint": identity_hint}
        )
        return session_id, started

    def option_ids(self, state):
        return [o["id"] for o in state["question"]["options"]]

    def test_full_play_records_attempt(self):
        quiz = self.create_quiz()
        session_id, started = self.start_session(quiz["id"], "@player")
        state = started.json()
        self.assertEqual(state["state"], "question")
        self.assertNotIn("personality_scores", state["question"]["options"][0])

        state = self.client.post(
            f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[1]}
        ).json()
        self.assertTrue(state["can_advance"])
        state = self.client.post(f"/play/sessions/{session_id}/next").json()
        self.assertEqual(state["position"], 1)
        state = self.client.post(
            f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[1]}
        ).json()
        self.assertTrue(state["is_last_question"])

        response = self.client.post(f"/play/sessions/{session_id}/submit")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["accepted"])
        self.assertEqual(body["scores"], {"water": 4, "earth": 1})
        self.assertEqual(body["tier"], "label")
        self.assertEqual(body["result"]["title"], "Wave")

        attempts = self.client.get(f"/quizzes/{quiz['id']}/attempts").json()
        self.assertEqual(attempts["total"], 1)
        attempt = attempts["items"][0]
        self.assertEqual(attempt["result_id"], body["result"]["id"])
        self.assertEqual(attempt["scores"], {"water": 4, "earth": 1})
        self.assertEqual(attempt["identity_hint"], "@player")
        self.assertEqual(len(attempt["answers"]), 2)

        self.assertEqual(self.client.get(f"/play/sessions/{session_id}").status_code, 404)

    def test_next_without_selection_is_rejected(self):
        quiz = self.create_quiz()
        session_id, _ = self.start_session(quiz["id"])

        response = self.client.post(f"/play/sessions/{session_id}/next")

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["accepted"])
        self.assertEqual(response.json()["position"], 0)

    def test_submit_too_early_is_rejected(self):
        quiz = self.create_quiz()
        session_id, started = self.start_session(quiz["id"])
        self.client.post(
            f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(started.json())[0]}
        )

        body = self.client.post(f"/play/sessions/{session_id}/submit").json()

        self.assertFalse(body["accepted"])
        self.assertIsNone(body["result"])
        self.assertEqual(self.client.get(f"/play/sessions/{session_id}").json()["state"], "question")

    def test_back_keeps_answers(self):
        quiz = self.create_quiz()
        session_id, started = self.start_session(quiz["id"])
        first_choice = self.option_ids(started.json())[0]
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": first_choice})
        self.client.post(f"/play/sessions/{session_id}/next")

        state = self.client.post(f"/play/sessions/{session_id}/back").json()

        self.assertEqual(state["position"], 0)
        self.assertEqual(state["selected_option_id"], first_choice)

    def test_unknown_option_is_400(self):
        quiz = self.create_quiz()
        session_id, _ = self.start_session(quiz["id"])
        response = self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": "nope"})
        self.assertEqual(response.status_code, 400)

    def test_quiz_without_questions_is_unavailable(self):
        quiz = self.create_quiz(questions=False)
        _, started = self.start_session(quiz["id"])
        self.assertEqual(started.status_code, 409)

    def test_quiz_without_results_is_unavailable(self):
        quiz = self.create_quiz(results=False)
        _, started = self.start_session(quiz["id"])
        self.assertEqual(started.status_code, 409)

    def test_recording_failure_does_not_block_result(self):
        broken = Mock()
        broken.commit.side_effect = OperationalError("INSERT", {}, Exception("database is down"))
        self.recorder.session_factory = lambda: broken
        quiz = self.create_quiz()
        session_id, started = self.start_session(quiz["id"])
        state = started.json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[0]})
        state = self.client.post(f"/play/sessions/{session_id}/next").json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[0]})

        with self.assertLogs("quizplay.services.recorder", level="ERROR"):
            response = self.client.post(f"/play/sessions/{session_id}/submit")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["result"]["title"], "Flame")
        self.assertEqual(self.client.get(f"/quizzes/{quiz['id']}/attempts").json()["total"], 0)

    def test_submit_returns_stored_result_order_and_image(self):
        payload = quiz_payload()
        payload["results"][0]["result_order"] = 10
        payload["results"][1]["result_order"] = 20
        payload["results"][1]["image_url"] = "https://img/wave.png"
        response = self.client.post("/quizzes/", json=payload)
        self.assertEqual(response.status_code, 201, response.text)
        quiz = response.json()
        session_id, started = self.start_session(quiz["id"])
        state = started.json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[1]})
        state = self.client.post(f"/play/sessions/{session_id}/next").json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[1]})

        result = self.client.post(f"/play/sessions/{session_id}/submit").json()["result"]

        self.assertEqual(result["title"], "Wave")
        self.assertEqual(result["result_order"], 20)
        self.assertEqual(result["image_url"], "https://img/wave.png")

    def test_second_submit_records_nothing_more(self):
        quiz = self.create_quiz()
        session_id, started = self.start_session(quiz["id"])
        state = started.json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[0]})
        state = self.client.post(f"/play/sessions/{session_id}/next").json()
        self.client.post(f"/play/sessions/{session_id}/select", json={"option_id": self.option_ids(state)[0]})

        first = self.client.post(f"/play/sessions/{session_id}/submit")
        second = self.client.post(f"/play/sessions/{session_id}/submit")

        self.assertTrue(first.json()["accepted"])
        self.assertEqual(second.status_code, 404)
        self.assertEqual(self.client.get(f"/quizzes/{quiz['id']}/attempts").json()["total"], 1)

    def test_expired_session_is_404(self):
        now = [1000.0]
        self.registry.ttl_seconds = 60
        self.registry.clock = lambda: now[0]
        quiz = self.create_quiz()
        session_id, _ = self.start_session(quiz["id"])
        self.assertEqual(len(self.registry), 1)

        now[0] += 61
        response = self.client.post(f"/play/sessions/{session_id}/next")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(len(self.registry), 0)

    def test_unknown_session_is_404(self):
        response = self.client.post("/play/sessions/00000000-0000-0000-0000-000000000000/next")
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
