from sqlalchemy.orm import Session
from quizplay.core.database import SessionLocal
from quizplay.models.quiz_db.quiz_crud import create_quiz, get_quiz_by_slug
from quizplay.schemas.quiz.quiz_base import QuizCreate


SAMPLE_SLUG = "which-party-animal-are-you"

quiz_data = {
    "title": "Which party animal are you?",
    "slug": SAMPLE_SLUG,
    "description": "Four questions, four very different guests.",
    "category": "personality",
    "status": "published",
    "questions": [
        {
            "question_order": 1,
            "question_text": "At a party, you’re most likely to be:",
            "options": [
                {"option_order": 1, "option_text": "The DJ controlling the music and energy",
                 "personality_scores": {"host": 2, "adventurer": 3}},
                {"option_order": 2, "option_text": "Deep in conversation with one fascinating person",
                 "personality_scores": {"thinker": 3, "caretaker": 1}},
                {"option_order": 3, "option_text": "The host making sure everyone’s having fun",
                 "personality_scores": {"host": 3, "caretaker": 2}},
                {"option_order": 4, "option_text": "Observing the social dynamics from a cozy corner",
                 "personality_scores": {"thinker": 2}},
            ],
        },
        {
            "question_order": 2,
            "question_text": "Your ideal vacation is:",
            "options": [
                {"option_order": 1, "option_text": "Backpacking through unexplored places with no set plans",
                 "personality_scores": {"adventurer": 3}},
                {"option_order": 2, "option_text": "A detailed itinerary hitting all the must-see spots",
                 "personality_scores": {"host": 1, "thinker": 2}},
                {"option_order": 3, "option_text": "Somewhere you can help locals or volunteer",
                 "personality_scores": {"caretaker": 3}},
                {"option_order": 4, "option_text": "A peaceful retreat where you can think and recharge",
                 "personality_scores": {"thinker": 3}},
            ],
        },
        {
            "question_order": 3,
            "question_text": "Under pressure, you:",
            "options": [
                {"option_order": 1, "option_text": "Thrive and get energized by the challenge",
                 "personality_scores": {"adventurer": 2, "host": 1}},
                {"option_order": 2, "option_text": "Stay calm and work through it systematically",
                 "personality_scores": {"thinker": 2}},
                {"option_order": 3, "option_text": "Rally everyone together as a team",
                 "personality_scores": {"host": 2, "caretaker": 2}},
                {"option_order": 4, "option_text": "Need quiet time to process and plan",
                 "personality_scores": {"thinker": 1, "caretaker": 1}},
            ],
        },
        {
            "question_order": 4,
            "question_text": "Your secret superpower is:",
            "options": [
                {"option_order": 1, "option_text": "Reading the room and knowing what people need",
                 "personality_scores": {"caretaker": 3}},
                {"option_order": 2, "option_text": "Seeing patterns others miss",
                 "personality_scores": {"thinker": 3}},
                {"option_order": 3, "option_text": "Getting people excited about possibilities",
                 "personality_scores": {"host": 2, "adventurer": 2}},
                {"option_order": 4, "option_text": "Staying level-headed when everything’s chaos",
                 "personality_scores": {"thinker": 1, "adventurer": 1}},
            ],
        },
    ],
    "results": [
        {"result_order": 1, "personality_type": "Host", "title": "The Social Butterfly",
         "description": "You make every room feel like a welcome party.",
         "min_score": 0, "max_score": 6,
         "strengths": ["Warm", "Energizing"], "weaknesses": ["Hates silence"]},
        {"result_order": 2, "personality_type": "Adventurer", "title": "The Adventure Seeker",
         "description": "If there is a door marked 'do not open', you already opened it.",
         "min_score": 7, "max_score": 10,
         "strengths": ["Bold", "Spontaneous"], "weaknesses": ["Restless"]},
        {"result_order": 3, "personality_type": "Thinker", "title": "The Quiet Observer",
         "description": "You notice what everybody else misses.",
         "min_score": 11, "max_score": 14,
         "strengths": ["Insightful", "Calm"], "weaknesses": ["Overthinks"]},
        {"result_order": 4, "personality_type": "Caretaker", "title": "The Heart of the Group",
         "description": "People feel better just by being around you.",
         "min_score": 15,
         "strengths": ["Empathetic"], "weaknesses": ["Forgets themselves"]},
    ],
}


def seed_sample_quiz(db: Session):
    existing = get_quiz_by_slug(db, SAMPLE_SLUG)
    if existing:
        return existing
    return create_quiz(db, QuizCreate(**quiz_data))


def seed_quiz_questions():
    db: Session = SessionLocal()
    try:
        quiz = seed_sample_quiz(db)
    finally:
        db.close()
    print(f"✅ Sample quiz seeded: {quiz.id}")


if __name__ == "__main__":
    seed_quiz_questions()
