import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from quizplay.core.database import Base, JSONType


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"
    __table_args__ = (UniqueConstraint("quiz_id", "question_order", name="uq_question_order"),)

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    quiz_id = Column(Uuid(as_uuid=True), ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False)
    question_order = Column(Integer, nullable=False)
    question_text = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)

    quiz = relationship("Quiz", back_populates="questions")
    options = relationship(
        "QuizOption",
        back_populates="question",
        order_by="QuizOption.option_order",
        cascade="all, delete-orphan",
    )


class QuizOption(Base):
    __tablename__ = "quiz_options"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    question_id = Column(Uuid(as_uuid=True), ForeignKey("quiz_questions.id", ondelete="CASCADE"), nullable=False)
    option_order = Column(Integer, nullable=False, default=0)
    option_text = Column(Text, nullable=False)
    personality_scores = Column(JSONType, nullable=False, default=dict)  # { label: weight }

    question = relationship("QuizQuestion", back_populates="options")
