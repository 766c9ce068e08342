import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.orm import relationship
from quizplay.core.database import Base
from quizplay.services.categories import QuizCategory, QuizStatus


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    title = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=False, default=QuizCategory.personality.value)
    status = Column(String, nullable=False, default=QuizStatus.draft.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    questions = relationship(
        "QuizQuestion",
        back_populates="quiz",
        order_by="QuizQuestion.question_order",
        cascade="all, delete-orphan",
    )
    results = relationship(
        "QuizResult",
        back_populates="quiz",
        order_by="QuizResult.result_order",
        cascade="all, delete-orphan",
    )
    attempts = relationship("QuizAttempt", back_populates="quiz", cascade="all, delete-orphan")
