import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from quizplay.core.database import Base, JSONType


class QuizAttempt(Base):
    __tablename__ = "quiz_attempts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    quiz_id = Column(Uuid(as_uuid=True), ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    # results can be re-authored independently, the attempt only keeps the id
    result_id = Column(Uuid(as_uuid=True), ForeignKey("quiz_results.id", ondelete="SET NULL"), nullable=True)
    answers = Column(JSONType, nullable=False, default=list)  # [{ question_id, selected_option_id, scores }]
    scores = Column(JSONType, nullable=False, default=dict)
    identity_hint = Column(String, nullable=True)
    completed_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    quiz = relationship("Quiz", back_populates="attempts")
