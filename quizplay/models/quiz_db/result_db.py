import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from quizplay.core.database import Base, JSONType


class QuizResult(Base):
    __tablename__ = "quiz_results"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    quiz_id = Column(Uuid(as_uuid=True), ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False)
    result_order = Column(Integer, nullable=False, default=0)
    personality_type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    min_score = Column(Integer, nullable=True)
    max_score = Column(Integer, nullable=True)
    strengths = Column(JSONType, nullable=False, default=list)
    weaknesses = Column(JSONType, nullable=False, default=list)
    image_url = Column(String, nullable=True)

    quiz = relationship("Quiz", back_populates="results")
