from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from core.database import Base


class Sentence(Base):
    """Authored example sentence from the sentence-era storage.

    Read-only input to the template migration, which deletes these rows
    once their patterns are stored as templates.
    """
    __tablename__ = "sentences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    noun_id = Column(Integer, ForeignKey("nouns.id", ondelete="CASCADE"), nullable=False)
    english_prompt = Column(Text, nullable=False)  # "I see ___ (the teacher)"
    greek_sentence = Column(Text, nullable=False)  # "Βλέπω τον δάσκαλο"
    correct_answer = Column(String(255), nullable=False)  # "τον δάσκαλο"
    case_type = Column(String(20), nullable=False)
    number = Column(String(10), nullable=False)
    difficulty_phase = Column(Integer, nullable=False)  # 1-3
    context_type = Column(String(50), nullable=False)
    preposition = Column(String(50))  # Only for context_type == "preposition"
    created_at = Column(DateTime, default=datetime.utcnow)

    noun = relationship("Noun", back_populates="sentences")
