from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import validates

from core.database import Base
from languages.greek import Slot, TEMPLATE_NUMBERS


class SentenceTemplate(Base):
    """Reusable sentence pattern filled with any noun at practice time"""
    __tablename__ = "sentence_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    english_template = Column(Text, nullable=False)  # "I see ___ {noun}"
    greek_template = Column(Text, nullable=False)  # "Βλέπω {article} {form}"
    article_field = Column(String(50), nullable=False)  # Slot supplying {article}
    noun_form_field = Column(String(50), nullable=False)  # Slot supplying {form}
    case_type = Column(String(20), nullable=False)
    number = Column(String(10), nullable=False)  # singular, plural, both
    difficulty_phase = Column(Integer, nullable=False, index=True)
    context_type = Column(String(50), nullable=False)
    preposition = Column(String(50))
    created_at = Column(DateTime, default=datetime.utcnow)

    @validates("article_field", "noun_form_field")
    def _validate_slot(self, key, value):
        slot = Slot.parse(value)
        if slot is None:
            raise ValueError(f"{key}: unknown vocabulary slot '{value}'")
        return slot.value

    @validates("number")
    def _validate_number(self, key, value):
        if value not in TEMPLATE_NUMBERS:
            raise ValueError(f"number must be one of {TEMPLATE_NUMBERS}, got '{value}'")
        return value
