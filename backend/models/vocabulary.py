from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from core.database import Base


class Noun(Base):
    """Greek noun with the article and form for every case and number"""
    __tablename__ = "nouns"

    id = Column(Integer, primary_key=True, autoincrement=True)
    english = Column(String(255), nullable=False)  # Gloss shown in prompts
    gender = Column(String(20), nullable=False)  # masculine, feminine, neuter
    nominative_sg = Column(String(100), nullable=False)
    genitive_sg = Column(String(100), nullable=False)
    accusative_sg = Column(String(100), nullable=False)
    nominative_pl = Column(String(100), nullable=False)
    genitive_pl = Column(String(100), nullable=False)
    accusative_pl = Column(String(100), nullable=False)
    nom_sg_article = Column(String(20), nullable=False)
    gen_sg_article = Column(String(20), nullable=False)
    acc_sg_article = Column(String(20), nullable=False)
    nom_pl_article = Column(String(20), nullable=False)
    gen_pl_article = Column(String(20), nullable=False)
    acc_pl_article = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    sentences = relationship("Sentence", back_populates="noun", cascade="all, delete-orphan")
