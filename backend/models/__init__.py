from models.vocabulary import Noun
from models.sentence import Sentence
from models.template import SentenceTemplate

__all__ = [
    "Noun",
    "Sentence",
    "SentenceTemplate",
]
