"""Language definitions for declension drills."""
from .types import GrammaticalCase, GrammaticalNumber, TemplateNumber, Gender, ContextType, DifficultyLevel, SlotKind

__all__ = [
    "GrammaticalCase",
    "GrammaticalNumber",
    "TemplateNumber",
    "Gender",
    "ContextType",
    "DifficultyLevel",
    "SlotKind",
]
