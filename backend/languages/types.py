"""Shared type definitions for the declension drills."""
from typing import Literal

GrammaticalCase = Literal["nominative", "genitive", "accusative"]

GrammaticalNumber = Literal["singular", "plural"]

# Template number tag: "both" means the number follows the referenced form slot
TemplateNumber = Literal["singular", "plural", "both"]

Gender = Literal["masculine", "feminine", "neuter"]

ContextType = Literal["direct_object", "possession", "preposition"]

DifficultyLevel = Literal["beginner", "intermediate", "advanced"]

SlotKind = Literal["article", "form"]
