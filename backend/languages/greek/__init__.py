"""Greek noun declension: slot enumeration and category maps."""
from .slots import Slot, ARTICLE_SLOTS, FORM_SLOTS, SLOT_ACCESSORS, match_slot
from .maps import (
    NUMBERS,
    DIFFICULTY_PHASES,
    WILDCARD_NUMBER,
    TEMPLATE_NUMBERS,
    MIN_PHASE,
    MAX_PHASE,
    NOUN_PLACEHOLDER,
    ARTICLE_PLACEHOLDER,
    FORM_PLACEHOLDER,
    LEGACY_FORM_PLACEHOLDER,
    PLACEHOLDERS,
)
