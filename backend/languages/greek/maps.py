"""Greek grammatical category mappings."""

NUMBERS = ["singular", "plural"]
WILDCARD_NUMBER = "both"
TEMPLATE_NUMBERS = [*NUMBERS, WILDCARD_NUMBER]

# Difficulty level -> difficulty phase
DIFFICULTY_PHASES = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}
MIN_PHASE = 1
MAX_PHASE = 3

# Template placeholders
NOUN_PLACEHOLDER = "{noun}"
ARTICLE_PLACEHOLDER = "{article}"
FORM_PLACEHOLDER = "{form}"
LEGACY_FORM_PLACEHOLDER = "{noun_form}"  # written by the sentence-era schema
PLACEHOLDERS = (NOUN_PLACEHOLDER, ARTICLE_PLACEHOLDER, FORM_PLACEHOLDER, LEGACY_FORM_PLACEHOLDER)
