from engines.records import VocabularyRecord, ExampleSentence, Template, ExerciseSentence
from engines.extractor import extract, ExtractionReport
from engines.coverage import validate_coverage
from engines.synthesizer import synthesize
from engines.store import TemplateStore, VocabularyStore
from engines.practice import PracticeSetGenerator
from engines.migration import migrate_to_templates, MigrationSummary

__all__ = [
    "VocabularyRecord",
    "ExampleSentence",
    "Template",
    "ExerciseSentence",
    "extract",
    "ExtractionReport",
    "validate_coverage",
    "synthesize",
    "TemplateStore",
    "VocabularyStore",
    "PracticeSetGenerator",
    "migrate_to_templates",
    "MigrationSummary",
]
