"""Migration coverage check.

A template set may replace a sentence set only if every grammatical
situation (case, phase, context) drilled by the sentences is still drilled
by at least one template. Wording is not compared.
"""
from core.logging import engine_logger
from core.errors import AppError, Ok, Result, coverage_gap
from engines.records import CoverageTriple, ExampleSentence, Template

log = engine_logger()


def coverage_of(items: list[Template] | list[ExampleSentence]) -> set[CoverageTriple]:
    return {item.coverage for item in items}


def missing_coverage(
    templates: list[Template],
    sentences: list[ExampleSentence],
) -> list[CoverageTriple]:
    """Triples drilled by the sentences but by none of the templates, sorted."""
    return sorted(coverage_of(sentences) - coverage_of(templates))


def validate_coverage(
    templates: list[Template],
    sentences: list[ExampleSentence],
) -> Result[None, AppError]:
    """Ok when templates cover every sentence triple, else E5103 naming the gaps."""
    missing = missing_coverage(templates, sentences)
    if missing:
        log.warning("coverage_gap", missing=[f"{c}-{p}-{ctx}" for c, p, ctx in missing])
        return coverage_gap(missing, origin="coverage_validator")

    log.info(
        "coverage_validated",
        templates=len(templates),
        combinations=len(coverage_of(sentences)),
    )
    return Ok(None)
