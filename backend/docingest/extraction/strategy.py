"""docingest/extraction/strategy.py

Strategy selection as an ordered decision table: first matching rule wins,
anything unmatched (the 50..70 quality band) gets DEFAULT_STRATEGY.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from docingest.extraction.types import ExtractionStrategy, ProcessingOptions, QualityAssessment


def _degraded(q: QualityAssessment) -> bool:
    return q.is_scanned or q.has_low_text_quality


@dataclass(frozen=True)
class StrategyRule:
    name: str
    applies: Callable[[QualityAssessment, ProcessingOptions], bool]
    strategy: ExtractionStrategy


STRATEGY_RULES: tuple[StrategyRule, ...] = (
    StrategyRule(
        "degraded_with_ocr",
        lambda q, o: _degraded(q) and o.enable_ocr,
        ExtractionStrategy.OCR_ENHANCED,
    ),
    StrategyRule(
        "degraded",
        lambda q, o: _degraded(q),
        ExtractionStrategy.AI_ENHANCED,
    ),
    StrategyRule(
        "good_text",
        lambda q, o: q.has_good_text_quality,
        ExtractionStrategy.STRUCTURED,
    ),
)

# Neither low nor good quality. OCR is not considered here even when enabled.
DEFAULT_STRATEGY = ExtractionStrategy.BASIC_CLEANUP


def select_strategy(assessment: QualityAssessment, options: ProcessingOptions) -> ExtractionStrategy:
    for rule in STRATEGY_RULES:
        if rule.applies(assessment, options):
            return rule.strategy
    return DEFAULT_STRATEGY


_CONFIDENCE_FORMULAS: dict[ExtractionStrategy, Callable[[int], int]] = {
    ExtractionStrategy.STRUCTURED: lambda q: min(95, q + 20),
    ExtractionStrategy.AI_ENHANCED: lambda q: min(85, q + 30),
    ExtractionStrategy.OCR_ENHANCED: lambda q: min(75, q + 40),
    ExtractionStrategy.BASIC_CLEANUP: lambda q: max(20, q),
}


def base_confidence(strategy: ExtractionStrategy, text_quality: int) -> int:
    return _CONFIDENCE_FORMULAS[strategy](text_quality)
