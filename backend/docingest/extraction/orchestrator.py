"""docingest/extraction/orchestrator.py

Single-pass extraction pipeline:

  assess raw text -> pick a strategy -> run its extractor -> re-score the
  output -> confidence -> metadata

Stateless apart from the injected completion service, so one instance can
serve concurrent callers. analyze() never raises: anything unexpected is
turned into a zero-confidence "failed" result carrying the input unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum

from docingest.core import AppError
from docingest.core.errors import empty_content
from docingest.extraction.cleaning import clean_basic, clean_structured
from docingest.extraction.enhance import LanguageModelExtractor
from docingest.extraction.metadata import build_metadata
from docingest.extraction.quality import assess_quality, count_words
from docingest.extraction.strategy import base_confidence, select_strategy
from docingest.extraction.types import (
    FAILED_METHOD,
    EnhanceMode,
    ExtractionResult,
    ExtractionStrategy,
    ProcessingOptions,
    QualityTier,
    ResultMetadata,
)
from docingest.llm.types import TextCompletionService

logger = logging.getLogger("docingest.extraction")

RESCORE_BONUS = 10

_CLEANERS = {
    ExtractionStrategy.STRUCTURED: clean_structured,
    ExtractionStrategy.BASIC_CLEANUP: clean_basic,
}

_ENHANCE_MODES = {
    ExtractionStrategy.AI_ENHANCED: EnhanceMode.ENHANCE,
    ExtractionStrategy.OCR_ENHANCED: EnhanceMode.RECONSTRUCT,
}


class PipelineStage(str, Enum):
    ASSESSING = "assessing"
    STRATEGY_SELECTED = "strategy_selected"
    EXTRACTING = "extracting"
    RESCORING = "rescoring"
    DONE = "done"


def failed_result(content: str, error: Exception) -> ExtractionResult:
    raw = content if isinstance(content, str) else ""
    return ExtractionResult(
        text=content,
        confidence=0,
        extraction_method=FAILED_METHOD,
        metadata=ResultMetadata(
            pages=1,
            word_count=count_words(raw),
            has_images=False,
            is_scanned=False,
            quality=QualityTier.LOW,
            notes=[f"Processing failed: {error}"],
        ),
    )


class ExtractionOrchestrator:
    def __init__(self, completion_service: TextCompletionService | None = None):
        self.language_model = LanguageModelExtractor(completion_service)

    def analyze(self, content: str, options: ProcessingOptions | None = None) -> ExtractionResult:
        options = options or ProcessingOptions()
        stage = PipelineStage.ASSESSING

        try:
            if not content:
                raise empty_content()

            initial = assess_quality(content)

            stage = PipelineStage.STRATEGY_SELECTED
            strategy = select_strategy(initial, options)
            logger.info(
                "extraction.strategy_selected",
                extra={
                    "strategy": strategy.value,
                    "text_quality": initial.text_quality,
                    "is_scanned": initial.is_scanned,
                    "artifact_count": initial.artifact_count,
                    "binary_count": initial.binary_count,
                    "content_length": initial.content_length,
                },
            )

            stage = PipelineStage.EXTRACTING
            text, fallback_error = self._extract(strategy, content)

            stage = PipelineStage.RESCORING
            confidence = base_confidence(strategy, initial.text_quality)
            final = assess_quality(text)
            if final.quality_tenths > initial.quality_tenths:
                confidence += RESCORE_BONUS
            confidence = max(0, min(100, confidence))

            metadata = build_metadata(
                strategy.value,
                initial,
                text,
                confidence=confidence,
                options=options,
                fallback_error=fallback_error,
            )

            stage = PipelineStage.DONE
            logger.info(
                "extraction.completed",
                extra={
                    "strategy": strategy.value,
                    "confidence": confidence,
                    "final_quality": final.text_quality,
                    "fell_back": fallback_error is not None,
                    "output_length": len(text),
                },
            )
            return ExtractionResult(
                text=text,
                confidence=confidence,
                extraction_method=strategy.value,
                metadata=metadata,
            )

        except AppError as e:
            logger.warning("extraction.rejected", extra={"stage": stage.value, "code": e.code.value})
            return failed_result(content, e)
        except Exception as e:
            logger.exception("extraction.failed", extra={"stage": stage.value, "error_type": type(e).__name__})
            return failed_result(content, e)

    def _extract(self, strategy: ExtractionStrategy, content: str) -> tuple[str, str | None]:
        """Returns (text, fallback_error); fallback_error is set when the language model failed."""
        if not strategy.uses_language_model:
            return _CLEANERS[strategy](content), None

        outcome = self.language_model.enhance(content, _ENHANCE_MODES[strategy])
        if outcome.ok:
            return outcome.text, None
        return clean_basic(content), outcome.error
