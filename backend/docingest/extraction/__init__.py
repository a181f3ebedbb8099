# docingest/extraction/__init__.py
from docingest.extraction.orchestrator import ExtractionOrchestrator
from docingest.extraction.types import (
    ExtractionResult,
    ExtractionStrategy,
    ProcessingOptions,
    QualityAssessment,
    QualityTier,
    ResultMetadata,
)

__all__ = [
    "ExtractionOrchestrator",
    "ExtractionResult",
    "ExtractionStrategy",
    "ProcessingOptions",
    "QualityAssessment",
    "QualityTier",
    "ResultMetadata",
]
