"""docingest/extraction/types.py

Lightweight dataclasses for quality assessment + extraction outputs.
Design goals:
- every value is created fresh per analyze() call and never mutated
- cheap, explainable confidence score + flags
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ExtractionStrategy(str, Enum):
    STRUCTURED = "structured"
    AI_ENHANCED = "ai_enhanced"
    OCR_ENHANCED = "ocr_enhanced"
    BASIC_CLEANUP = "basic"

    @property
    def uses_language_model(self) -> bool:
        return self in (ExtractionStrategy.AI_ENHANCED, ExtractionStrategy.OCR_ENHANCED)


FAILED_METHOD = "failed"


class QualityTier(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EnhanceMode(str, Enum):
    ENHANCE = "enhance"
    RECONSTRUCT = "reconstruct"


@dataclass(frozen=True)
class QualityAssessment:
    text_quality: int  # 0 - 100, rounded down
    quality_tenths: int  # exact score, 0 - 1000
    is_scanned: bool
    has_low_text_quality: bool
    has_good_text_quality: bool
    has_images: bool
    artifact_count: int
    binary_count: int
    content_length: int
    word_count: int


@dataclass(frozen=True)
class ProcessingOptions:
    enable_ocr: bool = False
    max_pages: int = 50
    quality_threshold: float = 0.3
    enable_image_analysis: bool = False

    def __post_init__(self) -> None:
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {self.max_pages}")
        if not 0.0 <= self.quality_threshold <= 1.0:
            raise ValueError(f"quality_threshold must be within [0, 1], got {self.quality_threshold}")


@dataclass(frozen=True)
class EnhancementOutcome:
    """Result of one language-model call; `error` set means the caller must fall back."""
    text: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


@dataclass(frozen=True)
class ResultMetadata:
    pages: int
    word_count: int
    has_images: bool
    is_scanned: bool
    quality: QualityTier
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExtractionResult:
    text: str
    confidence: int  # 0 - 100
    extraction_method: str  # ExtractionStrategy value or "failed"
    metadata: ResultMetadata

    @property
    def is_usable(self) -> bool:
        """False when downstream automation must not trust `text`."""
        return self.confidence > 0 and self.extraction_method != FAILED_METHOD
