"""
extraction.py (schemas)
- Purpose: Request/response DTOs for the extraction API.
- Design: Keep API DTOs stable; map from pipeline dataclasses in one place.
"""

from typing import Literal

from pydantic import BaseModel, Field

from docingest.extraction.types import ExtractionResult, ProcessingOptions

PREVIEW_CHARS = 300


class ProcessingOptionsIn(BaseModel):
    enable_ocr: bool = False
    max_pages: int = Field(default=50, ge=1)
    quality_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    enable_image_analysis: bool = False

    def to_options(self) -> ProcessingOptions:
        return ProcessingOptions(
            enable_ocr=self.enable_ocr,
            max_pages=self.max_pages,
            quality_threshold=self.quality_threshold,
            enable_image_analysis=self.enable_image_analysis,
        )


class AnalyzeRequest(BaseModel):
    """Raw text as already pulled out of the source file (may contain binary noise)."""
    content: str
    options: ProcessingOptionsIn = Field(default_factory=ProcessingOptionsIn)
    document_id: str | None = Field(default=None, max_length=128)


class ResultMetadataOut(BaseModel):
    pages: int
    word_count: int
    has_images: bool
    is_scanned: bool
    quality: Literal["high", "medium", "low"]
    notes: list[str]


class ExtractionResponse(BaseModel):
    text: str
    confidence: int = Field(ge=0, le=100)
    extraction_method: Literal["structured", "ai_enhanced", "ocr_enhanced", "basic", "failed"]
    metadata: ResultMetadataOut
    is_usable: bool
    preview: str

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "ExtractionResponse":
        """
        DRY mapper from pipeline result -> response DTO.
        """
        md = result.metadata
        preview = result.text[:PREVIEW_CHARS]
        if len(result.text) > PREVIEW_CHARS:
            preview += "..."
        return cls(
            text=result.text,
            confidence=result.confidence,
            extraction_method=result.extraction_method,
            metadata=ResultMetadataOut(
                pages=md.pages,
                word_count=md.word_count,
                has_images=md.has_images,
                is_scanned=md.is_scanned,
                quality=md.quality.value,
                notes=list(md.notes),
            ),
            is_usable=result.is_usable,
            preview=preview,
        )
