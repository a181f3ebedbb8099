"""docingest/extraction/metadata.py

Page estimate, quality tier and human-readable diagnostic notes for an
extraction run.
"""

from __future__ import annotations

import math

from docingest.extraction.quality import count_words
from docingest.extraction.types import ProcessingOptions, QualityAssessment, QualityTier, ResultMetadata


# (exclusive length ceiling, pages)
_PAGE_STEPS: tuple[tuple[int, int], ...] = (
    (1_000, 1),
    (5_000, 2),
    (15_000, 3),
    (30_000, 5),
    (60_000, 10),
    (120_000, 20),
)
_CHARS_PER_PAGE = 6_000
SHORT_CONTENT_CHARS = 200


def estimate_page_count(length: int) -> int:
    for ceiling, pages in _PAGE_STEPS:
        if length < ceiling:
            return pages
    return math.ceil(length / _CHARS_PER_PAGE)


def quality_tier(confidence: int) -> QualityTier:
    if confidence >= 80:
        return QualityTier.HIGH
    if confidence >= 50:
        return QualityTier.MEDIUM
    return QualityTier.LOW


def build_notes(
    method: str,
    initial: QualityAssessment,
    final_text: str,
    *,
    confidence: int,
    pages: int,
    options: ProcessingOptions,
    fallback_error: str | None = None,
) -> list[str]:
    notes = [
        f"Extraction method: {method}",
        f"Content quality score: {initial.text_quality}/100",
    ]

    if initial.is_scanned:
        notes.append("Document appears to be scanned or image-based")
    if initial.artifact_count > 0:
        notes.append(f"Removed {initial.artifact_count} PDF structure artifacts")
    if initial.binary_count > 0:
        notes.append(f"Filtered {initial.binary_count} binary characters")
    if len(final_text) < SHORT_CONTENT_CHARS:
        notes.append("Content appears to be very short or incomplete")

    if fallback_error is not None:
        notes.append(f"AI extraction failed ({fallback_error}); applied basic cleanup")

    # Option-driven diagnostics; they never change text or confidence.
    if pages > options.max_pages:
        notes.append(f"Estimated {pages} pages exceeds the {options.max_pages} page processing limit")
    if confidence / 100 < options.quality_threshold:
        notes.append(f"Confidence below quality threshold ({options.quality_threshold})")
    if options.enable_image_analysis and initial.has_images:
        notes.append("Image references detected; image content is not analysed")

    return notes


def build_metadata(
    method: str,
    initial: QualityAssessment,
    final_text: str,
    *,
    confidence: int,
    options: ProcessingOptions,
    fallback_error: str | None = None,
) -> ResultMetadata:
    pages = estimate_page_count(len(final_text))
    return ResultMetadata(
        pages=pages,
        word_count=count_words(final_text),
        has_images=initial.has_images,
        is_scanned=initial.is_scanned,
        quality=quality_tier(confidence),
        notes=build_notes(
            method,
            initial,
            final_text,
            confidence=confidence,
            pages=pages,
            options=options,
            fallback_error=fallback_error,
        ),
    )
