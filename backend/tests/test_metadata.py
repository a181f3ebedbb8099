import pytest

from docingest.extraction.metadata import build_metadata, build_notes, estimate_page_count, quality_tier
from docingest.extraction.quality import assess_quality
from docingest.extraction.types import ProcessingOptions, QualityTier

from tests.conftest import CLEAN_PROSE, HEAVY_ARTIFACTS


@pytest.mark.parametrize(
    "length, pages",
    [
        (0, 1),
        (999, 1),
        (1_000, 2),
        (4_999, 2),
        (5_000, 3),
        (15_000, 5),
        (30_000, 10),
        (60_000, 20),
        (119_999, 20),
        (120_000, 20),
        (120_001, 21),
        (600_000, 100),
    ],
)
def test_estimate_page_count(length, pages):
    assert estimate_page_count(length) == pages


@pytest.mark.parametrize(
    "confidence, tier",
    [(100, QualityTier.HIGH), (80, QualityTier.HIGH), (79, QualityTier.MEDIUM), (50, QualityTier.MEDIUM), (49, QualityTier.LOW), (0, QualityTier.LOW)],
)
def test_quality_tier(confidence, tier):
    assert quality_tier(confidence) is tier


def test_notes_always_carry_method_and_score():
    q = assess_quality(CLEAN_PROSE)
    notes = build_notes("structured", q, CLEAN_PROSE, confidence=95, pages=1, options=ProcessingOptions())
    assert notes[:2] == ["Extraction method: structured", "Content quality score: 100/100"]
    assert "Content appears to be very short or incomplete" in notes


def test_notes_describe_raw_contamination():
    q = assess_quality(HEAVY_ARTIFACTS)
    notes = build_notes("ai_enhanced", q, "x" * 300, confidence=85, pages=1, options=ProcessingOptions())
    assert "Document appears to be scanned or image-based" in notes
    assert "Removed 45 PDF structure artifacts" in notes
    assert "Filtered 9 binary characters" in notes
    assert "Content appears to be very short or incomplete" not in notes


def test_fallback_note():
    q = assess_quality(HEAVY_ARTIFACTS)
    notes = build_notes(
        "ai_enhanced", q, "x", confidence=85, pages=1, options=ProcessingOptions(), fallback_error="quota exceeded"
    )
    assert "AI extraction failed (quota exceeded); applied basic cleanup" in notes


def test_option_driven_notes():
    q = assess_quality("A photo of the team. " * 10)
    options = ProcessingOptions(max_pages=1, quality_threshold=0.9, enable_image_analysis=True)
    notes = build_notes("basic", q, "x" * 2_000, confidence=70, pages=2, options=options)
    assert "Estimated 2 pages exceeds the 1 page processing limit" in notes
    assert "Confidence below quality threshold (0.9)" in notes
    assert "Image references detected; image content is not analysed" in notes


def test_build_metadata_uses_final_text():
    q = assess_quality(HEAVY_ARTIFACTS)
    final_text = "word " * 400
    md = build_metadata("ai_enhanced", q, final_text, confidence=85, options=ProcessingOptions())
    assert md.pages == 2
    assert md.word_count == 401
    assert md.is_scanned
    assert md.quality is QualityTier.HIGH
