"""docingest/extraction/quality.py

Cheap, explainable heuristics to score raw document text for PDF-structure
contamination and binary noise.

The score starts at 100 and is pushed down by artifacts, binary bytes and
very small content, then nudged up by signs of real prose. Binary bytes cost
0.6 points each, so the score is kept in tenths of a point; the bands are
judged on that exact value and text_quality reports it rounded down. Pure
function: never raises, never does I/O.
"""

import re

from docingest.extraction.types import QualityAssessment


# Container/boundary keywords and text-positioning operators, leftmost-first.
ARTIFACT_PATTERN = re.compile(
    r"endstream|endobj|stream|BT|ET|Td|Tj|TJ|Tm|Tc|Tw|Tz|TL|Ts|Tr|Tf"
)

# Anything outside printable ASCII, except newline / carriage return / tab.
BINARY_PATTERN = re.compile(r"[^\x20-\x7E\n\r\t]")

_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?]")
_UPPERCASE = re.compile(r"[A-Z]")
_COMMON_WORDS = re.compile(r"\b(the|and|or|but|in|on|at|to|for|of|with|by)\b", re.IGNORECASE)
_IMAGE_HINTS = re.compile(r"image|img|picture|photo", re.IGNORECASE)

SCANNED_QUALITY_CEILING = 30
SCANNED_ARTIFACT_LIMIT = 20
LOW_QUALITY_CEILING = 50
GOOD_QUALITY_FLOOR = 70


def count_words(text: str) -> int:
    """Pieces left after splitting on whitespace runs (an empty string counts as one)."""
    return len(_WHITESPACE_RUN.split(text))


def _binary_penalty_tenths(binary_count: int) -> int:
    return min(300, binary_count * 6)


def assess_quality(content: str) -> QualityAssessment:
    raw = content or ""
    artifact_count = len(ARTIFACT_PATTERN.findall(raw))
    binary_count = len(BINARY_PATTERN.findall(raw))
    content_length = len(raw)
    word_count = count_words(raw)

    # tenths of a point
    score = 1000
    score -= min(400, artifact_count * 20)
    score -= _binary_penalty_tenths(binary_count)

    if content_length < 100:
        score -= 200
    if word_count < 20:
        score -= 150

    if _SENTENCE_END.search(raw):
        score += 100
    if _UPPERCASE.search(raw):
        score += 50
    if _COMMON_WORDS.search(raw):
        score += 50

    score = max(0, min(1000, score))

    return QualityAssessment(
        text_quality=score // 10,
        quality_tenths=score,
        is_scanned=score < SCANNED_QUALITY_CEILING * 10 or artifact_count > SCANNED_ARTIFACT_LIMIT,
        has_low_text_quality=score < LOW_QUALITY_CEILING * 10,
        has_good_text_quality=score > GOOD_QUALITY_FLOOR * 10,
        has_images=bool(_IMAGE_HINTS.search(raw)),
        artifact_count=artifact_count,
        binary_count=binary_count,
        content_length=content_length,
        word_count=word_count,
    )
