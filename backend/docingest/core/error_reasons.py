"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; they may be surfaced in UI and API clients.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    EMPTY_DOCUMENT = "Document content is empty"
    UNSUPPORTED_FILE = "Unsupported file type"
    FILE_TOO_LARGE = "File too large"
    LLM_FAILED = "LLM request failed"
    INTERNAL_ERROR = "Internal server error"
