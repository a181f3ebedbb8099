"""
errors.py
- Purpose: AppError used across services/validators for consistent errors.
- Pattern: raise AppError(...) in service/validator, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from docingest.core.error_codes import ErrorCode
from docingest.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.message if self.message else str(self.reason)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


# Convenience constructors
def _reason_text(reason: str) -> str:
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


def empty_content(message: str = ErrorReason.EMPTY_DOCUMENT.value) -> AppError:
    return AppError(
        code=ErrorCode.EMPTY_CONTENT,
        reason=ErrorReason.EMPTY_DOCUMENT.value,
        status_code=422,
        message=message,
    )


def internal_error(reason: str = ErrorReason.UNKNOWN, *, details: dict | None = None) -> AppError:
    return AppError(code=ErrorCode.INTERNAL_ERROR, reason=_reason_text(reason), status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
