"""
upload_validators.py
- Purpose: Centralized validation for document uploads sent to the extraction API.
- Design: Raise AppError with stable error codes for UI + logs.
"""

from fastapi import UploadFile

from docingest.core import AppError, ErrorCode, ErrorReason

ALLOWED_CONTENT_TYPES = ("application/pdf", "application/octet-stream")


def validate_text_upload(file: UploadFile) -> None:
    if not file or not file.filename:
        raise AppError(
            code=ErrorCode.FILE_MISSING,
            reason=ErrorReason.INVALID_INPUT.value,
            message="file is required",
            status_code=422,
        )

    content_type = (file.content_type or "").lower()
    if not (content_type.startswith("text/") or content_type in ALLOWED_CONTENT_TYPES):
        raise AppError(
            code=ErrorCode.INVALID_FILE_TYPE,
            reason=ErrorReason.UNSUPPORTED_FILE.value,
            status_code=415,
            details={"content_type": content_type},
        )


def read_upload_text(file: UploadFile, *, max_bytes: int) -> str:
    """Read the raw text layer of an upload (UTF-8, undecodable bytes replaced)."""
    # UploadFile doesn't reliably expose size, so enforce the limit while reading.
    data = file.file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise AppError(
            code=ErrorCode.FILE_TOO_LARGE,
            reason=ErrorReason.FILE_TOO_LARGE.value,
            status_code=413,
            details={"max_bytes": max_bytes},
        )
    if not data:
        raise AppError(
            code=ErrorCode.EMPTY_CONTENT,
            reason=ErrorReason.EMPTY_DOCUMENT.value,
            message="Uploaded file is empty",
            status_code=422,
        )
    return data.decode("utf-8", errors="replace")
