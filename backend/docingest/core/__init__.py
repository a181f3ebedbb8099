# docingest/core/__init__.py
from docingest.core.errors import AppError
from docingest.core.error_codes import ErrorCode
from docingest.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
