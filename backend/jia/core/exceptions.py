"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class JiaException(Exception):
    """Base exception for Jia"""

    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Any] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "type": self.__class__.__name__,
            }
        }


class NotFoundError(JiaException):
    """Resource not found errors"""

    code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"{resource} not found"
            if identifier:
                message += f": {identifier}"
        super().__init__(message, status_code=404)
        if code:
            self.code = code


class ValidationError(JiaException):
    """Validation errors, details enumerate the offending field paths"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", details: Optional[Any] = None):
        super().__init__(message, status_code=400, details=details)


class InvalidInputError(JiaException):
    """Untrusted input that could not be sanitized"""

    code = "INVALID_INPUT"

    def __init__(self, message: str = "Unable to sanitize input.", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class QuotaExceededError(JiaException):
    """Organization plan limits reached"""

    code = "QUOTA_EXCEEDED"

    def __init__(
        self,
        message: str = "You have reached the maximum number of jobs for your plan",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=400, details=details)


class InvalidDataError(JiaException):
    """Stored data is malformed"""

    code = "INVALID_DATA"

    def __init__(self, message: str = "Invalid data", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class AIEngineError(JiaException):
    """AI engine related errors"""

    code = "AI_ENGINE_ERROR"

    def __init__(self, message: str = "AI processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=502, details=details)


class ScreeningFailedError(AIEngineError):
    """CV screening could not produce a result"""

    code = "SCREENING_FAILED"

    def __init__(self, message: str = "CV Screening Failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class ConflictError(JiaException):
    """Another operation holds the resource"""

    code = "CONFLICT"

    def __init__(self, message: str = "Operation already in progress", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


class OperationNotImplementedError(JiaException):
    """Operation is recognised but not available"""

    code = "NOT_IMPLEMENTED"

    def __init__(self, message: str = "Operation not implemented", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=501, details=details)
