"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Validation error exception"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_type="ValidationError",
            details=details
        )


class InvalidAmount(AppException):
    """Spend amount is negative, non-numeric or non-finite"""

    def __init__(self, message: str = "Invalid amount", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_type="InvalidAmount",
            details=details
        )


class BalanceInvariantViolation(AppException):
    """Net balances handed to the solver do not sum to zero"""

    def __init__(
        self,
        message: str = "Balances do not sum to zero",
        details: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            error_type="BalanceInvariantViolation",
            details=details
        )


class NotFoundError(AppException):
    """Resource not found exception"""

    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=404,
            error_type="NotFoundError",
            details=details
        )


class DatabaseError(AppException):
    """Database operation error exception"""

    def __init__(self, message: str = "Database error occurred", details: Optional[Any] = None):
        super().__init__(
            message=message,
            status_code=500,
            error_type="DatabaseError",
            details=details
        )
