"""Domain exceptions for calorie plan."""

from .domain_errors import (
    ApiError,
    CalorieServiceError,
    ErrorCode,
    FieldViolation,
    InvalidInputError,
    NetworkError,
    ParsingError,
)

__all__ = [
    "CalorieServiceError",
    "ErrorCode",
    "FieldViolation",
    "InvalidInputError",
    "ApiError",
    "NetworkError",
    "ParsingError",
]
