"""Exceções compartilhadas do cliente SMS.RU."""

from .exceptions import (
    ApiError,
    HttpStatusError,
    ParseError,
    SmsRuError,
    TransportError,
    UnsupportedResponseFormatError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "HttpStatusError",
    "ParseError",
    "SmsRuError",
    "TransportError",
    "UnsupportedResponseFormatError",
    "ValidationError",
]
