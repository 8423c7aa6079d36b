"""Constantes do cliente SMS.RU."""

from smsru.constants.operations import (
    CLIENT_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    Operation,
)

__all__ = ["CLIENT_VERSION", "DEFAULT_BASE_URL", "DEFAULT_USER_AGENT", "Operation"]
