"""Logging estruturado JSON (python-json-logger).

Uso:
    from smsru.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_app")
    logger = get_logger(__name__)
"""

from smsru.config.logging.config import configure_logging, get_logger
from smsru.config.logging.filters import CorrelationIdFilter
from smsru.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
