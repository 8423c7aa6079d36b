"""Helpers de logging para chamadas SMS.RU (sem PII).

Nunca loga telefones, texto de mensagem ou credenciais.
"""

from __future__ import annotations

import logging

from smsru.utils.errors import ApiError, HttpStatusError

logger = logging.getLogger(__name__)


def log_api_error(error: ApiError, operation: str) -> None:
    """Loga status de topo ERROR."""
    logger.warning(
        "Erro da API SMS.RU",
        extra={
            "operation": operation,
            "status_code": error.status_code.code,
            "is_retryable": error.is_retryable,
        },
    )


def log_http_error(error: HttpStatusError, operation: str) -> None:
    logger.warning(
        "Status HTTP inesperado do SMS.RU",
        extra={
            "operation": operation,
            "http_status": error.status_code,
            "is_retryable": error.is_retryable,
        },
    )


def log_success(operation: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Chamada SMS.RU bem-sucedida",
        extra={
            "operation": operation,
            "status_code": status_code,
        },
    )
