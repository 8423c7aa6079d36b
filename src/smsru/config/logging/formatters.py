"""Formatters de logging estruturado (JSON).

Campos obrigatórios em todo log: asctime, level, logger, message,
correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios, na ordem em que aparecem no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes de campo no formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "WARNING",
            "logger": "smsru.api.connectors.smsru_logging",
            "message": "Erro da API SMS.RU",
            "correlation_id": "abc-123",
            "service": "smsru_client",
            "operation": "sms/send",
            "status_code": 201
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
