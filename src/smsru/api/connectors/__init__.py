"""Conectores HTTP para a API SMS.RU."""

from smsru.api.connectors.http_base import (
    FORM_CONTENT_TYPE,
    HttpClient,
    HttpClientConfig,
)

__all__ = [
    "FORM_CONTENT_TYPE",
    "HttpClient",
    "HttpClientConfig",
]
