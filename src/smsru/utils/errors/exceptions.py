"""Exceções do cliente SMS.RU.

Cinco tipos mutuamente exclusivos, todos derivados de SmsRuError:
- ValidationError: valor de domínio ou request inválido (nunca chega à rede)
- TransportError: troca HTTP não completou (conexão, DNS, timeout)
- HttpStatusError: troca completou, mas status HTTP fora de 2xx
- ParseError: corpo não é JSON válido ou não tem o formato mínimo esperado
- ApiError: resposta válida com status de topo ERROR
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smsru.domain.status_codes import StatusCode


class SmsRuError(Exception):
    """Base para todos os erros do cliente SMS.RU."""


class ValidationError(SmsRuError, ValueError):
    """Valor de domínio ou request rejeitado na construção.

    Attributes:
        field: Campo de formulário (ou nome lógico) que falhou
        reason: Descrição curta da falha
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class UnsupportedResponseFormatError(ValidationError):
    """Request pede formato de resposta que o cliente não suporta (texto puro)."""

    def __init__(self, field: str = "json") -> None:
        super().__init__(field, "plain-text responses are not supported; use ResponseFormat.JSON")


class TransportError(SmsRuError):
    """Falha na troca HTTP (conexão, DNS, TLS, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        is_timeout: bool = False,
        is_retryable: bool = True,
    ) -> None:
        super().__init__(message)
        self.is_timeout = is_timeout
        self.is_retryable = is_retryable


class HttpStatusError(SmsRuError):
    """Resposta HTTP com status fora da faixa 2xx.

    Attributes:
        status_code: Status HTTP recebido
        raw_body: Corpo exato recebido (None se vazio)
    """

    def __init__(self, status_code: int, raw_body: bytes | None = None) -> None:
        super().__init__(f"unexpected HTTP status: {status_code}")
        self.status_code = status_code
        self.raw_body = raw_body or None

    @property
    def body(self) -> str | None:
        """Corpo como texto UTF-8 para diagnóstico (bytes inválidos substituídos)."""
        if self.raw_body is None:
            return None
        return self.raw_body.decode("utf-8", errors="replace")

    @property
    def is_retryable(self) -> bool:
        """429 e 5xx são transitórios."""
        return self.status_code == 429 or self.status_code >= 500


class ParseError(SmsRuError):
    """Corpo da resposta inválido ou fora do formato mínimo esperado."""


class ApiError(SmsRuError):
    """SMS.RU respondeu status de topo ERROR.

    Attributes:
        status_code: Código SMS.RU (conhecido ou não, preservado)
        status_text: Texto opcional enviado pelo serviço
    """

    def __init__(self, status_code: StatusCode, status_text: str | None = None) -> None:
        super().__init__(f"API error: {status_code.code} {status_text or ''}".rstrip())
        self.status_code = status_code
        self.status_text = status_text

    @property
    def is_retryable(self) -> bool:
        return self.status_code.is_retryable()
