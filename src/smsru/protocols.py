"""Protocolos consumidos pelo cliente SMS.RU.

Evita dependência direta do cliente na implementação httpx.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HttpResponse:
    """Resultado bruto de uma troca HTTP concluída."""

    status_code: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_retryable_status(self) -> bool:
        return self.status_code == 429 or self.status_code >= 500


class HttpTransportProtocol(Protocol):
    """Contrato mínimo de transporte: POST de formulário.

    Implementações levantam TransportError quando a troca não completa
    (conexão, DNS, timeout). Qualquer status HTTP é devolvido em HttpResponse.
    """

    async def post_form(
        self,
        url: str,
        params: list[tuple[str, str]],
        headers: dict[str, str] | None = None,
    ) -> HttpResponse: ...
