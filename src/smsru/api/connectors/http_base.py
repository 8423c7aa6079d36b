"""Cliente HTTP base (httpx) para POST de formulário no SMS.RU."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from urllib.parse import urlencode

import httpx

from smsru.protocols import HttpResponse
from smsru.utils.errors import TransportError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

_RETRYABLE_EXCEPTIONS = (httpx.TimeoutException, httpx.ConnectError)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    max_retries=0 desliga retentativas: uma troca por chamada.
    """

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para POST de formulário.

    Abre um httpx.AsyncClient por troca; não mantém pool compartilhado.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post_form(
        self,
        url: str,
        params: list[tuple[str, str]],
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Envia parâmetros como corpo urlencoded UTF-8.

        Com max_retries > 0, retenta falhas de conexão/timeout e status
        429/5xx com backoff exponencial. A última resposta com status
        retentável é devolvida ao chamador para classificação.

        Raises:
            TransportError: Se a troca não completar (conexão, DNS, timeout)
        """
        merged_headers = {
            **self._config.default_headers,
            **(headers or {}),
            "Content-Type": FORM_CONTENT_TYPE,
        }
        content = urlencode(params).encode("utf-8")

        attempt = 0
        while True:
            is_last_attempt = attempt >= self._config.max_retries
            try:
                response = await self._send(url, content, merged_headers)
            except _RETRYABLE_EXCEPTIONS as exc:
                if is_last_attempt:
                    raise _to_transport_error(exc) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                attempt += 1
                continue
            except httpx.HTTPError as exc:
                raise _to_transport_error(exc) from exc

            if response.is_retryable_status and not is_last_attempt:
                logger.info(
                    "http_retryable_status",
                    extra={"status_code": response.status_code, "attempt": attempt},
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                attempt += 1
                continue
            return response

    async def _send(self, url: str, content: bytes, headers: dict[str, str]) -> HttpResponse:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                content=content,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        return HttpResponse(status_code=response.status_code, body=response.content)


def _to_transport_error(exc: httpx.HTTPError) -> TransportError:
    is_timeout = isinstance(exc, httpx.TimeoutException)
    message = "http_timeout" if is_timeout else "http_connection_error"
    return TransportError(
        message,
        is_timeout=is_timeout,
        is_retryable=isinstance(exc, _RETRYABLE_EXCEPTIONS),
    )


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
