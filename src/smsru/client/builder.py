"""Builder de SmsRuClient.

Endpoints configuráveis por operação, timeout, User-Agent, retries do
transporte e transporte customizado.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from smsru.api.connectors.http_base import HttpClient, HttpClientConfig
from smsru.client.sms_ru_client import SmsRuClient
from smsru.config.settings import SmsRuEndpoints
from smsru.constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Operation
from smsru.utils.errors import ValidationError

if TYPE_CHECKING:
    from smsru.config.settings import SmsRuSettings
    from smsru.domain.auth import Auth
    from smsru.protocols import HttpTransportProtocol


def _require_http_url(url: str, field_name: str) -> str:
    value = url.strip() if isinstance(url, str) else ""
    if not value.startswith(("http://", "https://")):
        raise ValidationError(field_name, f"expected absolute http(s) url, got {url!r}")
    return value


class SmsRuClientBuilder:
    """Monta um SmsRuClient imutável.

    Exemplo:
        client = (
            SmsRuClientBuilder(Auth.api_id("..."))
            .timeout(10)
            .user_agent("minha-app/1.0")
            .build()
        )
    """

    def __init__(self, auth: Auth) -> None:
        self._auth = auth
        self._base_url = DEFAULT_BASE_URL
        self._overrides: dict[Operation, str] = {}
        self._timeout_seconds = 30.0
        self._user_agent = DEFAULT_USER_AGENT
        self._max_retries = 0
        self._transport: HttpTransportProtocol | None = None

    @classmethod
    def from_settings(cls, settings: SmsRuSettings) -> SmsRuClientBuilder:
        """Cria builder a partir de SmsRuSettings.

        Raises:
            ValueError: Se as settings não tiverem credencial
        """
        return (
            cls(settings.auth())
            .endpoint(settings.base_url)
            .timeout(settings.request_timeout_seconds)
            .max_retries(settings.max_retries)
            .user_agent(settings.user_agent)
        )

    def endpoint(self, base_url: str) -> SmsRuClientBuilder:
        """Troca a URL base de todas as operações, descartando overrides anteriores."""
        self._base_url = _require_http_url(base_url, "endpoint")
        self._overrides.clear()
        return self

    def operation_endpoint(self, operation: Operation, url: str) -> SmsRuClientBuilder:
        """Define a URL completa de uma operação."""
        self._overrides[operation] = _require_http_url(url, operation.value)
        return self

    def send_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.SEND_SMS, url)

    def cost_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.CHECK_COST, url)

    def status_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.CHECK_STATUS, url)

    def call_auth_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.START_CALL_AUTH, url)

    def call_auth_status_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.CHECK_CALL_AUTH_STATUS, url)

    def auth_check_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.CHECK_AUTH, url)

    def balance_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_BALANCE, url)

    def free_usage_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_FREE_USAGE, url)

    def limit_usage_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_LIMIT_USAGE, url)

    def senders_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_SENDERS, url)

    def stoplist_add_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.ADD_STOPLIST_ENTRY, url)

    def stoplist_del_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.REMOVE_STOPLIST_ENTRY, url)

    def stoplist_get_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_STOPLIST, url)

    def callback_add_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.ADD_CALLBACK, url)

    def callback_del_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.REMOVE_CALLBACK, url)

    def callback_get_endpoint(self, url: str) -> SmsRuClientBuilder:
        return self.operation_endpoint(Operation.GET_CALLBACKS, url)

    def timeout(self, seconds: float) -> SmsRuClientBuilder:
        """Timeout por troca HTTP (ignorado com transporte customizado)."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
            raise ValidationError("timeout", f"must be a positive number, got {seconds!r}")
        self._timeout_seconds = float(seconds)
        return self

    def user_agent(self, value: str) -> SmsRuClientBuilder:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("user_agent", "must not be empty")
        self._user_agent = value.strip()
        return self

    def max_retries(self, value: int) -> SmsRuClientBuilder:
        """Retentativas do transporte httpx padrão (0 = nenhuma)."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError("max_retries", f"must be a non-negative integer, got {value!r}")
        self._max_retries = value
        return self

    def transport(self, transport: HttpTransportProtocol) -> SmsRuClientBuilder:
        """Usa um transporte próprio no lugar do cliente httpx padrão."""
        self._transport = transport
        return self

    def build_endpoints(self) -> SmsRuEndpoints:
        endpoints = SmsRuEndpoints.from_base_url(self._base_url)
        overrides = {op.name.lower(): url for op, url in self._overrides.items()}
        return replace(endpoints, **overrides)

    def build(self) -> SmsRuClient:
        transport = self._transport or HttpClient(
            HttpClientConfig(
                timeout_seconds=self._timeout_seconds,
                max_retries=self._max_retries,
            )
        )
        return SmsRuClient(
            auth=self._auth,
            transport=transport,
            endpoints=self.build_endpoints(),
            user_agent=self._user_agent,
        )
