"""Cliente assíncrono da API SMS.RU.

Cada chamada é uma troca independente:
request → parâmetros de formulário → POST → JSON → envelope → resposta.

O cliente guarda só configuração imutável (credencial, endpoints,
User-Agent) e pode ser compartilhado entre tasks asyncio.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from smsru.api.connectors.smsru_logging import log_api_error, log_http_error, log_success
from smsru.api.normalizers import (
    decode_balance,
    decode_callbacks,
    decode_check_call_auth_status,
    decode_check_cost,
    decode_check_status,
    decode_envelope,
    decode_free_usage,
    decode_limit_usage,
    decode_send_sms,
    decode_senders,
    decode_start_call_auth,
    decode_status_only,
    decode_stoplist,
    parse_json_object,
)
from smsru.api.payload_builders import FormParams, build_base_params, build_form_params
from smsru.config.settings import SmsRuEndpoints
from smsru.constants import DEFAULT_USER_AGENT, Operation
from smsru.domain.auth import Auth
from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckStatus,
    RemoveCallback,
    RemoveStoplistEntry,
    SendSms,
    StartCallAuth,
)
from smsru.domain.responses import (
    BalanceResponse,
    CallbacksResponse,
    CheckCallAuthStatusResponse,
    CheckCostResponse,
    CheckStatusResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    SendSmsResponse,
    StartCallAuthResponse,
    StatusOnlyResponse,
    StoplistResponse,
)
from smsru.protocols import HttpTransportProtocol
from smsru.utils.errors import ApiError, HttpStatusError

_R = TypeVar("_R")


class SmsRuClient:
    """Cliente SMS.RU com um método por operação remota.

    Erros possíveis por chamada (mutuamente exclusivos):
    ValidationError, TransportError, HttpStatusError, ParseError, ApiError.
    Falhas por item em respostas de lote nunca viram ApiError.
    """

    def __init__(
        self,
        auth: Auth,
        transport: HttpTransportProtocol,
        endpoints: SmsRuEndpoints | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not isinstance(auth, Auth):
            raise TypeError(f"auth deve ser Auth, não {type(auth).__name__}")
        self._auth = auth
        self._transport = transport
        self._endpoints = endpoints or SmsRuEndpoints.from_base_url()
        self._user_agent = user_agent

    @property
    def endpoints(self) -> SmsRuEndpoints:
        return self._endpoints

    @property
    def user_agent(self) -> str:
        return self._user_agent

    # ──────────────────────────────────────────────────────────────
    # Mensagens
    # ──────────────────────────────────────────────────────────────

    async def send_sms(self, request: SendSms) -> SendSmsResponse:
        """Envia SMS (mesmo texto para vários, ou texto por destinatário)."""
        return await self._execute(
            Operation.SEND_SMS,
            build_form_params(request),
            lambda data: decode_send_sms(data, request),
        )

    async def check_cost(self, request: CheckCost) -> CheckCostResponse:
        """Consulta o custo de um envio sem enviá-lo."""
        return await self._execute(
            Operation.CHECK_COST,
            build_form_params(request),
            lambda data: decode_check_cost(data, request),
        )

    async def check_status(self, request: CheckStatus) -> CheckStatusResponse:
        return await self._execute(
            Operation.CHECK_STATUS,
            build_form_params(request),
            lambda data: decode_check_status(data, request),
        )

    # ──────────────────────────────────────────────────────────────
    # Autenticação por chamada
    # ──────────────────────────────────────────────────────────────

    async def start_call_auth(self, request: StartCallAuth) -> StartCallAuthResponse:
        """Inicia verificação: o usuário deve ligar para call_phone."""
        return await self._execute(
            Operation.START_CALL_AUTH,
            build_form_params(request),
            decode_start_call_auth,
        )

    async def check_call_auth_status(
        self,
        request: CheckCallAuthStatus,
    ) -> CheckCallAuthStatusResponse:
        """Consulta (polling) o andamento de uma verificação por chamada."""
        return await self._execute(
            Operation.CHECK_CALL_AUTH_STATUS,
            build_form_params(request),
            decode_check_call_auth_status,
        )

    # ──────────────────────────────────────────────────────────────
    # Conta
    # ──────────────────────────────────────────────────────────────

    async def check_auth(self) -> StatusOnlyResponse:
        """Verifica se a credencial é aceita."""
        return await self._execute(Operation.CHECK_AUTH, build_base_params(), decode_status_only)

    async def get_balance(self) -> BalanceResponse:
        return await self._execute(Operation.GET_BALANCE, build_base_params(), decode_balance)

    async def get_free_usage(self) -> FreeUsageResponse:
        return await self._execute(Operation.GET_FREE_USAGE, build_base_params(), decode_free_usage)

    async def get_limit_usage(self) -> LimitUsageResponse:
        return await self._execute(
            Operation.GET_LIMIT_USAGE, build_base_params(), decode_limit_usage
        )

    async def get_senders(self) -> SendersResponse:
        return await self._execute(Operation.GET_SENDERS, build_base_params(), decode_senders)

    # ──────────────────────────────────────────────────────────────
    # Stoplist
    # ──────────────────────────────────────────────────────────────

    async def add_stoplist_entry(self, request: AddStoplistEntry) -> StatusOnlyResponse:
        return await self._execute(
            Operation.ADD_STOPLIST_ENTRY, build_form_params(request), decode_status_only
        )

    async def remove_stoplist_entry(self, request: RemoveStoplistEntry) -> StatusOnlyResponse:
        return await self._execute(
            Operation.REMOVE_STOPLIST_ENTRY, build_form_params(request), decode_status_only
        )

    async def get_stoplist(self) -> StoplistResponse:
        return await self._execute(Operation.GET_STOPLIST, build_base_params(), decode_stoplist)

    # ──────────────────────────────────────────────────────────────
    # Callbacks
    # ──────────────────────────────────────────────────────────────

    async def add_callback(self, request: AddCallback) -> CallbacksResponse:
        return await self._execute(
            Operation.ADD_CALLBACK, build_form_params(request), decode_callbacks
        )

    async def remove_callback(self, request: RemoveCallback) -> CallbacksResponse:
        return await self._execute(
            Operation.REMOVE_CALLBACK, build_form_params(request), decode_callbacks
        )

    async def get_callbacks(self) -> CallbacksResponse:
        return await self._execute(Operation.GET_CALLBACKS, build_base_params(), decode_callbacks)

    # ──────────────────────────────────────────────────────────────
    # Execução
    # ──────────────────────────────────────────────────────────────

    async def _execute(
        self,
        operation: Operation,
        params: FormParams,
        decode: Callable[[dict[str, Any]], _R],
    ) -> _R:
        data = await self._call(operation, params)
        return decode(data)

    async def _call(self, operation: Operation, params: FormParams) -> dict[str, Any]:
        """Executa uma troca e devolve o JSON já aprovado pelo envelope.

        Raises:
            TransportError: Se a troca não completar
            HttpStatusError: Se o status HTTP não for 2xx
            ParseError: Se o corpo não for JSON válido
            ApiError: Se o status de topo for ERROR
        """
        url = self._endpoints.url_for(operation)
        form = [*self._auth.to_params(), *params]
        headers = {"User-Agent": self._user_agent}

        response = await self._transport.post_form(url, form, headers)

        if not response.is_success:
            error = HttpStatusError(response.status_code, response.body)
            log_http_error(error, operation.value)
            raise error

        data = parse_json_object(response.body)
        envelope = decode_envelope(data)
        if not envelope.is_ok:
            api_error = ApiError(envelope.status_code, envelope.status_text)
            log_api_error(api_error, operation.value)
            raise api_error

        log_success(operation.value, envelope.status_code.code)
        return data
