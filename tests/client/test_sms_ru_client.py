"""Testes para SmsRuClient (sem rede, via FakeTransport)."""

from __future__ import annotations

import pytest

from smsru import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckStatus,
    KnownStatusCode,
    RemoveCallback,
    RemoveStoplistEntry,
    ResponseFormat,
    SendOptions,
    SendSms,
    StartCallAuth,
    Status,
)
from smsru.client import Auth, SmsRuClient
from smsru.config.settings import SmsRuEndpoints
from smsru.constants import DEFAULT_USER_AGENT
from smsru.domain.values import RawPhoneNumber, SmsId
from smsru.utils.errors import (
    ApiError,
    HttpStatusError,
    ParseError,
    TransportError,
    UnsupportedResponseFormatError,
    ValidationError,
)
from tests.fakes.fake_transport import FakeTransport

OK = {"status": "OK", "status_code": 100}


@pytest.fixture
def client(api_id_auth: Auth, fake_transport: FakeTransport) -> SmsRuClient:
    return SmsRuClient(api_id_auth, fake_transport)


class TestConstruction:
    def test_defaults(self, client: SmsRuClient) -> None:
        assert client.user_agent == DEFAULT_USER_AGENT
        assert client.endpoints == SmsRuEndpoints.from_base_url("https://sms.ru")

    def test_rejects_non_auth(self, fake_transport: FakeTransport) -> None:
        with pytest.raises(TypeError):
            SmsRuClient("api-id", fake_transport)  # type: ignore[arg-type]

    def test_auth_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Auth()  # type: ignore[abstract]

    def test_custom_auth_subclass_must_implement_params(self) -> None:
        class IncompleteAuth(Auth):
            pass

        with pytest.raises(TypeError):
            IncompleteAuth()  # type: ignore[abstract]


class TestCredentials:
    """Credenciais vão antes dos parâmetros da operação."""

    @pytest.mark.asyncio
    async def test_api_id_first(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json({**OK, "balance": 1})
        await client.get_balance()

        call = fake_transport.calls[0]
        assert call.params == [("api_id", "test-api-id"), ("json", "1")]
        assert call.headers == {"User-Agent": DEFAULT_USER_AGENT}

    @pytest.mark.asyncio
    async def test_login_password(self, fake_transport: FakeTransport) -> None:
        client = SmsRuClient(Auth.login_password("user", " p@ss "), fake_transport)
        fake_transport.queue_json(OK)
        await client.check_auth()

        assert fake_transport.calls[0].params == [
            ("login", "user"),
            ("password", " p@ss "),
            ("json", "1"),
        ]


class TestSendSms:
    @pytest.mark.asyncio
    async def test_to_many(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json(
            {
                **OK,
                "balance": "10.5",
                "sms": {
                    "79251234567": {"status": "OK", "status_code": 100, "sms_id": "1-1"},
                    "79257654321": {"status": "ERROR", "status_code": 207},
                },
            }
        )
        request = SendSms.to_many(
            ["79251234567", "79257654321"], "Olá", SendOptions(test=True)
        )

        response = await client.send_sms(request)

        call = fake_transport.calls[0]
        assert call.url == "https://sms.ru/sms/send"
        assert call.params == [
            ("api_id", "test-api-id"),
            ("json", "1"),
            ("to", "79251234567,79257654321"),
            ("msg", "Olá"),
            ("test", "1"),
        ]
        assert response.status is Status.OK
        assert response.balance == "10.5"
        assert response.sms[RawPhoneNumber("79251234567")].sms_id == SmsId("1-1")
        # falha por item não vira ApiError
        assert not response.sms[RawPhoneNumber("79257654321")].is_ok

    @pytest.mark.asyncio
    async def test_per_recipient(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json(OK)
        await client.send_sms(SendSms.per_recipient({"79257654321": "B", "79251234567": "A"}))

        params = fake_transport.calls[0].params
        assert params[2:] == [("to[79251234567]", "A"), ("to[79257654321]", "B")]
        assert fake_transport.calls[0].param("msg") is None

    @pytest.mark.asyncio
    async def test_plain_format_never_reaches_transport(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        request = SendSms.to_many(
            ["79251234567"], "hi", SendOptions(response_format=ResponseFormat.PLAIN)
        )
        with pytest.raises(UnsupportedResponseFormatError) as exc_info:
            await client.send_sms(request)
        assert isinstance(exc_info.value, ValidationError)
        assert fake_transport.calls == []


class TestErrorMapping:
    """Cada falha vira exatamente um tipo de erro."""

    @pytest.mark.asyncio
    async def test_api_error(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json({"status": "ERROR", "status_code": 202, "status_text": "bad"})

        with pytest.raises(ApiError) as exc_info:
            await client.send_sms(SendSms.to_many(["79251234567"], "hi"))

        error = exc_info.value
        assert error.status_code.known_kind() is KnownStatusCode.INVALID_RECIPIENT_OR_NO_ROUTE
        assert error.status_text == "bad"
        assert error.is_retryable is False

    @pytest.mark.asyncio
    async def test_api_error_retryable(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_json({"status": "ERROR", "status_code": 220})
        with pytest.raises(ApiError) as exc_info:
            await client.get_balance()
        assert exc_info.value.is_retryable is True

    @pytest.mark.asyncio
    async def test_api_error_unknown_code_preserved(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_json({"status": "ERROR", "status_code": 999})
        with pytest.raises(ApiError) as exc_info:
            await client.check_auth()
        assert exc_info.value.status_code.code == 999
        assert exc_info.value.status_code.known_kind() is None

    @pytest.mark.asyncio
    async def test_http_status_error(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_raw(b"Bad Gateway", status_code=502)
        with pytest.raises(HttpStatusError) as exc_info:
            await client.get_balance()
        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"
        assert exc_info.value.raw_body == b"Bad Gateway"
        assert exc_info.value.is_retryable

    @pytest.mark.asyncio
    async def test_http_status_error_empty_body(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_raw(b"", status_code=404)
        with pytest.raises(HttpStatusError) as exc_info:
            await client.get_balance()
        assert exc_info.value.body is None
        assert exc_info.value.raw_body is None
        assert not exc_info.value.is_retryable

    @pytest.mark.asyncio
    async def test_http_status_error_keeps_exact_bytes(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        body = "Ошибка".encode("cp1251")
        fake_transport.queue_raw(body, status_code=500)
        with pytest.raises(HttpStatusError) as exc_info:
            await client.get_balance()
        assert exc_info.value.raw_body == body
        assert exc_info.value.body is not None

    @pytest.mark.asyncio
    async def test_parse_error(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_raw(b"100\n1-1\nbalance=10")
        with pytest.raises(ParseError):
            await client.get_balance()

    @pytest.mark.asyncio
    async def test_parse_error_missing_status(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_json({"balance": 1})
        with pytest.raises(ParseError):
            await client.get_balance()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_error(TransportError("http_timeout", is_timeout=True))
        with pytest.raises(TransportError) as exc_info:
            await client.get_senders()
        assert exc_info.value.is_timeout


class TestOperations:
    """Cada operação usa seu endpoint e seus parâmetros."""

    @pytest.mark.asyncio
    async def test_check_cost(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json({**OK, "total_cost": 2.5, "total_sms": 2})
        response = await client.check_cost(CheckCost.to_many(["79251234567"], "hi"))
        assert fake_transport.calls[0].url == "https://sms.ru/sms/cost"
        assert response.total_cost == "2.5"
        assert response.total_sms == 2

    @pytest.mark.asyncio
    async def test_check_status(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json(
            {**OK, "sms": {"1-1": {"status": "OK", "status_code": 103, "cost": "0.5"}}}
        )
        response = await client.check_status(CheckStatus(("1-1", "2-2")))
        call = fake_transport.calls[0]
        assert call.url == "https://sms.ru/sms/status"
        assert call.param("sms_id") == "1-1,2-2"
        assert response.sms[SmsId("1-1")].status_code.known_kind() is KnownStatusCode.DELIVERED

    @pytest.mark.asyncio
    async def test_call_auth_flow(self, client: SmsRuClient, fake_transport: FakeTransport) -> None:
        fake_transport.queue_json({**OK, "check_id": "201737-542", "call_phone": "78005008275"})
        fake_transport.queue_json({**OK, "check_status": "401", "check_status_text": "ok"})

        started = await client.start_call_auth(StartCallAuth("79251234567"))
        status = await client.check_call_auth_status(CheckCallAuthStatus(started.check_id))

        first, second = fake_transport.calls
        assert first.url == "https://sms.ru/callcheck/add"
        assert first.param("phone") == "79251234567"
        assert second.url == "https://sms.ru/callcheck/status"
        assert second.param("check_id") == "201737-542"
        assert status.is_confirmed

    @pytest.mark.parametrize(
        ("method", "path", "payload"),
        [
            ("check_auth", "auth/check", {}),
            ("get_balance", "my/balance", {"balance": "1.00"}),
            ("get_free_usage", "my/free", {"total_free": 5, "used_today": 1}),
            ("get_limit_usage", "my/limit", {"total_limit": 100, "used_today": 1}),
            ("get_senders", "my/senders", {"senders": ["A"]}),
            ("get_stoplist", "stoplist/get", {"stoplist": {"79251234567": "x"}}),
            ("get_callbacks", "callback/get", {"callback": ["https://example.com/cb"]}),
        ],
    )
    @pytest.mark.asyncio
    async def test_no_argument_operations(
        self,
        client: SmsRuClient,
        fake_transport: FakeTransport,
        method: str,
        path: str,
        payload: dict,
    ) -> None:
        fake_transport.queue_json({**OK, **payload})
        response = await getattr(client, method)()
        assert fake_transport.calls[0].url == f"https://sms.ru/{path}"
        assert fake_transport.calls[0].params == [("api_id", "test-api-id"), ("json", "1")]
        assert response.is_ok

    @pytest.mark.asyncio
    async def test_stoplist_changes(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue_json(OK)
        fake_transport.queue_json(OK)

        await client.add_stoplist_entry(AddStoplistEntry("79251234567", "fraude"))
        await client.remove_stoplist_entry(RemoveStoplistEntry("79251234567"))

        added, removed = fake_transport.calls
        assert added.url == "https://sms.ru/stoplist/add"
        assert added.params[2:] == [("stoplist_phone", "79251234567"), ("stoplist_text", "fraude")]
        assert removed.url == "https://sms.ru/stoplist/del"
        assert removed.params[2:] == [("stoplist_phone", "79251234567")]

    @pytest.mark.asyncio
    async def test_callback_changes(
        self, client: SmsRuClient, fake_transport: FakeTransport
    ) -> None:
        url = "https://example.com/cb"
        fake_transport.queue_json({**OK, "callback": [url]})
        fake_transport.queue_json({**OK, "callback": []})

        added = await client.add_callback(AddCallback(url))
        removed = await client.remove_callback(RemoveCallback(url))

        assert fake_transport.calls[0].url == "https://sms.ru/callback/add"
        assert fake_transport.calls[0].param("url") == url
        assert fake_transport.calls[1].url == "https://sms.ru/callback/del"
        assert [str(item) for item in added.callback] == [url]
        assert removed.callback == []

    @pytest.mark.asyncio
    async def test_custom_endpoints(self, api_id_auth: Auth, fake_transport: FakeTransport) -> None:
        endpoints = SmsRuEndpoints.from_base_url("http://localhost:8080/")
        client = SmsRuClient(api_id_auth, fake_transport, endpoints, user_agent="app/2")
        fake_transport.queue_json(OK)

        await client.check_auth()

        assert fake_transport.calls[0].url == "http://localhost:8080/auth/check"
        assert fake_transport.calls[0].headers["User-Agent"] == "app/2"
