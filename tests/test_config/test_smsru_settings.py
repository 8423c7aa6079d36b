"""Testes para smsru.config.settings (SMSRU_* e endpoints)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from smsru.client import ApiIdAuth, LoginPasswordAuth
from smsru.config.settings import SmsRuEndpoints, SmsRuSettings, get_smsru_settings
from smsru.constants import DEFAULT_USER_AGENT, Operation

ENV_VARS = (
    "SMSRU_API_ID",
    "SMSRU_LOGIN",
    "SMSRU_PASSWORD",
    "SMSRU_BASE_URL",
    "SMSRU_REQUEST_TIMEOUT_SECONDS",
    "SMSRU_MAX_RETRIES",
    "SMSRU_USER_AGENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_smsru_settings.cache_clear()
    yield
    get_smsru_settings.cache_clear()


class TestLoadFromEnv:
    def test_defaults(self) -> None:
        settings = get_smsru_settings()
        assert settings.api_id == ""
        assert settings.base_url == "https://sms.ru"
        assert settings.request_timeout_seconds == 30.0
        assert settings.max_retries == 0
        assert settings.user_agent == DEFAULT_USER_AGENT

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SMSRU_API_ID", "key-1")
        monkeypatch.setenv("SMSRU_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("SMSRU_REQUEST_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("SMSRU_MAX_RETRIES", "3")
        monkeypatch.setenv("SMSRU_USER_AGENT", "svc/2")

        settings = get_smsru_settings()

        assert settings.api_id == "key-1"
        assert settings.base_url == "http://localhost:8080"
        assert settings.request_timeout_seconds == 12.5
        assert settings.max_retries == 3
        assert settings.user_agent == "svc/2"

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_smsru_settings()
        monkeypatch.setenv("SMSRU_API_ID", "late")
        assert get_smsru_settings() is first


class TestAuth:
    def test_api_id_wins(self) -> None:
        auth = SmsRuSettings(api_id="key", login="user", password="pw").auth()
        assert isinstance(auth, ApiIdAuth)
        assert auth.api_id.value == "key"

    def test_login_password(self) -> None:
        auth = SmsRuSettings(login=" user ", password="pw").auth()
        assert isinstance(auth, LoginPasswordAuth)
        assert auth.login.value == "user"
        assert auth.password.value == "pw"

    def test_missing_credentials(self) -> None:
        with pytest.raises(ValueError):
            SmsRuSettings(login="user").auth()


class TestValidate:
    def test_valid(self) -> None:
        assert SmsRuSettings(api_id="key").validate() == []

    def test_collects_all_errors(self) -> None:
        errors = SmsRuSettings(
            base_url="sms.ru",
            request_timeout_seconds=0,
            max_retries=-1,
            user_agent=" ",
        ).validate()
        assert len(errors) == 5
        assert any("SMSRU_API_ID" in error for error in errors)
        assert any("SMSRU_BASE_URL" in error for error in errors)


class TestEndpoints:
    def test_from_base_url(self) -> None:
        endpoints = SmsRuEndpoints.from_base_url("https://sms.ru/")
        assert endpoints.url_for(Operation.SEND_SMS) == "https://sms.ru/sms/send"
        assert endpoints.url_for(Operation.START_CALL_AUTH) == "https://sms.ru/callcheck/add"
        assert endpoints.url_for(Operation.REMOVE_STOPLIST_ENTRY) == "https://sms.ru/stoplist/del"

    def test_every_operation_has_endpoint(self) -> None:
        endpoints = SmsRuEndpoints.from_base_url()
        for operation in Operation:
            assert endpoints.url_for(operation).endswith(operation.value)

    def test_settings_endpoints_follow_base(self) -> None:
        settings = SmsRuSettings(base_url="http://localhost:1234")
        assert settings.endpoints.get_balance == "http://localhost:1234/my/balance"

    def test_validate(self) -> None:
        assert SmsRuEndpoints.from_base_url().validate() == []
        assert len(SmsRuEndpoints.from_base_url("localhost").validate()) == len(Operation)
