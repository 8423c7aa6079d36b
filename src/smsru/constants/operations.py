"""Operações remotas do SMS.RU e seus caminhos relativos."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Operação SMS.RU; o valor é o caminho relativo à URL base."""

    SEND_SMS = "sms/send"
    CHECK_COST = "sms/cost"
    CHECK_STATUS = "sms/status"
    START_CALL_AUTH = "callcheck/add"
    CHECK_CALL_AUTH_STATUS = "callcheck/status"
    CHECK_AUTH = "auth/check"
    GET_BALANCE = "my/balance"
    GET_FREE_USAGE = "my/free"
    GET_LIMIT_USAGE = "my/limit"
    GET_SENDERS = "my/senders"
    ADD_STOPLIST_ENTRY = "stoplist/add"
    REMOVE_STOPLIST_ENTRY = "stoplist/del"
    GET_STOPLIST = "stoplist/get"
    ADD_CALLBACK = "callback/add"
    REMOVE_CALLBACK = "callback/del"
    GET_CALLBACKS = "callback/get"


DEFAULT_BASE_URL = "https://sms.ru"

CLIENT_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"smsru-client/{CLIENT_VERSION}"
