"""Códigos de status SMS.RU.

StatusCode é um wrapper de inteiro: igualdade, ordenação e hash usam
apenas o inteiro, conhecido ou não. O significado semântico fica numa
tabela separada (KnownStatusCode), consultada por known_kind().

Código desconhecido não é erro: known_kind() retorna None e o valor
segue preservado.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KnownStatusCode(Enum):
    """Códigos SMS.RU com significado conhecido por esta biblioteca."""

    MESSAGE_NOT_FOUND = -1
    REQUEST_OK_OR_QUEUED = 100
    BEING_DELIVERED_TO_OPERATOR = 101
    SENT_IN_TRANSIT = 102
    DELIVERED = 103
    NOT_DELIVERED_TTL_EXPIRED = 104
    NOT_DELIVERED_DELETED_BY_OPERATOR = 105
    NOT_DELIVERED_PHONE_FAILURE = 106
    NOT_DELIVERED_UNKNOWN = 107
    NOT_DELIVERED_REJECTED = 108
    READ = 110
    NOT_DELIVERED_NO_ROUTE = 150
    INVALID_API_ID = 200
    INSUFFICIENT_FUNDS = 201
    INVALID_RECIPIENT_OR_NO_ROUTE = 202
    EMPTY_MESSAGE_TEXT = 203
    SENDER_NOT_ENABLED = 204
    MESSAGE_TOO_LONG = 205
    DAILY_LIMIT_EXCEEDED = 206
    NO_DELIVERY_ROUTE = 207
    INVALID_TIME = 208
    RECIPIENT_IN_STOPLIST = 209
    USED_GET_INSTEAD_OF_POST = 210
    METHOD_NOT_FOUND = 211
    MESSAGE_NOT_UTF8 = 212
    TOO_MANY_NUMBERS = 213
    RECIPIENT_ABROAD_BLOCKED = 214
    RECIPIENT_IN_GLOBAL_STOPLIST = 215
    FORBIDDEN_WORD_IN_TEXT = 216
    MISSING_DISCLAIMER_PHRASE = 217
    SERVICE_TEMPORARILY_UNAVAILABLE = 220
    SENDER_MUST_MATCH_BRAND = 221
    EXCEEDED_DAILY_LIMIT_TO_NUMBER = 230
    EXCEEDED_IDENTICAL_PER_MINUTE = 231
    EXCEEDED_IDENTICAL_PER_DAY = 232
    EXCEEDED_REPEAT_SEND_LIMIT = 233
    INVALID_TOKEN = 300
    INVALID_AUTH = 301
    ACCOUNT_NOT_CONFIRMED = 302
    CONFIRMATION_CODE_WRONG = 303
    TOO_MANY_CONFIRMATION_CODES = 304
    TOO_MANY_WRONG_ATTEMPTS = 305
    CALL_CHECK_NOT_CONFIRMED_YET = 400
    CALL_CHECK_CONFIRMED = 401
    CALL_CHECK_EXPIRED_OR_INVALID_CHECK_ID = 402
    SERVER_ERROR = 500
    LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_1 = 501
    LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_2 = 502
    LIMIT_TOO_MANY_TO_COUNTRY = 503
    LIMIT_TOO_MANY_FOREIGN_AUTH = 504
    LIMIT_TOO_MANY_FROM_IP = 505
    LIMIT_HOSTING_PROVIDER_IP = 506
    INVALID_END_USER_IP = 507
    LIMIT_TOO_MANY_CALLS = 508
    COUNTRY_BLOCKED = 550
    CALLBACK_URL_INVALID = 901
    CALLBACK_HANDLER_NOT_FOUND = 902

    @property
    def is_retryable(self) -> bool:
        """True se a falha tende a ser transitória."""
        return self in _RETRYABLE_KINDS

    @property
    def is_auth_error(self) -> bool:
        """True se indica credencial inválida ou conta não confirmada."""
        return self in _AUTH_ERROR_KINDS


class KnownCallCheckStatusCode(Enum):
    """Valores conhecidos de `check_status` em callcheck/status."""

    NOT_CONFIRMED_YET = 400
    CONFIRMED = 401
    EXPIRED_OR_INVALID_CHECK_ID = 402


# Tabelas de lookup: inteiro -> tipo conhecido
KNOWN_STATUS_CODES: dict[int, KnownStatusCode] = {kind.value: kind for kind in KnownStatusCode}
KNOWN_CALL_CHECK_STATUS_CODES: dict[int, KnownCallCheckStatusCode] = {
    kind.value: kind for kind in KnownCallCheckStatusCode
}

_RETRYABLE_KINDS = frozenset(
    {
        KnownStatusCode.SERVICE_TEMPORARILY_UNAVAILABLE,
        KnownStatusCode.TOO_MANY_CONFIRMATION_CODES,
        KnownStatusCode.TOO_MANY_WRONG_ATTEMPTS,
        KnownStatusCode.SERVER_ERROR,
        KnownStatusCode.LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_1,
        KnownStatusCode.LIMIT_IP_COUNTRY_MISMATCH_CATEGORY_2,
        KnownStatusCode.LIMIT_TOO_MANY_TO_COUNTRY,
        KnownStatusCode.LIMIT_TOO_MANY_FOREIGN_AUTH,
        KnownStatusCode.LIMIT_TOO_MANY_FROM_IP,
        KnownStatusCode.LIMIT_HOSTING_PROVIDER_IP,
        KnownStatusCode.INVALID_END_USER_IP,
        KnownStatusCode.LIMIT_TOO_MANY_CALLS,
    }
)

_AUTH_ERROR_KINDS = frozenset(
    {
        KnownStatusCode.INVALID_API_ID,
        KnownStatusCode.INVALID_TOKEN,
        KnownStatusCode.INVALID_AUTH,
        KnownStatusCode.ACCOUNT_NOT_CONFIRMED,
    }
)


def _require_int(code: object) -> int:
    # bool é subclasse de int; True/False não são códigos
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"status code must be int, got {type(code).__name__}")
    return code


@dataclass(frozen=True, order=True)
class StatusCode:
    """Código de status SMS.RU, preservado mesmo quando desconhecido."""

    code: int

    def __post_init__(self) -> None:
        _require_int(self.code)

    def known_kind(self) -> KnownStatusCode | None:
        return known_kind(self)

    def is_retryable(self) -> bool:
        return is_retryable(self)

    def is_auth_error(self) -> bool:
        kind = self.known_kind()
        return kind is not None and kind.is_auth_error

    def __int__(self) -> int:
        return self.code


@dataclass(frozen=True, order=True)
class CallCheckStatusCode:
    """Código `check_status` de callcheck/status (400/401/402, desconhecidos preservados)."""

    code: int

    def __post_init__(self) -> None:
        _require_int(self.code)

    def known_kind(self) -> KnownCallCheckStatusCode | None:
        return KNOWN_CALL_CHECK_STATUS_CODES.get(self.code)

    @property
    def is_confirmed(self) -> bool:
        return self.known_kind() is KnownCallCheckStatusCode.CONFIRMED

    def __int__(self) -> int:
        return self.code


def known_kind(status_code: StatusCode) -> KnownStatusCode | None:
    """Lookup puro na tabela de códigos conhecidos."""
    return KNOWN_STATUS_CODES.get(status_code.code)


def is_retryable(status_code: StatusCode) -> bool:
    """Classifica o código como transitório.

    Códigos desconhecidos nunca são retentáveis.
    """
    kind = known_kind(status_code)
    return kind is not None and kind.is_retryable
