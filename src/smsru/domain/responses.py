"""Modelos de resposta decodificados do SMS.RU.

Campos monetários (balance, cost, total_cost) são texto exato, nunca float.
Campos opcionais ausentes no wire viram None; mapas e listas ausentes
viram coleções vazias.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from smsru.domain.status_codes import CallCheckStatusCode, StatusCode
from smsru.domain.values import CallbackUrl, CallCheckId, RawPhoneNumber, SmsId


class Status(StrEnum):
    """Resultado de topo ou por item."""

    OK = "OK"
    ERROR = "ERROR"


@dataclass(frozen=True)
class _Outcome:
    status: Status
    status_code: StatusCode
    status_text: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status is Status.OK


# ──────────────────────────────────────────────────────────────
# Itens de lote
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SmsResult(_Outcome):
    """Resultado de envio para um destinatário."""

    sms_id: SmsId | None = None


@dataclass(frozen=True)
class SmsStatusResult(_Outcome):
    """Estado de entrega de uma mensagem."""

    cost: str | None = None


@dataclass(frozen=True)
class SmsCostResult(_Outcome):
    """Custo estimado para um destinatário."""

    cost: str | None = None
    sms: int | None = None


# ──────────────────────────────────────────────────────────────
# Respostas por operação
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SendSmsResponse(_Outcome):
    balance: str | None = None
    sms: dict[RawPhoneNumber, SmsResult] = field(default_factory=dict)


@dataclass(frozen=True)
class CheckStatusResponse(_Outcome):
    balance: str | None = None
    sms: dict[SmsId, SmsStatusResult] = field(default_factory=dict)


@dataclass(frozen=True)
class CheckCostResponse(_Outcome):
    total_cost: str | None = None
    total_sms: int | None = None
    sms: dict[RawPhoneNumber, SmsCostResult] = field(default_factory=dict)


@dataclass(frozen=True)
class StartCallAuthResponse(_Outcome):
    """Resposta de callcheck/add.

    O usuário confirma ligando para call_phone; o andamento é consultado
    com check_id.
    """

    check_id: CallCheckId | None = None
    call_phone: RawPhoneNumber | None = None
    call_phone_pretty: str | None = None
    call_phone_html: str | None = None


@dataclass(frozen=True)
class CheckCallAuthStatusResponse(_Outcome):
    check_status: CallCheckStatusCode | None = None
    check_status_text: str | None = None

    @property
    def is_confirmed(self) -> bool:
        return self.check_status is not None and self.check_status.is_confirmed


@dataclass(frozen=True)
class StatusOnlyResponse(_Outcome):
    """Resposta sem payload (auth/check, stoplist/add, stoplist/del)."""


@dataclass(frozen=True)
class BalanceResponse(_Outcome):
    balance: str | None = None


@dataclass(frozen=True)
class FreeUsageResponse(_Outcome):
    """Envios gratuitos diários para o próprio número."""

    total_free: int | None = None
    used_today: int | None = None


@dataclass(frozen=True)
class LimitUsageResponse(_Outcome):
    total_limit: int | None = None
    used_today: int | None = None


@dataclass(frozen=True)
class SendersResponse(_Outcome):
    senders: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StoplistResponse(_Outcome):
    """Números na stoplist com a nota associada."""

    stoplist: dict[RawPhoneNumber, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CallbacksResponse(_Outcome):
    """URLs de callback registradas (callback/add, callback/del, callback/get)."""

    callback: list[CallbackUrl] = field(default_factory=list)
