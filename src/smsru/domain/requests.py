"""Modelos de request por operação SMS.RU.

SendSms e CheckCost carregam um `shape` que é ToMany (mesmo texto para
vários destinatários) ou PerRecipient (texto individual por destinatário).
Os dois formatos são mutuamente exclusivos dentro de um request.

Limites de lote são checados na construção sobre o tamanho literal da
entrada: duplicatas contam para o limite.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from ipaddress import IPv4Address, IPv6Address
from typing import TypeVar

from smsru.domain.values import (
    CallbackUrl,
    CallCheckId,
    MessageText,
    PartnerId,
    PhoneNumber,
    RawPhoneNumber,
    SenderId,
    SmsId,
    StoplistText,
    TtlMinutes,
    UnixTimestamp,
)
from smsru.utils.errors import UnsupportedResponseFormatError, ValidationError

SEND_SMS_MAX_RECIPIENTS = 100
CHECK_COST_MAX_RECIPIENTS = 100
CHECK_STATUS_MAX_SMS_IDS = 100

_T = TypeVar("_T")


class ResponseFormat(StrEnum):
    """Formato de resposta pedido ao SMS.RU."""

    JSON = "json"
    PLAIN = "plain"


def _coerce(value: object, cls: type[_T]) -> _T:
    if isinstance(value, cls):
        return value
    if cls is RawPhoneNumber and isinstance(value, PhoneNumber):
        return value.to_raw()  # type: ignore[return-value]
    if isinstance(value, str):
        return cls(value)  # type: ignore[call-arg]
    raise ValidationError(
        getattr(cls, "FIELD", cls.__name__),
        f"expected {cls.__name__}, got {type(value).__name__}",
    )


_SINGLE_VALUES = (str, bytes, RawPhoneNumber, PhoneNumber, SmsId, MessageText)


def _require_collection(value: object, field_name: str) -> None:
    # str também é iterável; um valor avulso não é lote
    if isinstance(value, _SINGLE_VALUES) or not isinstance(value, Iterable):
        raise ValidationError(
            field_name, f"expected a collection of items, got {type(value).__name__}"
        )


def _check_batch_size(size: int, limit: int, field_name: str) -> None:
    if size == 0:
        raise ValidationError(field_name, "at least one item is required")
    if size > limit:
        raise ValidationError(field_name, f"too many items: {size} (max {limit})")


def ensure_json_format(response_format: ResponseFormat) -> None:
    """Rejeita formatos diferentes de JSON antes de qualquer troca HTTP.

    Raises:
        UnsupportedResponseFormatError: Se o formato não for JSON
    """
    if response_format is not ResponseFormat.JSON:
        raise UnsupportedResponseFormatError()


# ──────────────────────────────────────────────────────────────
# Opções
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SendOptions:
    """Parâmetros opcionais de sms/send.

    Attributes:
        sender: Remetente habilitado na conta (`from`)
        ip: IP do usuário final, usado pelo SMS.RU contra abuso
        time: Envio agendado
        ttl: Tempo de vida da entrega
        daytime: Entrega só em horário diurno do destinatário; anula `time`
        translit: Translitera cirílico para latino
        test: Simula o envio sem cobrar
        partner_id: Id de parceiro
    """

    response_format: ResponseFormat = ResponseFormat.JSON
    sender: SenderId | None = None
    ip: IPv4Address | IPv6Address | None = None
    time: UnixTimestamp | None = None
    ttl: TtlMinutes | None = None
    daytime: bool = False
    translit: bool = False
    test: bool = False
    partner_id: PartnerId | None = None

    @property
    def effective_time(self) -> UnixTimestamp | None:
        """Horário agendado que realmente vai para o wire."""
        return None if self.daytime else self.time


@dataclass(frozen=True)
class CheckCostOptions:
    """Parâmetros opcionais de sms/cost."""

    response_format: ResponseFormat = ResponseFormat.JSON
    sender: SenderId | None = None
    translit: bool = False


@dataclass(frozen=True)
class StartCallAuthOptions:
    response_format: ResponseFormat = ResponseFormat.JSON


@dataclass(frozen=True)
class CheckCallAuthStatusOptions:
    response_format: ResponseFormat = ResponseFormat.JSON


# ──────────────────────────────────────────────────────────────
# Formatos de envio
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ToMany:
    """Mesmo texto para uma lista de destinatários."""

    recipients: tuple[RawPhoneNumber, ...]
    message: MessageText
    limit: int = field(default=SEND_SMS_MAX_RECIPIENTS, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_collection(self.recipients, RawPhoneNumber.FIELD)
        recipients = tuple(_coerce(phone, RawPhoneNumber) for phone in self.recipients)
        _check_batch_size(len(recipients), self.limit, RawPhoneNumber.FIELD)
        object.__setattr__(self, "recipients", recipients)
        object.__setattr__(self, "message", _coerce(self.message, MessageText))


@dataclass(frozen=True)
class PerRecipient:
    """Texto individual por destinatário.

    Aceita mapping ou iterável de pares. Chave repetida mantém o último
    valor; o limite vale para o mapeamento resultante. Os itens ficam
    ordenados por telefone.
    """

    messages: tuple[tuple[RawPhoneNumber, MessageText], ...]
    limit: int = field(default=SEND_SMS_MAX_RECIPIENTS, repr=False, compare=False)

    def __post_init__(self) -> None:
        _require_collection(self.messages, RawPhoneNumber.FIELD)
        source = self.messages
        pairs = source.items() if isinstance(source, Mapping) else source
        merged: dict[RawPhoneNumber, MessageText] = {}
        for phone, text in pairs:
            merged[_coerce(phone, RawPhoneNumber)] = _coerce(text, MessageText)
        _check_batch_size(len(merged), self.limit, RawPhoneNumber.FIELD)
        object.__setattr__(self, "messages", tuple(sorted(merged.items())))

    def as_dict(self) -> dict[RawPhoneNumber, MessageText]:
        return dict(self.messages)

    @property
    def recipients(self) -> tuple[RawPhoneNumber, ...]:
        return tuple(phone for phone, _ in self.messages)


SmsShape = ToMany | PerRecipient

RecipientsInput = Iterable[RawPhoneNumber | PhoneNumber | str]
MessagesInput = (
    Mapping[RawPhoneNumber | PhoneNumber | str, MessageText | str]
    | Iterable[tuple[RawPhoneNumber | PhoneNumber | str, MessageText | str]]
)


# ──────────────────────────────────────────────────────────────
# Requests
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SendSms:
    """Request de sms/send."""

    shape: SmsShape
    options: SendOptions = field(default_factory=SendOptions)

    @classmethod
    def to_many(
        cls,
        recipients: RecipientsInput,
        message: MessageText | str,
        options: SendOptions | None = None,
    ) -> SendSms:
        _require_collection(recipients, RawPhoneNumber.FIELD)
        shape = ToMany(
            tuple(recipients), message, SEND_SMS_MAX_RECIPIENTS  # type: ignore[arg-type]
        )
        return cls(shape, options or SendOptions())

    @classmethod
    def per_recipient(
        cls,
        messages: MessagesInput,
        options: SendOptions | None = None,
    ) -> SendSms:
        shape = PerRecipient(messages, SEND_SMS_MAX_RECIPIENTS)  # type: ignore[arg-type]
        return cls(shape, options or SendOptions())

    @property
    def recipients(self) -> tuple[RawPhoneNumber, ...]:
        return self.shape.recipients


@dataclass(frozen=True)
class CheckCost:
    """Request de sms/cost. Mesmos formatos de SendSms."""

    shape: SmsShape
    options: CheckCostOptions = field(default_factory=CheckCostOptions)

    @classmethod
    def to_many(
        cls,
        recipients: RecipientsInput,
        message: MessageText | str,
        options: CheckCostOptions | None = None,
    ) -> CheckCost:
        _require_collection(recipients, RawPhoneNumber.FIELD)
        shape = ToMany(
            tuple(recipients), message, CHECK_COST_MAX_RECIPIENTS  # type: ignore[arg-type]
        )
        return cls(shape, options or CheckCostOptions())

    @classmethod
    def per_recipient(
        cls,
        messages: MessagesInput,
        options: CheckCostOptions | None = None,
    ) -> CheckCost:
        shape = PerRecipient(messages, CHECK_COST_MAX_RECIPIENTS)  # type: ignore[arg-type]
        return cls(shape, options or CheckCostOptions())

    @property
    def recipients(self) -> tuple[RawPhoneNumber, ...]:
        return self.shape.recipients


@dataclass(frozen=True)
class CheckStatus:
    """Request de sms/status para 1..100 ids."""

    sms_ids: tuple[SmsId, ...]

    def __post_init__(self) -> None:
        _require_collection(self.sms_ids, SmsId.FIELD)
        ids = tuple(_coerce(sms_id, SmsId) for sms_id in self.sms_ids)
        _check_batch_size(len(ids), CHECK_STATUS_MAX_SMS_IDS, SmsId.FIELD)
        object.__setattr__(self, "sms_ids", ids)

    @classmethod
    def one(cls, sms_id: SmsId | str) -> CheckStatus:
        return cls((sms_id,))  # type: ignore[arg-type]


@dataclass(frozen=True)
class StartCallAuth:
    """Request de callcheck/add: o usuário liga para o número retornado."""

    phone: RawPhoneNumber
    options: StartCallAuthOptions = field(default_factory=StartCallAuthOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "phone", _coerce(self.phone, RawPhoneNumber))


@dataclass(frozen=True)
class CheckCallAuthStatus:
    """Request de callcheck/status (polling pelo check_id)."""

    check_id: CallCheckId
    options: CheckCallAuthStatusOptions = field(default_factory=CheckCallAuthStatusOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "check_id", _coerce(self.check_id, CallCheckId))


@dataclass(frozen=True)
class AddStoplistEntry:
    phone: RawPhoneNumber
    text: StoplistText

    def __post_init__(self) -> None:
        object.__setattr__(self, "phone", _coerce(self.phone, RawPhoneNumber))
        object.__setattr__(self, "text", _coerce(self.text, StoplistText))


@dataclass(frozen=True)
class RemoveStoplistEntry:
    phone: RawPhoneNumber

    def __post_init__(self) -> None:
        object.__setattr__(self, "phone", _coerce(self.phone, RawPhoneNumber))


@dataclass(frozen=True)
class AddCallback:
    url: CallbackUrl

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", _coerce(self.url, CallbackUrl))


@dataclass(frozen=True)
class RemoveCallback:
    url: CallbackUrl

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", _coerce(self.url, CallbackUrl))
