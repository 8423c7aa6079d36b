"""Tipos de valor do domínio SMS.RU.

Cada tipo valida tudo na construção (__post_init__); depois de criado,
o invariante vale para toda a vida do objeto. Falha de construção
levanta ValidationError.

Cada tipo expõe FIELD com o nome do campo de formulário usado pelo SMS.RU.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar
from urllib.parse import urlsplit

import phonenumbers

from smsru.utils.errors import ValidationError


def _trimmed_non_empty(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(field_name, f"expected str, got {type(value).__name__}")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(field_name, "must not be empty")
    return trimmed


@dataclass(frozen=True, order=True)
class _TrimmedText:
    """Texto opaco não vazio após strip; guardado já sem espaços nas pontas."""

    FIELD: ClassVar[str] = ""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _trimmed_non_empty(self.value, self.FIELD))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class ApiId(_TrimmedText):
    """Token `api_id` do SMS.RU."""

    FIELD: ClassVar[str] = "api_id"

    def __repr__(self) -> str:
        return "ApiId(value='***')"


@dataclass(frozen=True, order=True)
class Login(_TrimmedText):
    """Login da conta SMS.RU."""

    FIELD: ClassVar[str] = "login"


@dataclass(frozen=True)
class Password:
    """Senha da conta SMS.RU.

    Só precisa ser não vazia; espaços são preservados.
    """

    FIELD: ClassVar[str] = "password"

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationError(self.FIELD, "must not be empty")


@dataclass(frozen=True, order=True)
class PartnerId(_TrimmedText):
    FIELD: ClassVar[str] = "partner_id"


@dataclass(frozen=True, order=True)
class SenderId(_TrimmedText):
    """Remetente (`from`); precisa estar habilitado na conta."""

    FIELD: ClassVar[str] = "from"


@dataclass(frozen=True, order=True)
class SmsId(_TrimmedText):
    """Id de mensagem retornado por sms/send."""

    FIELD: ClassVar[str] = "sms_id"


@dataclass(frozen=True, order=True)
class CallCheckId(_TrimmedText):
    """Id de verificação por chamada retornado por callcheck/add."""

    FIELD: ClassVar[str] = "check_id"


@dataclass(frozen=True, order=True)
class StoplistText(_TrimmedText):
    """Nota associada a um número na stoplist."""

    FIELD: ClassVar[str] = "stoplist_text"


@dataclass(frozen=True, order=True)
class RawPhoneNumber(_TrimmedText):
    """Telefone enviado como está (`to`), sem normalização.

    Para normalizar em E.164, use PhoneNumber.parse(...).to_raw().
    """

    FIELD: ClassVar[str] = "to"


@dataclass(frozen=True)
class MessageText:
    """Texto da mensagem (`msg`).

    Não pode ser vazio após strip; o valor original (com espaços) é
    preservado e nunca truncado.
    """

    FIELD: ClassVar[str] = "msg"

    value: str

    def __post_init__(self) -> None:
        _trimmed_non_empty(self.value, self.FIELD)
        try:
            self.value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValidationError(self.FIELD, "must be valid UTF-8 text") from exc

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class PhoneNumber:
    """Telefone validado e normalizado em E.164.

    Igualdade, ordenação e hash usam apenas a forma E.164.
    """

    FIELD: ClassVar[str] = "to"

    e164: str
    raw: str = field(compare=False)

    @classmethod
    def parse(cls, value: str, region: str | None) -> PhoneNumber:
        """Valida e normaliza um telefone.

        Args:
            value: Telefone informado pelo usuário
            region: Código ISO da região (ex: "RU"). None é aceito apenas
                para números com prefixo internacional "+".

        Raises:
            ValidationError: Se vazio, ambíguo sem região ou inválido
        """
        raw = _trimmed_non_empty(value, cls.FIELD)
        try:
            parsed = phonenumbers.parse(raw, region)
        except phonenumbers.NumberParseException as exc:
            raise ValidationError(cls.FIELD, f"invalid phone number: {raw}") from exc
        if not phonenumbers.is_possible_number(parsed):
            raise ValidationError(cls.FIELD, f"invalid phone number: {raw}")
        e164 = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
        return cls(e164=e164, raw=raw)

    def to_raw(self) -> RawPhoneNumber:
        """Converte (só ida) para RawPhoneNumber em E.164."""
        return RawPhoneNumber(self.e164)

    def __str__(self) -> str:
        return self.e164


@dataclass(frozen=True, order=True)
class UnixTimestamp:
    """Horário de envio agendado em segundos Unix (`time`)."""

    FIELD: ClassVar[str] = "time"

    seconds: int

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise ValidationError(self.FIELD, "must be an integer")
        if self.seconds < 0:
            raise ValidationError(self.FIELD, "must not be negative")

    @classmethod
    def from_datetime(cls, moment: datetime) -> UnixTimestamp:
        """Converte datetime com timezone para timestamp.

        Raises:
            ValidationError: Se o datetime não tiver timezone
        """
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise ValidationError(cls.FIELD, "datetime must be timezone-aware")
        return cls(int(moment.timestamp()))


@dataclass(frozen=True, order=True)
class TtlMinutes:
    """Tempo de vida da entrega em minutos (`ttl`), 1..1440."""

    FIELD: ClassVar[str] = "ttl"
    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 1440

    minutes: int

    def __post_init__(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise ValidationError(self.FIELD, "must be an integer")
        if not self.MIN <= self.minutes <= self.MAX:
            raise ValidationError(
                self.FIELD,
                f"out of range: {self.minutes} (expected {self.MIN}..{self.MAX})",
            )


_CALLBACK_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True, order=True)
class CallbackUrl(_TrimmedText):
    """URL absoluta de callback (`url`), esquema http ou https."""

    FIELD: ClassVar[str] = "url"

    def __post_init__(self) -> None:
        super().__post_init__()
        try:
            parts = urlsplit(self.value)
        except ValueError as exc:
            raise ValidationError(self.FIELD, f"invalid url: {self.value}") from exc
        if parts.scheme.lower() not in _CALLBACK_SCHEMES:
            raise ValidationError(self.FIELD, "scheme must be http or https")
        if not parts.hostname:
            raise ValidationError(self.FIELD, "url must be absolute")
