"""Schemas pydantic do formato wire do SMS.RU.

Campos não modelados são ignorados (extra="ignore"), para tolerar
adições do lado do serviço.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smsru.domain.responses import Status


def _is_int(value: Any) -> bool:
    # bool é subclasse de int
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_code(value: Any) -> int:
    """Código inteiro vindo como número ou string numérica."""
    if _is_int(value):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"expected integer code, got {value!r}")


def coerce_money(value: Any) -> str | None:
    """Valor monetário como texto exato.

    Floats já chegam como texto (parse_float=str); inteiros viram str(int).
    """
    if value is None or isinstance(value, str):
        return value
    if _is_int(value):
        return str(value)
    raise ValueError("expected money field to be JSON string or number")


def coerce_count(value: Any) -> int | None:
    """Contagem não negativa; string não numérica vira None."""
    if value is None:
        return None
    if _is_int(value):
        if value < 0:
            raise ValueError(f"expected non-negative count, got {value}")
        return value
    if isinstance(value, str):
        stripped = value.strip()
        return int(stripped) if stripped.isdigit() else None
    raise ValueError(f"expected count as integer or string, got {value!r}")


def coerce_optional_code(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lstrip("-").isdigit():
            return int(stripped)
        return None
    return coerce_code(value)


def coerce_text(value: Any) -> str | None:
    """Identificadores podem chegar como número no JSON."""
    if _is_int(value):
        return str(value)
    return value


class WireModel(BaseModel):
    """Base dos schemas wire: tolera campos extras e normaliza tipos ambíguos."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("status_code", mode="before", check_fields=False)
    @classmethod
    def _validate_status_code(cls, value: Any) -> int:
        return coerce_code(value)

    @field_validator("balance", "cost", "total_cost", mode="before", check_fields=False)
    @classmethod
    def _validate_money(cls, value: Any) -> str | None:
        return coerce_money(value)

    @field_validator(
        "sms_count", "total_sms", "total_free", "total_limit", "used_today",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def _validate_count(cls, value: Any) -> int | None:
        return coerce_count(value)

    @field_validator("sms_id", "check_id", "call_phone", mode="before", check_fields=False)
    @classmethod
    def _validate_identifier(cls, value: Any) -> str | None:
        return coerce_text(value)


class EnvelopeWire(WireModel):
    """Campos de topo, decodificados antes de qualquer payload."""

    status: Status
    status_code: int
    status_text: str | None = None


class SmsItemWire(EnvelopeWire):
    sms_id: str | None = None


class SmsStatusItemWire(EnvelopeWire):
    cost: str | None = None


class SmsCostItemWire(EnvelopeWire):
    cost: str | None = None
    sms_count: int | None = Field(default=None, alias="sms")


class SendSmsWire(EnvelopeWire):
    balance: str | None = None
    sms: dict[str, SmsItemWire] = Field(default_factory=dict)


class CheckStatusWire(EnvelopeWire):
    balance: str | None = None
    sms: dict[str, SmsStatusItemWire] = Field(default_factory=dict)


class CheckCostWire(EnvelopeWire):
    total_cost: str | None = None
    total_sms: int | None = None
    sms: dict[str, SmsCostItemWire] = Field(default_factory=dict)


class StartCallAuthWire(EnvelopeWire):
    check_id: str | None = None
    call_phone: str | None = None
    call_phone_pretty: str | None = None
    call_phone_html: str | None = None


class CheckCallAuthStatusWire(EnvelopeWire):
    check_status: int | None = None
    check_status_text: str | None = None

    @field_validator("check_status", mode="before")
    @classmethod
    def _validate_check_status(cls, value: Any) -> int | None:
        return coerce_optional_code(value)


class BalanceWire(EnvelopeWire):
    balance: str | None = None


class FreeUsageWire(EnvelopeWire):
    total_free: int | None = None
    used_today: int | None = None


class LimitUsageWire(EnvelopeWire):
    total_limit: int | None = None
    used_today: int | None = None


class SendersWire(EnvelopeWire):
    senders: list[str] = Field(default_factory=list)


class StoplistWire(EnvelopeWire):
    stoplist: dict[str, str] = Field(default_factory=dict)


class CallbacksWire(EnvelopeWire):
    callback: list[str] = Field(default_factory=list)
