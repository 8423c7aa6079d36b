"""Decoders de auth/check e das consultas de conta (my/*)."""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.wire import (
    BalanceWire,
    FreeUsageWire,
    LimitUsageWire,
    SendersWire,
)
from smsru.domain.responses import (
    BalanceResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    StatusOnlyResponse,
)


def decode_status_only(data: dict[str, Any]) -> StatusOnlyResponse:
    envelope = decode_envelope(data)
    return StatusOnlyResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
    )


def decode_balance(data: dict[str, Any]) -> BalanceResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(BalanceWire, data)
    return BalanceResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        balance=wire.balance,
    )


def decode_free_usage(data: dict[str, Any]) -> FreeUsageResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(FreeUsageWire, data)
    return FreeUsageResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        total_free=wire.total_free,
        used_today=wire.used_today,
    )


def decode_limit_usage(data: dict[str, Any]) -> LimitUsageResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(LimitUsageWire, data)
    return LimitUsageResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        total_limit=wire.total_limit,
        used_today=wire.used_today,
    )


def decode_senders(data: dict[str, Any]) -> SendersResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(SendersWire, data)
    return SendersResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        senders=list(wire.senders),
    )
