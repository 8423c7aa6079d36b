"""Decoders de sms/send e sms/cost."""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.keys import build_lookup, match_unique_key
from smsru.api.normalizers.wire import CheckCostWire, SendSmsWire
from smsru.domain.requests import CheckCost, SendSms
from smsru.domain.responses import (
    CheckCostResponse,
    SendSmsResponse,
    SmsCostResult,
    SmsResult,
)
from smsru.domain.status_codes import StatusCode
from smsru.domain.values import RawPhoneNumber, SmsId


def decode_send_sms(data: dict[str, Any], request: SendSms) -> SendSmsResponse:
    """Decodifica sms/send item a item.

    Item com status ERROR fica dentro do mapa; não afeta o resultado de topo.
    """
    envelope = decode_envelope(data)
    wire = validate_wire(SendSmsWire, data)
    lookup = build_lookup(request.recipients)

    sms: dict[RawPhoneNumber, SmsResult] = {}
    for key, item in wire.sms.items():
        phone = match_unique_key(lookup, key, RawPhoneNumber, sms)
        sms_id = item.sms_id.strip() if item.sms_id else ""
        sms[phone] = SmsResult(
            status=item.status,
            status_code=StatusCode(item.status_code),
            status_text=item.status_text,
            sms_id=SmsId(sms_id) if sms_id else None,
        )

    return SendSmsResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        balance=wire.balance,
        sms=sms,
    )


def decode_check_cost(data: dict[str, Any], request: CheckCost) -> CheckCostResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(CheckCostWire, data)
    lookup = build_lookup(request.recipients)

    sms: dict[RawPhoneNumber, SmsCostResult] = {}
    for key, item in wire.sms.items():
        sms[match_unique_key(lookup, key, RawPhoneNumber, sms)] = SmsCostResult(
            status=item.status,
            status_code=StatusCode(item.status_code),
            status_text=item.status_text,
            cost=item.cost,
            sms=item.sms_count,
        )

    return CheckCostResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        total_cost=wire.total_cost,
        total_sms=wire.total_sms,
        sms=sms,
    )
