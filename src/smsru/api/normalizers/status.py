"""Decoder de sms/status."""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.keys import build_lookup, match_unique_key
from smsru.api.normalizers.wire import CheckStatusWire
from smsru.domain.requests import CheckStatus
from smsru.domain.responses import CheckStatusResponse, SmsStatusResult
from smsru.domain.status_codes import StatusCode
from smsru.domain.values import SmsId


def decode_check_status(data: dict[str, Any], request: CheckStatus) -> CheckStatusResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(CheckStatusWire, data)
    lookup = build_lookup(request.sms_ids)

    sms: dict[SmsId, SmsStatusResult] = {}
    for key, item in wire.sms.items():
        sms[match_unique_key(lookup, key, SmsId, sms)] = SmsStatusResult(
            status=item.status,
            status_code=StatusCode(item.status_code),
            status_text=item.status_text,
            cost=item.cost,
        )

    return CheckStatusResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        balance=wire.balance,
        sms=sms,
    )
