"""Decoders de callcheck/add e callcheck/status."""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.wire import CheckCallAuthStatusWire, StartCallAuthWire
from smsru.domain.responses import CheckCallAuthStatusResponse, StartCallAuthResponse
from smsru.domain.status_codes import CallCheckStatusCode
from smsru.domain.values import CallCheckId, RawPhoneNumber
from smsru.utils.errors import ParseError, ValidationError


def decode_start_call_auth(data: dict[str, Any]) -> StartCallAuthResponse:
    """Decodifica callcheck/add.

    Raises:
        ParseError: Se check_id ou call_phone vierem vazios
    """
    envelope = decode_envelope(data)
    wire = validate_wire(StartCallAuthWire, data)

    try:
        check_id = CallCheckId(wire.check_id) if wire.check_id is not None else None
        call_phone = RawPhoneNumber(wire.call_phone) if wire.call_phone is not None else None
    except ValidationError as exc:
        raise ParseError(f"response contains invalid {exc.field}") from exc

    return StartCallAuthResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        check_id=check_id,
        call_phone=call_phone,
        call_phone_pretty=wire.call_phone_pretty,
        call_phone_html=wire.call_phone_html,
    )


def decode_check_call_auth_status(data: dict[str, Any]) -> CheckCallAuthStatusResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(CheckCallAuthStatusWire, data)
    check_status = (
        CallCheckStatusCode(wire.check_status) if wire.check_status is not None else None
    )
    return CheckCallAuthStatusResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        check_status=check_status,
        check_status_text=wire.check_status_text,
    )
