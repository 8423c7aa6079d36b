"""Decoder de stoplist/get."""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.wire import StoplistWire
from smsru.domain.responses import StoplistResponse
from smsru.domain.values import RawPhoneNumber
from smsru.utils.errors import ParseError, ValidationError


def decode_stoplist(data: dict[str, Any]) -> StoplistResponse:
    """Decodifica stoplist/get; chave de telefone inválida vira ParseError."""
    envelope = decode_envelope(data)
    wire = validate_wire(StoplistWire, data)

    stoplist: dict[RawPhoneNumber, str] = {}
    for key, note in wire.stoplist.items():
        try:
            stoplist[RawPhoneNumber(key)] = note
        except ValidationError as exc:
            raise ParseError(f"response contains invalid stoplist phone key: {key!r}") from exc

    return StoplistResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        stoplist=stoplist,
    )
