"""Decoder de callback/add, callback/del e callback/get.

As três operações devolvem a lista atual de URLs registradas.
"""

from __future__ import annotations

from typing import Any

from smsru.api.normalizers.envelope import decode_envelope, validate_wire
from smsru.api.normalizers.wire import CallbacksWire
from smsru.domain.responses import CallbacksResponse
from smsru.domain.values import CallbackUrl
from smsru.utils.errors import ParseError, ValidationError


def decode_callbacks(data: dict[str, Any]) -> CallbacksResponse:
    envelope = decode_envelope(data)
    wire = validate_wire(CallbacksWire, data)

    callback: list[CallbackUrl] = []
    for url in wire.callback:
        try:
            callback.append(CallbackUrl(url))
        except ValidationError as exc:
            raise ParseError(f"response contains invalid callback url: {url!r}") from exc

    return CallbacksResponse(
        status=envelope.status,
        status_code=envelope.status_code,
        status_text=envelope.status_text,
        callback=callback,
    )
