"""Builders para callback/add e callback/del."""

from __future__ import annotations

from smsru.api.payload_builders.base import FormParams, build_base_params
from smsru.domain.requests import AddCallback, RemoveCallback
from smsru.domain.values import CallbackUrl


class CallbackPayloadBuilder:
    """Mesmo formato para registrar e remover: só `url`."""

    def build(self, request: AddCallback | RemoveCallback) -> FormParams:
        params = build_base_params()
        params.append((CallbackUrl.FIELD, request.url.value))
        return params
