"""Builders para autenticação por chamada (callcheck/add e callcheck/status)."""

from __future__ import annotations

from smsru.api.payload_builders.base import FormParams, build_base_params
from smsru.domain.requests import CheckCallAuthStatus, StartCallAuth, ensure_json_format
from smsru.domain.values import CallCheckId


class StartCallAuthPayloadBuilder:
    def build(self, request: StartCallAuth) -> FormParams:
        ensure_json_format(request.options.response_format)
        params = build_base_params()
        params.append(("phone", request.phone.value))
        return params


class CheckCallAuthStatusPayloadBuilder:
    def build(self, request: CheckCallAuthStatus) -> FormParams:
        ensure_json_format(request.options.response_format)
        params = build_base_params()
        params.append((CallCheckId.FIELD, request.check_id.value))
        return params
