"""Builders para stoplist/add e stoplist/del."""

from __future__ import annotations

from smsru.api.payload_builders.base import FormParams, build_base_params
from smsru.domain.requests import AddStoplistEntry, RemoveStoplistEntry
from smsru.domain.values import StoplistText

STOPLIST_PHONE_FIELD = "stoplist_phone"


class AddStoplistEntryPayloadBuilder:
    def build(self, request: AddStoplistEntry) -> FormParams:
        params = build_base_params()
        params.append((STOPLIST_PHONE_FIELD, request.phone.value))
        params.append((StoplistText.FIELD, request.text.value))
        return params


class RemoveStoplistEntryPayloadBuilder:
    def build(self, request: RemoveStoplistEntry) -> FormParams:
        params = build_base_params()
        params.append((STOPLIST_PHONE_FIELD, request.phone.value))
        return params
