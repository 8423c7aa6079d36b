"""Builder para sms/status."""

from __future__ import annotations

from smsru.api.payload_builders.base import FormParams, build_base_params
from smsru.domain.requests import CheckStatus
from smsru.domain.values import SmsId


class CheckStatusPayloadBuilder:
    """Ids são enviados separados por vírgula, na ordem do request."""

    def build(self, request: CheckStatus) -> FormParams:
        params = build_base_params()
        params.append((SmsId.FIELD, ",".join(sms_id.value for sms_id in request.sms_ids)))
        return params
