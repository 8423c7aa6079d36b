"""Decoders das respostas SMS.RU (JSON → modelos de resposta).

Fluxo: parse_json_object → decode_envelope → decoder da operação.
"""

from smsru.api.normalizers.account import (
    decode_balance,
    decode_free_usage,
    decode_limit_usage,
    decode_senders,
    decode_status_only,
)
from smsru.api.normalizers.call_auth import (
    decode_check_call_auth_status,
    decode_start_call_auth,
)
from smsru.api.normalizers.callbacks import decode_callbacks
from smsru.api.normalizers.envelope import Envelope, decode_envelope
from smsru.api.normalizers.json_body import parse_json_object
from smsru.api.normalizers.messages import decode_check_cost, decode_send_sms
from smsru.api.normalizers.status import decode_check_status
from smsru.api.normalizers.stoplist import decode_stoplist

__all__ = [
    "Envelope",
    "decode_balance",
    "decode_callbacks",
    "decode_check_call_auth_status",
    "decode_check_cost",
    "decode_check_status",
    "decode_envelope",
    "decode_free_usage",
    "decode_limit_usage",
    "decode_send_sms",
    "decode_senders",
    "decode_start_call_auth",
    "decode_status_only",
    "decode_stoplist",
    "parse_json_object",
]
