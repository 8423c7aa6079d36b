"""Cliente SMS.RU: orquestrador e builder."""

from smsru.client.builder import SmsRuClientBuilder
from smsru.client.sms_ru_client import SmsRuClient
from smsru.domain.auth import ApiIdAuth, Auth, LoginPasswordAuth

__all__ = [
    "ApiIdAuth",
    "Auth",
    "LoginPasswordAuth",
    "SmsRuClient",
    "SmsRuClientBuilder",
]
