"""Cliente tipado para a API HTTP do SMS.RU.

Uso:
    from smsru import Auth, SendSms, SmsRuClientBuilder

    client = SmsRuClientBuilder(Auth.api_id("...")).build()
    response = await client.send_sms(SendSms.to_many(["79251234567"], "Olá"))
"""

from smsru.client import SmsRuClient, SmsRuClientBuilder
from smsru.config.settings import SmsRuEndpoints, SmsRuSettings, get_smsru_settings
from smsru.constants import CLIENT_VERSION, Operation
from smsru.domain import *  # noqa: F403
from smsru.domain import __all__ as _domain_all
from smsru.utils.errors import (
    ApiError,
    HttpStatusError,
    ParseError,
    SmsRuError,
    TransportError,
    UnsupportedResponseFormatError,
    ValidationError,
)

__version__ = CLIENT_VERSION

__all__ = [
    *_domain_all,
    "ApiError",
    "HttpStatusError",
    "Operation",
    "ParseError",
    "SmsRuClient",
    "SmsRuClientBuilder",
    "SmsRuEndpoints",
    "SmsRuError",
    "SmsRuSettings",
    "TransportError",
    "UnsupportedResponseFormatError",
    "ValidationError",
    "__version__",
    "get_smsru_settings",
]
