"""Domínio SMS.RU: tipos de valor, códigos de status, requests e respostas.

Camada pura: sem I/O, sem logging.
"""

from smsru.domain.auth import ApiIdAuth, Auth, LoginPasswordAuth
from smsru.domain.requests import (
    CHECK_COST_MAX_RECIPIENTS,
    CHECK_STATUS_MAX_SMS_IDS,
    SEND_SMS_MAX_RECIPIENTS,
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCallAuthStatusOptions,
    CheckCost,
    CheckCostOptions,
    CheckStatus,
    PerRecipient,
    RemoveCallback,
    RemoveStoplistEntry,
    ResponseFormat,
    SendOptions,
    SendSms,
    SmsShape,
    StartCallAuth,
    StartCallAuthOptions,
    ToMany,
)
from smsru.domain.responses import (
    BalanceResponse,
    CallbacksResponse,
    CheckCallAuthStatusResponse,
    CheckCostResponse,
    CheckStatusResponse,
    FreeUsageResponse,
    LimitUsageResponse,
    SendersResponse,
    SendSmsResponse,
    SmsCostResult,
    SmsResult,
    SmsStatusResult,
    StartCallAuthResponse,
    Status,
    StatusOnlyResponse,
    StoplistResponse,
)
from smsru.domain.status_codes import (
    CallCheckStatusCode,
    KnownCallCheckStatusCode,
    KnownStatusCode,
    StatusCode,
    is_retryable,
    known_kind,
)
from smsru.domain.values import (
    ApiId,
    CallbackUrl,
    CallCheckId,
    Login,
    MessageText,
    PartnerId,
    Password,
    PhoneNumber,
    RawPhoneNumber,
    SenderId,
    SmsId,
    StoplistText,
    TtlMinutes,
    UnixTimestamp,
)

__all__ = [
    "CHECK_COST_MAX_RECIPIENTS",
    "CHECK_STATUS_MAX_SMS_IDS",
    "SEND_SMS_MAX_RECIPIENTS",
    "AddCallback",
    "AddStoplistEntry",
    "ApiIdAuth",
    "Auth",
    "ApiId",
    "BalanceResponse",
    "CallCheckId",
    "CallCheckStatusCode",
    "CallbackUrl",
    "CallbacksResponse",
    "CheckCallAuthStatus",
    "CheckCallAuthStatusOptions",
    "CheckCallAuthStatusResponse",
    "CheckCost",
    "CheckCostOptions",
    "CheckCostResponse",
    "CheckStatus",
    "CheckStatusResponse",
    "FreeUsageResponse",
    "KnownCallCheckStatusCode",
    "KnownStatusCode",
    "LimitUsageResponse",
    "Login",
    "LoginPasswordAuth",
    "MessageText",
    "PartnerId",
    "Password",
    "PerRecipient",
    "PhoneNumber",
    "RawPhoneNumber",
    "RemoveCallback",
    "RemoveStoplistEntry",
    "ResponseFormat",
    "SendOptions",
    "SendSms",
    "SendSmsResponse",
    "SenderId",
    "SendersResponse",
    "SmsCostResult",
    "SmsId",
    "SmsResult",
    "SmsShape",
    "SmsStatusResult",
    "StartCallAuth",
    "StartCallAuthOptions",
    "StartCallAuthResponse",
    "Status",
    "StatusCode",
    "StatusOnlyResponse",
    "StoplistResponse",
    "StoplistText",
    "ToMany",
    "TtlMinutes",
    "UnixTimestamp",
    "is_retryable",
    "known_kind",
]
