"""Settings do cliente SMS.RU."""

from smsru.config.settings.smsru import (
    SmsRuEndpoints,
    SmsRuSettings,
    get_smsru_settings,
)

__all__ = [
    "SmsRuEndpoints",
    "SmsRuSettings",
    "get_smsru_settings",
]
