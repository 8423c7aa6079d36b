"""Builders para sms/send e sms/cost."""

from __future__ import annotations

from smsru.api.payload_builders.base import FormParams, build_base_params, flag
from smsru.domain.requests import (
    CheckCost,
    CheckCostOptions,
    PerRecipient,
    SendOptions,
    SendSms,
    SmsShape,
    ToMany,
    ensure_json_format,
)
from smsru.domain.values import MessageText, PartnerId, RawPhoneNumber, SenderId


def build_shape_params(shape: SmsShape) -> FormParams:
    """Codifica destinatários e texto.

    ToMany vira `to=a,b` + `msg`; PerRecipient vira `to[<telefone>]=<texto>`
    por item, sem `msg`.
    """
    if isinstance(shape, ToMany):
        return [
            (RawPhoneNumber.FIELD, ",".join(phone.value for phone in shape.recipients)),
            (MessageText.FIELD, shape.message.value),
        ]
    if isinstance(shape, PerRecipient):
        return [
            (f"{RawPhoneNumber.FIELD}[{phone.value}]", text.value)
            for phone, text in shape.messages
        ]
    raise TypeError(f"Formato de envio não suportado: {type(shape).__name__}")


def build_send_options_params(options: SendOptions) -> FormParams:
    params: FormParams = []
    if options.sender is not None:
        params.append((SenderId.FIELD, options.sender.value))
    if options.ip is not None:
        params.append(("ip", str(options.ip)))
    # daytime anula o agendamento
    scheduled = options.effective_time
    if scheduled is not None:
        params.append((scheduled.FIELD, str(scheduled.seconds)))
    if options.ttl is not None:
        params.append((options.ttl.FIELD, str(options.ttl.minutes)))
    params.extend(flag("daytime", options.daytime))
    params.extend(flag("translit", options.translit))
    params.extend(flag("test", options.test))
    if options.partner_id is not None:
        params.append((PartnerId.FIELD, options.partner_id.value))
    return params


def build_cost_options_params(options: CheckCostOptions) -> FormParams:
    params: FormParams = []
    if options.sender is not None:
        params.append((SenderId.FIELD, options.sender.value))
    params.extend(flag("translit", options.translit))
    return params


class SendSmsPayloadBuilder:
    """Builder para sms/send."""

    def build(self, request: SendSms) -> FormParams:
        """Constrói parâmetros de envio.

        Args:
            request: Request de envio

        Returns:
            `json=1`, destinatários/texto e opções, nesta ordem

        Raises:
            UnsupportedResponseFormatError: Se as opções pedirem texto puro
        """
        ensure_json_format(request.options.response_format)
        params = build_base_params()
        params.extend(build_shape_params(request.shape))
        params.extend(build_send_options_params(request.options))
        return params


class CheckCostPayloadBuilder:
    """Builder para sms/cost."""

    def build(self, request: CheckCost) -> FormParams:
        ensure_json_format(request.options.response_format)
        params = build_base_params()
        params.extend(build_shape_params(request.shape))
        params.extend(build_cost_options_params(request.options))
        return params
