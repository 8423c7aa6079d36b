"""Factory para obter o builder correto por tipo de request."""

from __future__ import annotations

from typing import Any

from smsru.api.payload_builders.base import FormParams, PayloadBuilder
from smsru.api.payload_builders.call_auth import (
    CheckCallAuthStatusPayloadBuilder,
    StartCallAuthPayloadBuilder,
)
from smsru.api.payload_builders.callbacks import CallbackPayloadBuilder
from smsru.api.payload_builders.messages import (
    CheckCostPayloadBuilder,
    SendSmsPayloadBuilder,
)
from smsru.api.payload_builders.status import CheckStatusPayloadBuilder
from smsru.api.payload_builders.stoplist import (
    AddStoplistEntryPayloadBuilder,
    RemoveStoplistEntryPayloadBuilder,
)
from smsru.domain.requests import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckStatus,
    RemoveCallback,
    RemoveStoplistEntry,
    SendSms,
    StartCallAuth,
)

_CALLBACK_BUILDER = CallbackPayloadBuilder()

# Mapeamento de tipo de request para builder
_BUILDERS: dict[type, PayloadBuilder] = {
    SendSms: SendSmsPayloadBuilder(),
    CheckCost: CheckCostPayloadBuilder(),
    CheckStatus: CheckStatusPayloadBuilder(),
    StartCallAuth: StartCallAuthPayloadBuilder(),
    CheckCallAuthStatus: CheckCallAuthStatusPayloadBuilder(),
    AddStoplistEntry: AddStoplistEntryPayloadBuilder(),
    RemoveStoplistEntry: RemoveStoplistEntryPayloadBuilder(),
    AddCallback: _CALLBACK_BUILDER,
    RemoveCallback: _CALLBACK_BUILDER,
}


def get_payload_builder(request_type: type) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de request.

    Args:
        request_type: Classe do request

    Returns:
        Builder apropriado ou None se não suportado
    """
    return _BUILDERS.get(request_type)


def build_form_params(request: Any) -> FormParams:
    """Constrói os parâmetros de formulário de um request.

    Credenciais não entram aqui; o cliente as antepõe.

    Raises:
        ValueError: Se o tipo de request não for suportado
        ValidationError: Se o request pedir formato de resposta não suportado
    """
    builder = get_payload_builder(type(request))
    if builder is None:
        raise ValueError(f"Tipo de request não suportado: {type(request).__name__}")
    return builder.build(request)
