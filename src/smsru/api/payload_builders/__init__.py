"""Builders de parâmetros de formulário para a API SMS.RU.

Cada operação tem um builder com build(request) -> list[tuple[str, str]],
em ordem determinística: `json=1`, parâmetros da operação, opções.
"""

from smsru.api.payload_builders.base import (
    JSON_PARAM,
    FormParams,
    PayloadBuilder,
    build_base_params,
)
from smsru.api.payload_builders.factory import (
    build_form_params,
    get_payload_builder,
)

__all__ = [
    "JSON_PARAM",
    "FormParams",
    "PayloadBuilder",
    "build_base_params",
    "build_form_params",
    "get_payload_builder",
]
