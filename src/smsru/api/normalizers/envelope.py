"""Decodificação do envelope de topo (status, status_code, status_text).

O envelope é decodificado primeiro e decide o resto: com status ERROR,
o payload da operação não precisa ser válido.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from smsru.api.normalizers.wire import EnvelopeWire
from smsru.domain.responses import Status
from smsru.domain.status_codes import StatusCode
from smsru.utils.errors import ParseError

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True)
class Envelope:
    status: Status
    status_code: StatusCode
    status_text: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status is Status.OK


def validate_wire(model: type[_M], data: dict[str, Any]) -> _M:
    """Valida `data` contra um schema wire, convertendo falhas em ParseError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ParseError(
            f"unexpected {model.__name__} shape: {exc.error_count()} validation error(s)"
        ) from exc


def decode_envelope(data: dict[str, Any]) -> Envelope:
    """Decodifica os campos de topo.

    Raises:
        ParseError: Se status ou status_code estiverem ausentes ou inválidos
    """
    wire = validate_wire(EnvelopeWire, data)
    return Envelope(
        status=wire.status,
        status_code=StatusCode(wire.status_code),
        status_text=wire.status_text,
    )

