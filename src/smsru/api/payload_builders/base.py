"""Contrato base dos builders de parâmetros de formulário SMS.RU."""

from __future__ import annotations

from typing import Any, Protocol

FormParams = list[tuple[str, str]]

# Modo de saída estruturada; sempre enviado, nunca deixado ao default remoto
JSON_PARAM: tuple[str, str] = ("json", "1")


class PayloadBuilder(Protocol):
    """Protocolo para builders de parâmetros por operação."""

    def build(self, request: Any) -> FormParams:
        """Constrói os parâmetros de formulário, em ordem determinística."""
        ...


def build_base_params() -> FormParams:
    """Parâmetros comuns a toda operação.

    Operações de conta e listagem enviam só isto.
    """
    return [JSON_PARAM]


def flag(name: str, enabled: bool) -> FormParams:
    """Flag booleana: presente como "1" quando ligada, ausente caso contrário."""
    return [(name, "1")] if enabled else []
