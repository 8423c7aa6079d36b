"""Casamento das chaves de lote da resposta com os valores do request.

O SMS.RU pode devolver o telefone com ou sem "+" e com espaços nas
pontas. Chaves que não casam com nada são preservadas como valor novo;
duas chaves que casam com o mesmo valor são ambíguas e rejeitadas.
"""

from __future__ import annotations

from collections.abc import Callable, Container, Iterable
from typing import TypeVar

from smsru.domain.values import RawPhoneNumber, SmsId
from smsru.utils.errors import ParseError, ValidationError

_K = TypeVar("_K", RawPhoneNumber, SmsId)


def build_lookup(values: Iterable[_K]) -> dict[str, _K]:
    return {value.value: value for value in values}


def _candidates(key: str) -> list[str]:
    trimmed = key.strip()
    alternate = trimmed[1:] if trimmed.startswith("+") else f"+{trimmed}"
    return [trimmed, key, alternate]


def match_key(lookup: dict[str, _K], key: str, factory: Callable[[str], _K]) -> _K:
    """Resolve a chave da resposta para o valor do request.

    Raises:
        ParseError: Se a chave não casar e não for um valor válido
    """
    for candidate in _candidates(key):
        found = lookup.get(candidate)
        if found is not None:
            return found
    try:
        return factory(key)
    except ValidationError as exc:
        raise ParseError(f"response contains invalid key: {key!r}") from exc


def match_unique_key(
    lookup: dict[str, _K],
    key: str,
    factory: Callable[[str], _K],
    taken: Container[_K],
) -> _K:
    """Como match_key, mas recusa chave que resolve para valor já usado.

    Raises:
        ParseError: Se duas chaves da resposta resolverem para o mesmo valor
    """
    resolved = match_key(lookup, key, factory)
    if resolved in taken:
        raise ParseError(
            f"response contains ambiguous key: {key!r} duplicates {resolved.value!r}"
        )
    return resolved
