"""Parsing do corpo JSON das respostas SMS.RU."""

from __future__ import annotations

import json
from typing import Any

from smsru.utils.errors import ParseError


def parse_json_object(body: bytes | str) -> dict[str, Any]:
    """Converte o corpo em objeto JSON.

    Números com parte decimal ficam como o texto literal do token
    (`10.50` vira "10.50"), preservando valores monetários sem drift.

    Raises:
        ParseError: Se o corpo não for UTF-8, não for JSON ou não for objeto
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError("response body is not valid UTF-8") from exc

    try:
        data = json.loads(body, parse_float=str)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON response: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(f"expected JSON object, got {type(data).__name__}")
    return data
