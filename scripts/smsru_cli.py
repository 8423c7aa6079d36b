#!/usr/bin/env python3
"""Linha de comando para a API SMS.RU.

Credenciais vêm do ambiente (SMSRU_API_ID, ou SMSRU_LOGIN + SMSRU_PASSWORD).

Uso:
    python scripts/smsru_cli.py balance
    python scripts/smsru_cli.py send --to 79251234567 --text "Olá" --test
    python scripts/smsru_cli.py send --message 79251234567="Olá" --message 79257654321="Oi"
    python scripts/smsru_cli.py call-auth --phone 79251234567
    python scripts/smsru_cli.py call-auth --check-id 201737-542
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import sys
from enum import Enum
from typing import Any

from smsru import (
    AddCallback,
    AddStoplistEntry,
    CheckCallAuthStatus,
    CheckCost,
    CheckCostOptions,
    CheckStatus,
    RemoveCallback,
    RemoveStoplistEntry,
    SenderId,
    SendOptions,
    SendSms,
    SmsRuClient,
    SmsRuClientBuilder,
    SmsRuError,
    StartCallAuth,
    TtlMinutes,
    UnixTimestamp,
    get_smsru_settings,
)
from smsru.config.logging import configure_logging


def to_jsonable(value: Any) -> Any:
    """Converte modelos de resposta em estruturas serializáveis."""
    if hasattr(value, "FIELD"):
        return str(value)
    if hasattr(value, "code") and hasattr(value, "known_kind"):
        return int(value)
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: to_jsonable(getattr(value, item.name))
            for item in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def _parse_messages(pairs: list[str]) -> list[tuple[str, str]]:
    messages: list[tuple[str, str]] = []
    for pair in pairs:
        phone, sep, text = pair.partition("=")
        if not sep:
            raise SystemExit(f"--message espera TELEFONE=TEXTO, recebido: {pair!r}")
        messages.append((phone, text))
    return messages


def _send_options(args: argparse.Namespace) -> SendOptions:
    return SendOptions(
        sender=SenderId(args.sender) if args.sender else None,
        time=UnixTimestamp(args.time) if args.time is not None else None,
        ttl=TtlMinutes(args.ttl) if args.ttl is not None else None,
        daytime=args.daytime,
        translit=args.translit,
        test=args.test,
    )


def _add_shape_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--to", action="append", default=[], help="Destinatário (repetível)")
    parser.add_argument("--text", help="Texto comum a todos os destinatários")
    parser.add_argument(
        "--message",
        action="append",
        default=[],
        help="TELEFONE=TEXTO, texto individual por destinatário (repetível)",
    )
    parser.add_argument("--from", dest="sender", help="Remetente habilitado na conta")
    parser.add_argument("--translit", action="store_true", help="Translitera para latino")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--log-level", default="WARNING", help="Nível de log (padrão WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    send = sub.add_parser("send", help="Envia SMS")
    _add_shape_args(send)
    send.add_argument("--time", type=int, help="Envio agendado (timestamp Unix)")
    send.add_argument("--ttl", type=int, help="Tempo de vida em minutos (1..1440)")
    send.add_argument("--daytime", action="store_true", help="Entrega só de dia (anula --time)")
    send.add_argument("--test", action="store_true", help="Simula sem enviar")

    cost = sub.add_parser("cost", help="Consulta custo de envio")
    _add_shape_args(cost)

    status = sub.add_parser("status", help="Consulta status de entrega")
    status.add_argument("sms_ids", nargs="+", help="Ids retornados por send")

    call_auth = sub.add_parser("call-auth", help="Autenticação por chamada")
    group = call_auth.add_mutually_exclusive_group(required=True)
    group.add_argument("--phone", help="Inicia verificação para o telefone")
    group.add_argument("--check-id", help="Consulta andamento da verificação")

    for name, help_text in (
        ("check-auth", "Verifica a credencial"),
        ("balance", "Saldo da conta"),
        ("free", "Envios gratuitos do dia"),
        ("limit", "Limite diário de envios"),
        ("senders", "Remetentes habilitados"),
        ("stoplist", "Lista a stoplist"),
        ("callbacks", "Lista URLs de callback"),
    ):
        sub.add_parser(name, help=help_text)

    stoplist_add = sub.add_parser("stoplist-add", help="Adiciona número à stoplist")
    stoplist_add.add_argument("phone")
    stoplist_add.add_argument("text")

    stoplist_del = sub.add_parser("stoplist-del", help="Remove número da stoplist")
    stoplist_del.add_argument("phone")

    callback_add = sub.add_parser("callback-add", help="Registra URL de callback")
    callback_add.add_argument("url")

    callback_del = sub.add_parser("callback-del", help="Remove URL de callback")
    callback_del.add_argument("url")

    return parser.parse_args(argv)


async def run(client: SmsRuClient, args: argparse.Namespace) -> Any:
    """Executa o subcomando e devolve o modelo de resposta."""
    command = args.command
    if command == "send":
        options = _send_options(args)
        if args.message:
            messages = _parse_messages(args.message)
            return await client.send_sms(SendSms.per_recipient(messages, options))
        return await client.send_sms(SendSms.to_many(args.to, args.text or "", options))
    if command == "cost":
        options = CheckCostOptions(
            sender=SenderId(args.sender) if args.sender else None,
            translit=args.translit,
        )
        if args.message:
            return await client.check_cost(
                CheckCost.per_recipient(_parse_messages(args.message), options)
            )
        return await client.check_cost(CheckCost.to_many(args.to, args.text or "", options))
    if command == "status":
        return await client.check_status(CheckStatus(tuple(args.sms_ids)))
    if command == "call-auth":
        if args.check_id:
            return await client.check_call_auth_status(CheckCallAuthStatus(args.check_id))
        return await client.start_call_auth(StartCallAuth(args.phone))
    if command == "stoplist-add":
        return await client.add_stoplist_entry(AddStoplistEntry(args.phone, args.text))
    if command == "stoplist-del":
        return await client.remove_stoplist_entry(RemoveStoplistEntry(args.phone))
    if command == "callback-add":
        return await client.add_callback(AddCallback(args.url))
    if command == "callback-del":
        return await client.remove_callback(RemoveCallback(args.url))

    no_arg_commands = {
        "check-auth": client.check_auth,
        "balance": client.get_balance,
        "free": client.get_free_usage,
        "limit": client.get_limit_usage,
        "senders": client.get_senders,
        "stoplist": client.get_stoplist,
        "callbacks": client.get_callbacks,
    }
    return await no_arg_commands[command]()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, service_name="smsru_cli")

    settings = get_smsru_settings()
    errors = settings.validate()
    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return 2

    client = SmsRuClientBuilder.from_settings(settings).build()
    try:
        response = asyncio.run(run(client, args))
    except SmsRuError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(response), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
