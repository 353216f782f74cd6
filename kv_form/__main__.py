"""Interface for ``python -m kv_form``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, Any

from ._version import version
from .codec import KVFormat
from .namespace import collapse_object, uncollapse_object


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _read_input(value: str | None) -> str:
    if value is None or value == "-":
        return sys.stdin.read().rstrip("\n")
    return value


def _read_object(value: str | None) -> dict[str, Any]:
    data = json.loads(_read_input(value))
    if not isinstance(data, dict):
        msg = "input must be a JSON object"
        raise TypeError(msg)
    return data


def _encode(args: Namespace) -> str:
    return KVFormat(args.item_delim, args.kv_delim).encode(_read_object(args.input))


def _decode(args: Namespace) -> str:
    return json.dumps(KVFormat(args.item_delim, args.kv_delim).decode(_read_input(args.input)))


def _collapse(args: Namespace) -> str:
    return json.dumps(collapse_object(_read_object(args.input), prefix=args.prefix))


def _uncollapse(args: Namespace) -> str:
    return json.dumps(uncollapse_object(_read_object(args.input)))


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kv-form")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--debug", action="store_true", help="log debug messages to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="encode a JSON object as KV-pairs")
    encode.set_defaults(handler=_encode)
    decode = commands.add_parser("decode", help="decode KV-pairs into a JSON object")
    decode.set_defaults(handler=_decode)
    for sub in (encode, decode):
        _ = sub.add_argument("--item-delim", default="&", help="string delimiting each pair")
        _ = sub.add_argument("--kv-delim", default="=", help="string delimiting key from value")

    collapse = commands.add_parser("collapse", help="flatten a nested JSON object into dotted keys")
    _ = collapse.add_argument("--prefix", default="", help="prefix applied to every key")
    collapse.set_defaults(handler=_collapse)
    uncollapse = commands.add_parser("uncollapse", help="expand dotted keys into a nested JSON object")
    uncollapse.set_defaults(handler=_uncollapse)

    for sub in (encode, decode, collapse, uncollapse):
        _ = sub.add_argument("input", nargs="?", help="input text; read from stdin when omitted or '-'")
    return parser


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    namespace = parser.parse_args(args)
    if namespace.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("running %s", namespace.command)

    try:
        output = namespace.handler(namespace)
    except (ValueError, TypeError) as exc:
        parser.error(str(exc))
    print(output)


if __name__ == "__main__":
    main()
