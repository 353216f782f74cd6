"""Percent-encoding of single key/value components."""

from __future__ import annotations

import re
from urllib.parse import quote, unquote

from kv_form.errors import DecodeError


# Characters left unescaped besides ASCII letters, digits and ``-_.~``.
_COMPONENT_SAFE = "!*'()"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_component(text: str) -> str:
    """Percent-encode ``text`` so that no delimiter character survives unescaped."""
    return quote(text, safe=_COMPONENT_SAFE)


def decode_component(text: str) -> str:
    """Percent-decode ``text`` exactly once.

    ``+`` is kept literally. Raises :class:`DecodeError` when ``text`` holds a
    ``%`` that does not start a two digit hex escape, or when the escaped bytes
    are not valid UTF-8.
    """
    if "%" not in text:
        return text
    if _BAD_ESCAPE.search(text):
        raise DecodeError(text, "incomplete escape sequence")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(text, "escaped bytes are not valid UTF-8") from exc
