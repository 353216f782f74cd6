"""Serialization of flat objects to and from URL-encoded KV-pairs (www-form-encoding)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .percent import decode_component, encode_component


if TYPE_CHECKING:
    from collections.abc import Mapping


logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class KVFormat:
    """A pair of delimiters used to join and split encoded KV-pairs."""

    def __init__(self, item_delim: str = "&", kv_delim: str = "=") -> None:
        super().__init__()
        if not item_delim:
            msg = "item_delim must not be empty"
            raise ValueError(msg)
        if not kv_delim:
            msg = "kv_delim must not be empty"
            raise ValueError(msg)

        self.item_delim = item_delim
        self.kv_delim = kv_delim

    def __repr__(self) -> str:
        return f"{type(self).__name__}(item_delim={self.item_delim!r}, kv_delim={self.kv_delim!r})"

    def encode(self, obj: Mapping[Any, Any]) -> str:
        """Serialize ``obj`` into a string of URL-encoded KV-pairs.

        All values end up as strings, so type information is lost. ``None``
        becomes the empty string. Entries with a ``None`` or empty key are
        skipped.
        """
        tokens: list[str] = []
        for key, value in obj.items():
            name = _stringify(key)
            if not name:
                logger.debug("skipping entry with empty key: %r", key)
                continue
            tokens.append(encode_component(name) + self.kv_delim + encode_component(_stringify(value)))
        return self.item_delim.join(tokens)

    def decode(self, string: str) -> dict[str, str]:
        """Restore an object from a string of URL-encoded KV-pairs.

        Every resulting value is a string. A token without ``kv_delim`` maps
        its key to ``""``; tokens with an empty key are skipped.
        """
        result: dict[str, str] = {}
        for token in string.split(self.item_delim):
            key, _, value = token.partition(self.kv_delim)
            if not key:
                if token:
                    logger.debug("skipping token with empty key: %r", token)
                continue
            result[decode_component(key)] = decode_component(value)
        return result


DEFAULT_FORMAT = KVFormat()


def to_kv(obj: Mapping[Any, Any], item_delim: str = "&", kv_delim: str = "=") -> str:
    """Transform ``obj`` into a string of URL-encoded KV-pairs.

    Parameters
    ----------
    obj
        The object to serialize.
    item_delim
        String delimiting each pair.
    kv_delim
        String delimiting key from value.
    """
    return KVFormat(item_delim, kv_delim).encode(obj)


def from_kv(string: str, item_delim: str = "&", kv_delim: str = "=") -> dict[str, str]:
    """Restore an object from a string of URL-encoded KV-pairs.

    Parameters
    ----------
    string
        String of serialized KV-pairs.
    item_delim
        String delimiting each pair.
    kv_delim
        String delimiting key from value.

    Raises
    ------
    DecodeError
        When a key or value holds a malformed percent-escape.
    """
    return KVFormat(item_delim, kv_delim).decode(string)
