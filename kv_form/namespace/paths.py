"""Dotted path helpers for nested dictionaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeGuard

from kv_form.errors import StructuralConflictError


if TYPE_CHECKING:
    from collections.abc import Mapping


logger = logging.getLogger(__name__)

SEP = "."


def is_plain_mapping(value: Any) -> TypeGuard[dict[Any, Any]]:
    """Return True for bare data dictionaries.

    Lists, tuples, ``None``, scalars and arbitrary class instances are
    treated as leaf values.
    """
    return isinstance(value, dict)


def split_path(path: str, sep: str = SEP) -> tuple[str, ...]:
    """Split a dotted path into its segments."""
    if not sep:
        msg = "sep must not be empty"
        raise ValueError(msg)
    return tuple(path.split(sep))


def get_nested(obj: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return the value at dotted ``path`` within ``obj``, or ``default`` when absent."""
    current: Any = obj
    for segment in split_path(path):
        if not is_plain_mapping(current) or segment not in current:
            return default
        current = current[segment]
    return current


def set_nested(obj: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Set ``value`` at dotted ``path`` within ``obj``, creating intermediate dicts.

    Existing values are never silently replaced by a different kind of value:
    walking through a leaf, or replacing a dict with the final value, raises
    :class:`StructuralConflictError`. Returns ``obj``.
    """
    *parents, last = split_path(path)
    current = obj
    for depth, segment in enumerate(parents):
        child = current.get(segment)
        if child is None and segment not in current:
            child = current[segment] = {}
        elif not is_plain_mapping(child):
            where = SEP.join(parents[: depth + 1])
            logger.debug("refusing to descend through leaf %r while setting %r", where, path)
            msg = f"{where!r} holds a leaf value"
            raise StructuralConflictError(path, msg)
        current = child

    if is_plain_mapping(current.get(last)):
        logger.debug("refusing to replace mapping at %r", path)
        msg = "a nested mapping is already stored there"
        raise StructuralConflictError(path, msg)
    current[last] = value
    return obj
