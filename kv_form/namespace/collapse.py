"""Flattening of nested dictionaries into dot-namespaced keys and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .paths import SEP, is_plain_mapping, set_nested


if TYPE_CHECKING:
    from collections.abc import Mapping


def collapse_object(
    source: Mapping[Any, Any], target: dict[str, Any] | None = None, prefix: str = ""
) -> dict[str, Any]:
    """Copy and flatten a tree of sub-dicts into namespaced keys on ``target``.

    ``{"foo": {"bar": 1}}`` becomes ``{"foo.bar": 1}``.

    Parameters
    ----------
    source
        Object to collapse.
    target
        Receives the collapsed keys and is returned; a new dict when omitted.
    prefix
        Prefix applied to every copied key.
    """
    if target is None:
        target = {}
    if prefix:
        prefix += SEP
    for key, value in source.items():
        if is_plain_mapping(value):
            _ = collapse_object(value, target, f"{prefix}{key}")
        else:
            target[f"{prefix}{key}"] = value
    return target


def uncollapse_object(source: Mapping[str, Any], target: dict[str, Any] | None = None) -> dict[str, Any]:
    """Inverse of :func:`collapse_object`.

    Copies every key onto ``target``, expanding dot-namespaced keys so that
    ``{"foo.bar": 1}`` becomes ``{"foo": {"bar": 1}}``.

    Raises
    ------
    StructuralConflictError
        When one key is a path prefix of another key holding a leaf, such as
        ``"a"`` and ``"a.b"``.
    """
    if target is None:
        target = {}
    for key, value in source.items():
        _ = set_nested(target, key, value)
    return target
