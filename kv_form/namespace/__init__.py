"""Dot-namespaced flattening of nested dictionaries."""

from .collapse import collapse_object, uncollapse_object
from .paths import get_nested, is_plain_mapping, set_nested, split_path


__all__ = ["collapse_object", "get_nested", "is_plain_mapping", "set_nested", "split_path", "uncollapse_object"]
