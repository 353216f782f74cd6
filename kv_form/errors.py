"""Exception types raised by kv-form."""

from __future__ import annotations


class KVFormError(ValueError):
    """Base class for all kv-form errors."""


class DecodeError(KVFormError):
    """A token of an encoded string holds a malformed percent-escape."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"cannot percent-decode {token!r}: {reason}")
        self.token = token
        self.reason = reason


class StructuralConflictError(KVFormError):
    """A dotted path collides with a value already stored in the tree."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"structural conflict at {path!r}: {reason}")
        self.path = path
        self.reason = reason
