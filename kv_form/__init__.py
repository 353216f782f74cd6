"""kv-form - www-form-encoding and dot-namespace flattening of plain dicts"""

from ._version import version as __version__
from .codec import DEFAULT_FORMAT, KVFormat, from_kv, to_kv
from .errors import DecodeError, KVFormError, StructuralConflictError
from .namespace import collapse_object, get_nested, set_nested, uncollapse_object


__all__ = [
    "DEFAULT_FORMAT",
    "DecodeError",
    "KVFormError",
    "KVFormat",
    "StructuralConflictError",
    "__version__",
    "collapse_object",
    "from_kv",
    "get_nested",
    "set_nested",
    "to_kv",
    "uncollapse_object",
]
