"""KV-pair (www-form-encoding) codec."""

from .kv import DEFAULT_FORMAT, KVFormat, from_kv, to_kv
from .percent import decode_component, encode_component


__all__ = ["DEFAULT_FORMAT", "KVFormat", "decode_component", "encode_component", "from_kv", "to_kv"]
