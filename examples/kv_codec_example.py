"""Minimal example for encoding and decoding www-form KV-pairs."""

from kv_form import DecodeError, KVFormat, from_kv, to_kv


def main() -> None:
    """Run a basic encode/decode flow with default and custom delimiters."""
    encoded = to_kv({"name": "Ada Lovelace", "query": "a&b=c", "year": 1843})
    print("encoded:", encoded)
    print("decoded:", from_kv(encoded))

    header_format = KVFormat(item_delim="; ", kv_delim="=")
    print(f"{header_format=}")
    print("cookie:", header_format.encode({"session": "abc 123", "theme": "dark"}))

    try:
        _ = from_kv("broken=%zz")
    except DecodeError as exc:
        print("error:", exc)


if __name__ == "__main__":
    main()
