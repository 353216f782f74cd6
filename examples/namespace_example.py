"""Minimal example for collapsing and uncollapsing nested dicts."""

from kv_form import StructuralConflictError, collapse_object, to_kv, uncollapse_object


def main() -> None:
    """Flatten a nested config, send it as form data, and rebuild it."""
    config = {"db": {"host": "localhost", "port": 5432}, "debug": True}
    flat = collapse_object(config)
    print("collapsed:", flat)
    print("as form data:", to_kv(flat))
    print("uncollapsed:", uncollapse_object(flat))

    try:
        _ = uncollapse_object({"db": "sqlite", "db.host": "localhost"})
    except StructuralConflictError as exc:
        print("error:", exc)


if __name__ == "__main__":
    main()
