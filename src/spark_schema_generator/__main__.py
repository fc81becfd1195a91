"""Module entry point for `python -m spark_schema_generator`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
