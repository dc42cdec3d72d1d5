"""Module execution entry point (``python -m marine_object_counter``)."""

from __future__ import annotations

from .cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
