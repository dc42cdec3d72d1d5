#!/usr/bin/env python3
"""Standalone entry script for the marine object counter."""

from __future__ import annotations

from marine_object_counter.cli import main


if __name__ == "__main__":
    main()
