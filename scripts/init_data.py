#!/usr/bin/env python3
"""
Create the JSON data file with empty available/occupied collections.

Usage:
  python scripts/init_data.py [--file ./data/data.json] [--force]
"""
from __future__ import annotations

import argparse
import sys

from datestore.core.config import get_settings
from datestore.repositories import JsonDateStorage


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Create an empty date store file")
    ap.add_argument("--file", help="Data file path (default: DATA_FILE or ./data/data.json)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = ap.parse_args(argv)

    path = (args.file or "").strip() or get_settings().data_file
    storage = JsonDateStorage(path)
    if not storage.initialize(force=args.force):
        print(f"Skipped: {path} already exists (use --force to overwrite)")
        return 1
    print(f"OK: created {path}")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
