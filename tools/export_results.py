#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from anchor_core.logging_config import setup_logging  # noqa: E402
from anchor_core.pipeline import evaluate_frame  # noqa: E402
from app.validation import validate_batch_rows  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Batch-evaluate anchor configurations from CSV into a results CSV."
    )
    ap.add_argument("--input", required=True, help="CSV with one configuration per row.")
    ap.add_argument("--out", required=True, help="Output CSV path.")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any row fails the fit check.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        df = pd.read_csv(args.input)
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    check = validate_batch_rows(df)
    for warn in check.warnings:
        print(f"WARNING: {warn}", file=sys.stderr)
    if check.has_errors:
        for err in check.errors:
            print(f"ERROR: {err}", file=sys.stderr)
        return 2

    out_path = Path(args.out)
    try:
        out = evaluate_frame(df)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out.to_csv(out_path, index=False)
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    invalid = int((~out["is_valid"].astype(bool)).sum())
    print(f"OK: {len(out)} rows, {invalid} invalid -> {out_path}")
    if args.strict and invalid:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
