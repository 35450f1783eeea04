#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from anchor_core.clamping import apply_edit  # noqa: E402
from anchor_core.logging_config import setup_logging  # noqa: E402
from anchor_core.model import Configuration, default_configuration  # noqa: E402
from anchor_core.pipeline import evaluate  # noqa: E402
from anchor_core.project_file import (  # noqa: E402
    build_project_payload,
    read_project_file,
    write_project_file,
)

logger = logging.getLogger("anchor_core.tools.run_calc")


def _parse_edit(text: str) -> tuple[str, str, str]:
    """'concrete.thickness=250' -> ('concrete', 'thickness', '250')."""
    target, sep, value = text.partition("=")
    category, dot, field_name = target.partition(".")
    if not sep or not dot or not category or not field_name:
        raise ValueError(f"Edit must look like category.field=value: {text!r}")
    return category.strip(), field_name.strip(), value


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Evaluate anchor fit and capacity for a project file (or defaults)."
    )
    ap.add_argument("--project", help="Project JSON (concreteDimensions/concreteProperties/anchorDimensions).")
    ap.add_argument(
        "--set",
        dest="edits",
        action="append",
        default=[],
        metavar="CATEGORY.FIELD=VALUE",
        help="Apply a field edit through the clamping rules, e.g. concrete.thickness=250. Repeatable.",
    )
    ap.add_argument("--out", help="Write the result JSON here instead of stdout.")
    ap.add_argument("--save-project", help="Write the (edited) project file here.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    settings = None
    try:
        if args.project:
            config, settings = read_project_file(args.project)
        else:
            config = default_configuration()
        for raw in args.edits:
            category, field_name, value = _parse_edit(raw)
            config = apply_edit(config, category, field_name, value)

        if args.save_project:
            write_project_file(args.save_project, build_project_payload(config, settings))

        result = evaluate(config)
        text = json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"
        if args.out:
            out_path = Path(args.out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text, encoding="utf-8")
    except (OSError, ValueError, KeyError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if not args.out:
        sys.stdout.write(text)

    if not result.is_valid:
        logger.warning("Configuration is invalid: %s", "; ".join(result.validation.errors))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
