from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "tools" / "run_calc.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
        check=False,
    )


def test_defaults_produce_reference_capacity() -> None:
    result = _run()
    assert result.returncode == 0, result.stderr
    out = json.loads(result.stdout)
    assert out["isValid"] is True
    assert out["tensionCapacity"] == 1833
    assert out["shearCapacity"] == 1466


def test_edits_are_clamped_and_project_saved(tmp_path: Path) -> None:
    project_path = tmp_path / "project.json"
    out_path = tmp_path / "out" / "result.json"
    result = _run(
        "--set", "anchor.embedDepth=250",
        "--set", "concrete.thickness=120",
        "--save-project", str(project_path),
        "--out", str(out_path),
    )
    assert result.returncode == 0, result.stderr
    saved = json.loads(project_path.read_text(encoding="utf-8"))
    assert saved["concreteDimensions"]["thickness"] == 120
    assert saved["anchorDimensions"]["embedDepth"] == 110
    assert saved["settings"]["showSettings"] is False
    assert json.loads(out_path.read_text(encoding="utf-8"))["isValid"] is True


def test_invalid_project_exits_1(tmp_path: Path) -> None:
    project_path = tmp_path / "bad.json"
    project_path.write_text(
        json.dumps(
            {
                "concreteDimensions": {"thickness": 300},
                "anchorDimensions": {"embedDepth": 400},
                "timestamp": "2026-10-19T00:00:00Z",
            }
        ),
        encoding="utf-8",
    )
    result = _run("--project", str(project_path))
    assert result.returncode == 1
    out = json.loads(result.stdout)
    assert out == {
        "isValid": False,
        "errors": ["Embedment depth exceeds maximum allowed (290mm)"],
    }


def test_bad_edit_syntax_exits_2() -> None:
    result = _run("--set", "thickness=100")
    assert result.returncode == 2
    assert "category.field=value" in result.stderr


def test_unwritable_outputs_exit_2(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    result = _run("--save-project", str(blocker / "project.json"))
    assert result.returncode == 2
    assert result.stderr.startswith("ERROR:")
    assert "Traceback" not in result.stderr

    result = _run("--out", str(blocker / "result.json"))
    assert result.returncode == 2
    assert result.stderr.startswith("ERROR:")
    assert result.stdout == ""
