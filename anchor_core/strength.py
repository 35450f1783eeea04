from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

# Grade designation "C<cylinder>/<cube>", e.g. C30/37 (MPa).
_GRADE_RE = re.compile(r"C(\d+)/(\d+)", re.ASCII)

TENSILE_COEFFICIENT = 0.3
TENSILE_EXPONENT = 2.0 / 3.0


@dataclass(frozen=True)
class StrengthValues:
    cylindrical_strength: int = 0
    cubic_strength: int = 0
    tensile_strength: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "cylindricalStrength": self.cylindrical_strength,
            "cubicStrength": self.cubic_strength,
            "tensileStrength": self.tensile_strength,
        }


ZERO_STRENGTH = StrengthValues()


@dataclass(frozen=True)
class GradeParse:
    ok: bool
    values: StrengthValues
    reason: str | None = None


def tensile_strength(cylindrical_strength: float) -> float:
    """fctm ~ 0.3 * fck^(2/3), simplified approximation."""
    return TENSILE_COEFFICIENT * float(cylindrical_strength) ** TENSILE_EXPONENT


def parse_grade(grade: Any) -> GradeParse:
    """Tagged parse: ok=False tells a malformed designation from a real grade."""
    if not isinstance(grade, str):
        return GradeParse(ok=False, values=ZERO_STRENGTH, reason="grade must be a string")
    match = _GRADE_RE.fullmatch(grade)
    if match is None:
        return GradeParse(
            ok=False,
            values=ZERO_STRENGTH,
            reason=f"grade {grade!r} does not match C<cyl>/<cube>",
        )
    try:
        fck = int(match.group(1))
        fck_cube = int(match.group(2))
        fctm = tensile_strength(fck)
    except (ValueError, OverflowError):
        # digit runs too long for int()/float()
        return GradeParse(ok=False, values=ZERO_STRENGTH, reason="grade strength is out of range")
    return GradeParse(
        ok=True,
        values=StrengthValues(
            cylindrical_strength=fck,
            cubic_strength=fck_cube,
            tensile_strength=fctm,
        ),
    )


def parse_strength(grade: Any) -> StrengthValues:
    """All-zero StrengthValues when the designation does not parse."""
    return parse_grade(grade).values


def is_valid_grade(grade: Any) -> bool:
    return parse_grade(grade).ok
