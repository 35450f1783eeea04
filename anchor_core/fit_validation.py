from __future__ import annotations

from dataclasses import dataclass

from .constraints import SAFETY_MARGIN
from .model import AnchorDimensions, ConcreteDimensions, Number


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


def max_embedment_depth(concrete: ConcreteDimensions) -> Number:
    # 10 mm minimum distance from the bottom face
    return concrete.thickness - SAFETY_MARGIN


def validate_fit(concrete: ConcreteDimensions, anchor: AnchorDimensions) -> ValidationResult:
    """
    Checks that the anchor physically fits the concrete block.

    Every rule is evaluated; errors keep rule order (width, depth, embedment).
    Anchor height sits above the concrete surface and is not checked.
    """
    errors: list[str] = []

    if anchor.width > concrete.width:
        errors.append("Anchor width exceeds concrete width")

    if anchor.depth > concrete.depth:
        errors.append("Anchor depth exceeds concrete depth")

    limit = max_embedment_depth(concrete)
    if anchor.embed_depth > limit:
        errors.append(f"Embedment depth exceeds maximum allowed ({limit}mm)")

    return ValidationResult(is_valid=not errors, errors=tuple(errors))
