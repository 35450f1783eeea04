"""
anchor_core - расчётное ядро: бетонный блок + анкер.

- ограничения размеров и связь thickness <-> embedDepth (clamping)
- проверка посадки анкера в бетон (fit_validation)
- прочность бетона по классу C<cyl>/<cube> (strength)
- несущая способность анкера на отрыв/срез (capacity)

3D-сцена, экспорт в PDF и состояние UI намеренно отсутствуют: ядро получает
конфигурацию как данные и возвращает новые значения.
"""

from .capacity import calculate_edge_distances, compute_capacity
from .clamping import apply_edit, clamp, clamp_covering
from .fit_validation import validate_fit
from .model import (
    AnchorDimensions,
    ConcreteDimensions,
    ConcreteProperties,
    Configuration,
    default_configuration,
)
from .pipeline import evaluate, evaluate_frame, evaluate_record
from .strength import parse_grade, parse_strength

__all__ = [
    "AnchorDimensions",
    "ConcreteDimensions",
    "ConcreteProperties",
    "Configuration",
    "apply_edit",
    "calculate_edge_distances",
    "clamp",
    "clamp_covering",
    "compute_capacity",
    "default_configuration",
    "evaluate",
    "evaluate_frame",
    "evaluate_record",
    "parse_grade",
    "parse_strength",
    "validate_fit",
]
