from h2calc.economics.constants import (
    DEFAULT_CONSTANTS,
    EnergySource,
    ProcessConstants,
    load_constants,
)
from h2calc.economics.curve import CurvePoint, curve_to_frame, generate_curve, production_levels
from h2calc.economics.production import (
    ProductionInputs,
    ProductionResult,
    compute_production,
    derated_efficiency,
)
from h2calc.economics.reverse import ReverseInputs, ReverseResult, compute_reverse

__all__ = [
    "EnergySource",
    "ProcessConstants",
    "DEFAULT_CONSTANTS",
    "load_constants",
    "ProductionInputs",
    "ProductionResult",
    "compute_production",
    "derated_efficiency",
    "ReverseInputs",
    "ReverseResult",
    "compute_reverse",
    "CurvePoint",
    "production_levels",
    "generate_curve",
    "curve_to_frame",
]
