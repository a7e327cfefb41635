"""Hydrogen electrolysis cost calculator public API."""

from h2calc.display import CURVE_SERIES, format_production_result, format_reverse_result
from h2calc.economics.constants import (
    DEFAULT_CONSTANTS,
    EnergySource,
    ProcessConstants,
    load_constants,
)
from h2calc.economics.curve import CurvePoint, curve_to_frame, generate_curve
from h2calc.economics.production import ProductionInputs, ProductionResult, compute_production
from h2calc.economics.reverse import ReverseInputs, ReverseResult, compute_reverse
from h2calc.errors import CalculatorError, ConfigurationError, DomainError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EnergySource",
    "ProcessConstants",
    "DEFAULT_CONSTANTS",
    "load_constants",
    "ProductionInputs",
    "ProductionResult",
    "compute_production",
    "ReverseInputs",
    "ReverseResult",
    "compute_reverse",
    "CurvePoint",
    "generate_curve",
    "curve_to_frame",
    "CURVE_SERIES",
    "format_production_result",
    "format_reverse_result",
    "CalculatorError",
    "ConfigurationError",
    "DomainError",
]
