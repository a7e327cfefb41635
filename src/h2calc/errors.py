from __future__ import annotations

import math


class CalculatorError(ValueError):
    """Base class for every failure raised by the calculation engine."""


class ConfigurationError(CalculatorError):
    """Raised for an unknown energy source or an invalid constant set."""


class DomainError(CalculatorError):
    """Raised when inputs fall outside the physically meaningful range."""


def ensure_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        msg = f"{name} is not finite ({value!r}); inputs are out of range"
        raise DomainError(msg)
    return value


__all__ = ["CalculatorError", "ConfigurationError", "DomainError", "ensure_finite"]
