from __future__ import annotations

from dataclasses import asdict, dataclass, fields

import numpy as np
import pandas as pd

from h2calc.economics.constants import DEFAULT_CONSTANTS, ProcessConstants
from h2calc.economics.production import ProductionInputs
from h2calc.errors import ensure_finite


@dataclass(frozen=True)
class CurvePoint:
    production_kg_per_day: float
    energy_required_kwh: float
    water_required_m3: float
    total_cost: float
    cost_per_kg: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


CURVE_COLUMNS = tuple(item.name for item in fields(CurvePoint))


def production_levels(constants: ProcessConstants = DEFAULT_CONSTANTS) -> np.ndarray:
    start = constants.curve_start_kg_per_day
    step = constants.curve_step_kg_per_day
    count = int(np.floor((constants.curve_stop_kg_per_day - start) / step + 1e-9)) + 1
    return start + step * np.arange(count, dtype=float)


def generate_curve(
    inputs: ProductionInputs, constants: ProcessConstants = DEFAULT_CONSTANTS
) -> list[CurvePoint]:
    """Sweep production levels at the baseline source efficiency.

    Temperature and pressure on ``inputs`` are ignored; only the energy source
    and the unit prices shape the curve.
    """
    efficiency = constants.baseline_efficiency(inputs.energy_source)
    surcharge = 1.0 + constants.maintenance_factor

    points: list[CurvePoint] = []
    for level in production_levels(constants):
        production = float(level)
        energy_required = constants.energy_kwh_per_kg_h2 * production / efficiency
        water_required = constants.water_m3_per_kg_h2 * production
        total_cost = (
            energy_required * inputs.energy_cost_per_kwh
            + water_required * inputs.water_cost_per_m3
        ) * surcharge
        points.append(
            CurvePoint(
                production_kg_per_day=production,
                energy_required_kwh=energy_required,
                water_required_m3=water_required,
                total_cost=ensure_finite("total_cost", total_cost),
                cost_per_kg=ensure_finite("cost_per_kg", total_cost / production),
            )
        )
    return points


def curve_to_frame(points: list[CurvePoint]) -> pd.DataFrame:
    rows = [item.to_dict() for item in points]
    return pd.DataFrame(rows, columns=list(CURVE_COLUMNS))


__all__ = [
    "CurvePoint",
    "CURVE_COLUMNS",
    "production_levels",
    "generate_curve",
    "curve_to_frame",
]
