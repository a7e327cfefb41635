from __future__ import annotations

from dataclasses import asdict, dataclass

from h2calc.economics.constants import DEFAULT_CONSTANTS, ProcessConstants
from h2calc.errors import DomainError, ensure_finite


@dataclass(frozen=True)
class ReverseInputs:
    target_production_kg_per_day: float = 1000.0
    target_efficiency_percent: float = 75.0
    target_cost_per_kg: float = 4.0


@dataclass(frozen=True)
class ReverseResult:
    required_energy_kwh: float
    required_water_m3: float
    max_energy_cost_per_kwh: float
    total_cost_per_day: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def compute_reverse(
    inputs: ReverseInputs, constants: ProcessConstants = DEFAULT_CONSTANTS
) -> ReverseResult:
    """Back-solve requirements and the energy price ceiling for a production target.

    The target efficiency is used as given; no temperature or pressure derating
    is applied on this path.
    """
    target_efficiency = inputs.target_efficiency_percent
    efficiency = ensure_finite("target_efficiency_percent", target_efficiency) / 100.0
    if efficiency <= 0:
        msg = "target_efficiency_percent must be positive"
        raise DomainError(msg)

    production = inputs.target_production_kg_per_day
    ensure_finite("target_production_kg_per_day", production)
    if production <= 0:
        msg = "target_production_kg_per_day must be positive"
        raise DomainError(msg)

    required_energy = ensure_finite(
        "required_energy_kwh", constants.energy_kwh_per_kg_h2 * production / efficiency
    )

    required_water = constants.water_m3_per_kg_h2 * production
    total_cost = inputs.target_cost_per_kg * production
    # Maintenance share comes off the budget before it is spent on energy.
    max_energy_cost = (total_cost / required_energy) * (1.0 - constants.maintenance_factor)

    return ReverseResult(
        required_energy_kwh=required_energy,
        required_water_m3=ensure_finite("required_water_m3", required_water),
        max_energy_cost_per_kwh=ensure_finite("max_energy_cost_per_kwh", max_energy_cost),
        total_cost_per_day=ensure_finite("total_cost_per_day", total_cost),
    )


__all__ = ["ReverseInputs", "ReverseResult", "compute_reverse"]
