from __future__ import annotations

from dataclasses import asdict, dataclass

from h2calc.economics.constants import DEFAULT_CONSTANTS, EnergySource, ProcessConstants
from h2calc.errors import DomainError, ensure_finite


@dataclass(frozen=True)
class ProductionInputs:
    energy_source: EnergySource | str = EnergySource.SOLAR
    energy_cost_per_kwh: float = 0.1
    water_cost_per_m3: float = 2.0
    production_kg_per_day: float = 500.0
    temperature_c: float = 80.0
    pressure_atm: float = 30.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "energy_source", EnergySource.parse(self.energy_source))


@dataclass(frozen=True)
class ProductionResult:
    efficiency_percent: float
    energy_required_kwh: float
    water_required_m3: float
    energy_cost_per_day: float
    water_cost_per_day: float
    maintenance_cost_per_day: float
    total_cost_per_day: float
    cost_per_kg: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def temperature_factor(
    temperature_c: float, constants: ProcessConstants = DEFAULT_CONSTANTS
) -> float:
    """Linear derating around the optimal cell temperature; negative far from it."""
    deviation = abs(temperature_c - constants.optimal_temp_c)
    return 1.0 - (deviation / constants.temp_tolerance_c)


def pressure_factor(pressure_atm: float, constants: ProcessConstants = DEFAULT_CONSTANTS) -> float:
    deviation = abs(pressure_atm - constants.optimal_pressure_atm)
    return 1.0 - (deviation / constants.pressure_tolerance_atm)


def derated_efficiency(
    inputs: ProductionInputs, constants: ProcessConstants = DEFAULT_CONSTANTS
) -> float:
    """Return the baseline source efficiency scaled by temperature and pressure factors."""
    base_efficiency = constants.baseline_efficiency(inputs.energy_source)
    return (
        base_efficiency
        * temperature_factor(inputs.temperature_c, constants)
        * pressure_factor(inputs.pressure_atm, constants)
    )


def compute_production(
    inputs: ProductionInputs, constants: ProcessConstants = DEFAULT_CONSTANTS
) -> ProductionResult:
    """Forward production analysis at full precision; callers round for display."""
    actual_efficiency = ensure_finite("efficiency", derated_efficiency(inputs, constants))
    if actual_efficiency <= 0:
        msg = (
            f"efficiency is {actual_efficiency:.4f} at {inputs.temperature_c} degC and "
            f"{inputs.pressure_atm} atm; operating point is outside the usable range"
        )
        raise DomainError(msg)
    if inputs.production_kg_per_day <= 0:
        msg = "production_kg_per_day must be positive"
        raise DomainError(msg)

    capacity = inputs.production_kg_per_day
    energy_required = constants.energy_kwh_per_kg_h2 * capacity / actual_efficiency
    water_required = constants.water_m3_per_kg_h2 * capacity

    energy_cost = energy_required * inputs.energy_cost_per_kwh
    water_cost = water_required * inputs.water_cost_per_m3
    maintenance_cost = (energy_cost + water_cost) * constants.maintenance_factor
    total_cost = energy_cost + water_cost + maintenance_cost

    return ProductionResult(
        efficiency_percent=actual_efficiency * 100.0,
        energy_required_kwh=ensure_finite("energy_required_kwh", energy_required),
        water_required_m3=ensure_finite("water_required_m3", water_required),
        energy_cost_per_day=ensure_finite("energy_cost_per_day", energy_cost),
        water_cost_per_day=ensure_finite("water_cost_per_day", water_cost),
        maintenance_cost_per_day=ensure_finite("maintenance_cost_per_day", maintenance_cost),
        total_cost_per_day=ensure_finite("total_cost_per_day", total_cost),
        cost_per_kg=ensure_finite("cost_per_kg", total_cost / capacity),
    )


__all__ = [
    "ProductionInputs",
    "ProductionResult",
    "temperature_factor",
    "pressure_factor",
    "derated_efficiency",
    "compute_production",
]
