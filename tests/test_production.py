from __future__ import annotations

import pytest

from h2calc.economics.constants import DEFAULT_CONSTANTS, EnergySource, ProcessConstants
from h2calc.economics.production import (
    ProductionInputs,
    compute_production,
    derated_efficiency,
    pressure_factor,
    temperature_factor,
)
from h2calc.errors import ConfigurationError, DomainError


@pytest.mark.parametrize("source", list(EnergySource))
def test_optimal_point_keeps_baseline_efficiency(source: EnergySource) -> None:
    inputs = ProductionInputs(energy_source=source, temperature_c=80.0, pressure_atm=30.0)

    assert derated_efficiency(inputs) == DEFAULT_CONSTANTS.baseline_efficiency(source)
    result = compute_production(inputs)
    assert result.efficiency_percent == pytest.approx(
        DEFAULT_CONSTANTS.baseline_efficiency(source) * 100.0
    )


def test_derating_is_symmetric_around_optimum() -> None:
    assert temperature_factor(60.0) == pytest.approx(temperature_factor(100.0))
    assert temperature_factor(60.0) == pytest.approx(0.9)
    assert pressure_factor(20.0) == pytest.approx(pressure_factor(40.0))
    assert pressure_factor(20.0) == pytest.approx(0.8)


def test_off_optimum_operation_costs_more() -> None:
    optimal = compute_production(ProductionInputs())
    hot = compute_production(ProductionInputs(temperature_c=120.0, pressure_atm=40.0))

    assert hot.efficiency_percent < optimal.efficiency_percent
    assert hot.energy_required_kwh > optimal.energy_required_kwh
    assert hot.cost_per_kg > optimal.cost_per_kg
    assert hot.water_required_m3 == optimal.water_required_m3


def test_total_cost_is_sum_of_components() -> None:
    result = compute_production(
        ProductionInputs(energy_source="wind", energy_cost_per_kwh=0.07, temperature_c=70.0)
    )

    components = (
        result.energy_cost_per_day + result.water_cost_per_day + result.maintenance_cost_per_day
    )
    assert result.total_cost_per_day == pytest.approx(components)
    assert result.cost_per_kg == pytest.approx(result.total_cost_per_day / 500.0)


def test_repeated_calls_are_identical() -> None:
    inputs = ProductionInputs(energy_source="grid", temperature_c=95.0, pressure_atm=22.0)

    assert compute_production(inputs) == compute_production(inputs)


def test_injected_constants_change_the_result() -> None:
    constants = ProcessConstants(maintenance_factor=0.0)

    result = compute_production(ProductionInputs(), constants)

    assert result.maintenance_cost_per_day == 0.0
    assert result.total_cost_per_day == pytest.approx(3666.6667 + 9.0, rel=1e-6)


@pytest.mark.parametrize(
    ("temperature_c", "pressure_atm"),
    [(280.0, 30.0), (80.0, 80.0), (-200.0, 30.0), (80.0, 100.0)],
)
def test_degenerate_operating_point_is_a_domain_error(
    temperature_c: float, pressure_atm: float
) -> None:
    inputs = ProductionInputs(temperature_c=temperature_c, pressure_atm=pressure_atm)

    with pytest.raises(DomainError, match="efficiency"):
        compute_production(inputs)


@pytest.mark.parametrize("capacity", [0.0, -10.0])
def test_non_positive_capacity_is_a_domain_error(capacity: float) -> None:
    with pytest.raises(DomainError, match="production_kg_per_day"):
        compute_production(ProductionInputs(production_kg_per_day=capacity))


def test_non_finite_input_is_a_domain_error() -> None:
    with pytest.raises(DomainError):
        compute_production(ProductionInputs(energy_cost_per_kwh=float("inf")))


def test_unknown_source_fails_at_construction() -> None:
    with pytest.raises(ConfigurationError):
        ProductionInputs(energy_source="coal")


def test_result_to_dict_exposes_every_field() -> None:
    payload = compute_production(ProductionInputs()).to_dict()

    assert set(payload) == {
        "efficiency_percent",
        "energy_required_kwh",
        "water_required_m3",
        "energy_cost_per_day",
        "water_cost_per_day",
        "maintenance_cost_per_day",
        "total_cost_per_day",
        "cost_per_kg",
    }
