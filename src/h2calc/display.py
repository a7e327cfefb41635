from __future__ import annotations

from h2calc.economics.production import ProductionResult
from h2calc.economics.reverse import ReverseResult

# (column, legend label, axis side) for each plotted curve series.
CURVE_SERIES: tuple[tuple[str, str, str], ...] = (
    ("energy_required_kwh", "Energy Required (kWh)", "left"),
    ("water_required_m3", "Water Required (m³)", "right"),
    ("total_cost", "Total Cost ($)", "left"),
    ("cost_per_kg", "Cost per kg ($)", "left"),
)


def _fixed(value: float) -> str:
    return f"{value:.2f}"


def format_production_result(result: ProductionResult) -> dict[str, str]:
    """Render a production result the way the calculator reports it, two decimals each."""
    return {
        "System Efficiency": f"{_fixed(result.efficiency_percent)}%",
        "Energy Required": f"{_fixed(result.energy_required_kwh)} kWh",
        "Water Required": f"{_fixed(result.water_required_m3)} m³",
        "Total Daily Cost": f"${_fixed(result.total_cost_per_day)}",
        "Cost per kg": f"${_fixed(result.cost_per_kg)}",
    }


def format_reverse_result(result: ReverseResult) -> dict[str, str]:
    return {
        "Required Energy": f"{_fixed(result.required_energy_kwh)} kWh",
        "Required Water": f"{_fixed(result.required_water_m3)} m³",
        "Maximum Energy Cost": f"${_fixed(result.max_energy_cost_per_kwh)}/kWh",
        "Total Daily Cost": f"${_fixed(result.total_cost_per_day)}",
    }


__all__ = ["CURVE_SERIES", "format_production_result", "format_reverse_result"]
