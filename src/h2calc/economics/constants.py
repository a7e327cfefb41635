from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from h2calc.errors import ConfigurationError


class EnergySource(str, Enum):
    SOLAR = "solar"
    WIND = "wind"
    GRID = "grid"
    NUCLEAR = "nuclear"

    @classmethod
    def parse(cls, value: EnergySource | str) -> EnergySource:
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        allowed = ", ".join(member.value for member in cls)
        msg = f"Unknown energy source {value!r}; expected one of: {allowed}"
        raise ConfigurationError(msg)


DEFAULT_EFFICIENCY_BY_SOURCE: Mapping[EnergySource, float] = MappingProxyType(
    {
        EnergySource.SOLAR: 0.75,
        EnergySource.WIND: 0.70,
        EnergySource.GRID: 0.65,
        EnergySource.NUCLEAR: 0.80,
    }
)


@dataclass(frozen=True)
class ProcessConstants:
    """Physical and economic constants shared by every calculation."""

    energy_kwh_per_kg_h2: float = 55.0
    water_m3_per_kg_h2: float = 0.009
    maintenance_factor: float = 0.15
    efficiency_by_source: Mapping[EnergySource, float] = field(
        default_factory=lambda: DEFAULT_EFFICIENCY_BY_SOURCE, hash=False
    )
    optimal_temp_c: float = 80.0
    temp_tolerance_c: float = 200.0
    optimal_pressure_atm: float = 30.0
    pressure_tolerance_atm: float = 50.0
    curve_start_kg_per_day: float = 100.0
    curve_stop_kg_per_day: float = 1000.0
    curve_step_kg_per_day: float = 100.0

    def __post_init__(self) -> None:
        table = {
            EnergySource.parse(source): float(value)
            for source, value in dict(self.efficiency_by_source).items()
        }
        missing = [source.value for source in EnergySource if source not in table]
        if missing:
            msg = f"efficiency_by_source is missing sources: {missing}"
            raise ConfigurationError(msg)
        for source, value in table.items():
            if not 0 < value <= 1:
                msg = f"efficiency for {source.value} must be in (0, 1]"
                raise ConfigurationError(msg)
        # Frozen dataclass: bypass __setattr__ to store the read-only view.
        object.__setattr__(self, "efficiency_by_source", MappingProxyType(table))

        for item in fields(self):
            if item.name == "efficiency_by_source":
                continue
            if not math.isfinite(getattr(self, item.name)):
                msg = f"{item.name} must be finite"
                raise ConfigurationError(msg)
        if self.energy_kwh_per_kg_h2 <= 0:
            msg = "energy_kwh_per_kg_h2 must be positive"
            raise ConfigurationError(msg)
        if self.water_m3_per_kg_h2 <= 0:
            msg = "water_m3_per_kg_h2 must be positive"
            raise ConfigurationError(msg)
        if not 0 <= self.maintenance_factor < 1:
            msg = "maintenance_factor must be in [0, 1)"
            raise ConfigurationError(msg)
        if self.temp_tolerance_c <= 0:
            msg = "temp_tolerance_c must be positive"
            raise ConfigurationError(msg)
        if self.pressure_tolerance_atm <= 0:
            msg = "pressure_tolerance_atm must be positive"
            raise ConfigurationError(msg)
        if self.curve_start_kg_per_day <= 0:
            msg = "curve_start_kg_per_day must be positive"
            raise ConfigurationError(msg)
        if self.curve_step_kg_per_day <= 0:
            msg = "curve_step_kg_per_day must be positive"
            raise ConfigurationError(msg)
        if self.curve_stop_kg_per_day < self.curve_start_kg_per_day:
            msg = "curve_stop_kg_per_day must not be below curve_start_kg_per_day"
            raise ConfigurationError(msg)

    def baseline_efficiency(self, source: EnergySource | str) -> float:
        return self.efficiency_by_source[EnergySource.parse(source)]

    def to_dict(self) -> dict[str, Any]:
        payload = {item.name: getattr(self, item.name) for item in fields(self)}
        payload["efficiency_by_source"] = {
            source.value: value for source, value in self.efficiency_by_source.items()
        }
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ProcessConstants:
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            msg = f"Unknown constant names: {unknown}"
            raise ConfigurationError(msg)
        values: dict[str, Any] = {}
        for name, value in payload.items():
            try:
                if name == "efficiency_by_source":
                    # Partial tables override only the named sources.
                    table = {
                        source.value: rate
                        for source, rate in DEFAULT_EFFICIENCY_BY_SOURCE.items()
                    }
                    table.update(
                        {str(key).lower(): float(rate) for key, rate in dict(value).items()}
                    )
                    values[name] = table
                else:
                    values[name] = float(value)
            except (TypeError, ValueError) as exc:
                msg = f"Invalid value for {name}: {value!r}"
                raise ConfigurationError(msg) from exc
        return cls(**values)


DEFAULT_CONSTANTS = ProcessConstants()


def load_constants(constants_path: str | Path) -> ProcessConstants:
    path = Path(constants_path)
    if not path.exists():
        msg = f"Constants file does not exist: {path}"
        raise FileNotFoundError(msg)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Constants file is not valid JSON: {path} ({exc})"
        raise ConfigurationError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Constants file must contain a JSON object: {path}"
        raise ConfigurationError(msg)
    return ProcessConstants.from_dict(payload)


__all__ = [
    "EnergySource",
    "ProcessConstants",
    "DEFAULT_CONSTANTS",
    "DEFAULT_EFFICIENCY_BY_SOURCE",
    "load_constants",
]
