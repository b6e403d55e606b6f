"""
Domain entities for the Emissions module.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

VehicleKey = Union[int, str]


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    HYBRID = "hybrid"
    ELECTRIC = "electric"
    CNG = "cng"

    @classmethod
    def parse(cls, value: Optional[str]) -> "FuelType":
        """
        Case-insensitive lookup. Unknown or empty fuel types map to PETROL.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PETROL


class Trend(str, Enum):
    STABLE = "stable"
    INCREASING = "increasing"
    DECREASING = "decreasing"
    VOLATILE = "volatile"


class GasType(str, Enum):
    CO2 = "CO2"
    CO = "CO"
    NOX = "NOx"
    PM = "PM"

    @property
    def field(self) -> str:
        """Attribute name carrying this gas on readings and baselines."""
        return _GAS_FIELDS[self]


_GAS_FIELDS = {
    GasType.CO2: "co2",
    GasType.CO: "co",
    GasType.NOX: "nox",
    GasType.PM: "pm_level",
}


@dataclass(frozen=True)
class EmissionLevels:
    """
    Concentrations of the four monitored gases.
    Used both as a fuel-type baseline and as a generated reading.
    """
    co2: float
    co: float
    nox: float
    pm_level: float

    def get(self, gas: GasType) -> float:
        return getattr(self, gas.field)

    def to_dict(self) -> Dict[str, float]:
        return {
            'co2': self.co2,
            'co': self.co,
            'nox': self.nox,
            'pm_level': self.pm_level,
        }


EMISSION_BASELINES: Dict[FuelType, EmissionLevels] = {
    FuelType.PETROL: EmissionLevels(co2=450, co=8, nox=35, pm_level=25),
    FuelType.DIESEL: EmissionLevels(co2=550, co=12, nox=45, pm_level=40),
    FuelType.HYBRID: EmissionLevels(co2=300, co=5, nox=20, pm_level=15),
    FuelType.ELECTRIC: EmissionLevels(co2=0, co=0, nox=0, pm_level=5),
    FuelType.CNG: EmissionLevels(co2=400, co=6, nox=25, pm_level=20),
}


def baseline_for(fuel_type: Optional[str]) -> EmissionLevels:
    return EMISSION_BASELINES[FuelType.parse(fuel_type)]


@dataclass
class VehicleProfile:
    """
    Simulation state for one vehicle.
    Only last_reading changes after creation.
    """
    vehicle_id: VehicleKey
    baseline: EmissionLevels
    trend: Trend
    volatility: float  # [0.1, 0.3)
    last_reading: Optional[EmissionLevels] = None


@dataclass
class EmissionReading:
    """
    A reading attached to a vehicle and a point in time.
    Ingested readings may omit any gas.
    """
    vehicle_id: VehicleKey
    timestamp: datetime
    co2: Optional[float] = None
    co: Optional[float] = None
    nox: Optional[float] = None
    pm_level: Optional[float] = None

    @classmethod
    def from_levels(cls, vehicle_id: VehicleKey, timestamp: datetime, levels: EmissionLevels) -> "EmissionReading":
        return cls(vehicle_id=vehicle_id, timestamp=timestamp, **levels.to_dict())


@dataclass(frozen=True)
class ThresholdBreach:
    """
    A gas whose measured value is strictly above its limit.
    """
    gas_type: GasType
    measured_value: float
    threshold_value: float
