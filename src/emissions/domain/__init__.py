"""
Domain module initialization.
"""
from .entities import (
    VehicleKey,
    FuelType,
    Trend,
    GasType,
    EmissionLevels,
    EMISSION_BASELINES,
    baseline_for,
    VehicleProfile,
    EmissionReading,
    ThresholdBreach,
)
from .protocols import RandomSource, ProfileStore
from .repositories import VehicleRepository, ReadingRepository, AlertRepository
