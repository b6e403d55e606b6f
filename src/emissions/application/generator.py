"""
Synthetic emission readings for simulated IoT devices.

Each vehicle walks randomly around its fuel-type baseline: the previous
reading is the reference for the next one, a per-call correlation factor makes
the four gases move together, and the vehicle's trend biases the drift.
"""
import math
import random
from typing import Dict, List, Optional, Tuple
from ..domain import (
    EmissionLevels, GasType, ProfileStore, RandomSource, Trend, VehicleKey, VehicleProfile
)

# (low, span) of the uniform trend multiplier draw
TREND_MULTIPLIER_RANGES: Dict[Trend, Tuple[float, float]] = {
    Trend.STABLE: (0.95, 0.10),
    Trend.INCREASING: (1.00, 0.05),
    Trend.DECREASING: (0.95, 0.05),
    Trend.VOLATILE: (0.85, 0.30),
}

# Symmetric variation bound per gas, scaled by the correlation factor
VARIATION_BOUNDS: Dict[GasType, float] = {
    GasType.CO2: 0.20,
    GasType.CO: 0.25,
    GasType.NOX: 0.20,
    GasType.PM: 0.30,
}

CORRELATION_MIN = 0.7
CORRELATION_SPAN = 0.3

ZERO_BASELINE_CEILING = 10.0
MIN_BASELINE_RATIO = 0.2
MAX_BASELINE_RATIO = 2.0


def round_tenth(value: float) -> float:
    """Rounds to one decimal, ties going up (2.25 -> 2.3)."""
    return math.floor(value * 10 + 0.5) / 10


class ReadingGenerator:
    """
    Produces correlated readings and advances each vehicle's profile.
    """
    def __init__(self, store: ProfileStore, rng: Optional[RandomSource] = None):
        self.store = store
        # Share the store's source when none is given so one seed drives everything
        if rng is None:
            rng = getattr(store, 'rng', None) or random.Random()
        self.rng = rng

    def generate(self, vehicle_id: VehicleKey, fuel_type: Optional[str]) -> EmissionLevels:
        profile = self.store.get_or_create(vehicle_id, fuel_type)

        trend_multiplier = self._trend_multiplier(profile.trend)
        correlation = CORRELATION_MIN + self.rng.random() * CORRELATION_SPAN

        values = {
            gas.field: self._next_value(profile, gas, correlation, trend_multiplier)
            for gas in GasType
        }
        reading = EmissionLevels(**values)
        profile.last_reading = reading
        return reading

    def generate_history(
        self,
        vehicle_id: VehicleKey,
        fuel_type: Optional[str],
        hours_back: float,
        interval_minutes: float = 5,
    ) -> List[EmissionLevels]:
        """
        Backfills a synthetic series, oldest first.

        The vehicle's profile is reset first so the series does not inherit
        live-generation state. Returns floor(hours_back * 60 / interval) + 1
        readings; timestamps are left to the caller.
        """
        if interval_minutes <= 0:
            raise ValueError("interval_minutes must be positive")
        points = math.floor(hours_back * 60 / interval_minutes)
        self.store.reset(vehicle_id)
        return [self.generate(vehicle_id, fuel_type) for _ in range(points + 1)]

    def _trend_multiplier(self, trend: Trend) -> float:
        low, span = TREND_MULTIPLIER_RANGES[trend]
        return low + self.rng.random() * span

    def _next_value(
        self,
        profile: VehicleProfile,
        gas: GasType,
        correlation: float,
        trend_multiplier: float,
    ) -> float:
        base_value = profile.baseline.get(gas)
        reference = profile.last_reading.get(gas) if profile.last_reading else base_value

        bound = VARIATION_BOUNDS[gas] * correlation
        variation = -bound + self.rng.random() * (2 * bound)
        value = (reference + reference * profile.volatility * variation) * trend_multiplier

        if base_value == 0:
            value = max(0.0, min(value, ZERO_BASELINE_CEILING))
        else:
            value = max(base_value * MIN_BASELINE_RATIO, min(value, base_value * MAX_BASELINE_RATIO))

        return round_tenth(value)
