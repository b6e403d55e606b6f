from datetime import datetime
import pytest
from src.emissions.domain import (
    EMISSION_BASELINES, EmissionLevels, EmissionReading, FuelType, GasType, baseline_for
)


@pytest.mark.parametrize("raw, expected", [
    ("petrol", FuelType.PETROL),
    ("Diesel", FuelType.DIESEL),
    ("HYBRID", FuelType.HYBRID),
    ("electric", FuelType.ELECTRIC),
    ("cng", FuelType.CNG),
    ("lpg", FuelType.PETROL),
    ("", FuelType.PETROL),
    (None, FuelType.PETROL),
    (FuelType.CNG, FuelType.CNG),
])
def test_fuel_type_parse(raw, expected):
    assert FuelType.parse(raw) is expected

def test_baseline_table():
    assert EMISSION_BASELINES[FuelType.PETROL] == EmissionLevels(450, 8, 35, 25)
    assert EMISSION_BASELINES[FuelType.DIESEL] == EmissionLevels(550, 12, 45, 40)
    assert EMISSION_BASELINES[FuelType.HYBRID] == EmissionLevels(300, 5, 20, 15)
    assert EMISSION_BASELINES[FuelType.ELECTRIC] == EmissionLevels(0, 0, 0, 5)
    assert EMISSION_BASELINES[FuelType.CNG] == EmissionLevels(400, 6, 25, 20)
    assert baseline_for("unknown") == EMISSION_BASELINES[FuelType.PETROL]

def test_levels_are_immutable():
    levels = EmissionLevels(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        levels.co2 = 10

def test_levels_lookup_by_gas():
    levels = EmissionLevels(co2=1, co=2, nox=3, pm_level=4)
    assert [levels.get(g) for g in GasType] == [1, 2, 3, 4]

def test_reading_from_levels():
    ts = datetime(2024, 1, 1, 8, 30)
    reading = EmissionReading.from_levels(3, ts, EmissionLevels(1.5, 2.5, 3.5, 4.5))
    assert reading == EmissionReading(vehicle_id=3, timestamp=ts, co2=1.5, co=2.5, nox=3.5, pm_level=4.5)
