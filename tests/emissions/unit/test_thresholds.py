from datetime import datetime
from omegaconf import OmegaConf
from src.emissions.application.thresholds import DEFAULT_THRESHOLDS, ThresholdEvaluator
from src.emissions.domain import EmissionLevels, EmissionReading, GasType, ThresholdBreach


def test_default_thresholds():
    assert DEFAULT_THRESHOLDS == {
        GasType.CO2: 1000.0,
        GasType.CO: 50.0,
        GasType.NOX: 100.0,
        GasType.PM: 100.0,
    }

def test_co2_breach_reported(evaluator):
    reading = EmissionLevels(co2=1500, co=10, nox=30, pm_level=20)
    assert evaluator.evaluate(reading) == [ThresholdBreach(GasType.CO2, 1500, 1000.0)]

def test_compliant_reading_has_no_breaches(evaluator):
    reading = EmissionLevels(co2=450.0, co=8.0, nox=35.0, pm_level=25.0)
    assert evaluator.evaluate(reading) == []
    assert evaluator.is_compliant(reading)

def test_value_equal_to_threshold_is_compliant(evaluator):
    reading = EmissionLevels(co2=1000.0, co=50.0, nox=100.0, pm_level=100.0)
    assert evaluator.evaluate(reading) == []

def test_every_gas_can_breach(evaluator):
    reading = EmissionLevels(co2=1000.1, co=50.1, nox=100.1, pm_level=100.1)
    breaches = evaluator.evaluate(reading)
    assert [b.gas_type for b in breaches] == [GasType.CO2, GasType.CO, GasType.NOX, GasType.PM]
    assert [b.threshold_value for b in breaches] == [1000.0, 50.0, 100.0, 100.0]

def test_missing_values_are_skipped(evaluator):
    reading = EmissionReading(vehicle_id=1, timestamp=datetime(2024, 1, 1), co2=None, nox=250.0)
    breaches = evaluator.evaluate(reading)
    assert breaches == [ThresholdBreach(GasType.NOX, 250.0, 100.0)]

def test_gas_type_labels():
    assert [g.value for g in GasType] == ["CO2", "CO", "NOx", "PM"]

def test_custom_thresholds_from_config():
    cfg = OmegaConf.create({'co2': 800, 'co': None, 'nox': 60})
    evaluator = ThresholdEvaluator.from_config(cfg)
    assert evaluator.thresholds[GasType.CO2] == 800.0
    assert evaluator.thresholds[GasType.CO] == 50.0
    assert evaluator.thresholds[GasType.NOX] == 60.0
    assert evaluator.thresholds[GasType.PM] == 100.0

    reading = EmissionLevels(co2=900, co=10, nox=70, pm_level=20)
    assert [b.gas_type for b in evaluator.evaluate(reading)] == [GasType.CO2, GasType.NOX]
