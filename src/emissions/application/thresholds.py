from typing import Any, Dict, List, Mapping, Optional
from ..domain import GasType, ThresholdBreach

# ppm for gases, ug/m3 for particulate matter
DEFAULT_THRESHOLDS: Dict[GasType, float] = {
    GasType.CO2: 1000.0,
    GasType.CO: 50.0,
    GasType.NOX: 100.0,
    GasType.PM: 100.0,
}


class ThresholdEvaluator:
    """
    Decides which gases of a reading are above their limits.
    Accepts any object exposing co2, co, nox and pm_level attributes.
    """
    def __init__(self, thresholds: Optional[Mapping[GasType, float]] = None):
        self.thresholds = dict(DEFAULT_THRESHOLDS)
        if thresholds:
            self.thresholds.update(thresholds)

    def evaluate(self, reading: Any) -> List[ThresholdBreach]:
        breaches = []
        for gas in GasType:
            measured = getattr(reading, gas.field, None)
            if measured is None:
                continue
            limit = self.thresholds[gas]
            if measured > limit:
                breaches.append(ThresholdBreach(gas, measured, limit))
        return breaches

    def is_compliant(self, reading: Any) -> bool:
        return not self.evaluate(reading)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "ThresholdEvaluator":
        """
        Builds an evaluator from a {co2, co, nox, pm_level} mapping.
        Missing keys keep their defaults.
        """
        overrides = {
            gas: float(cfg[gas.field])
            for gas in GasType
            if cfg.get(gas.field) is not None
        }
        return cls(overrides)
