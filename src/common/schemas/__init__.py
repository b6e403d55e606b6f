from .vehicle import Vehicle, VehicleCreate
from .emission import (
    EmissionIngest, EmissionReading, ThresholdBreach, ComplianceStatus,
    MockGenerationRequest, GeneratedReading, MockGenerationResult,
    PopulateHistoryRequest, BackfillSummary, PopulateHistoryResult
)
from .alert import Alert
from .admin import SystemStats

__all__ = [
    "Vehicle",
    "VehicleCreate",
    "EmissionIngest",
    "EmissionReading",
    "ThresholdBreach",
    "ComplianceStatus",
    "MockGenerationRequest",
    "GeneratedReading",
    "MockGenerationResult",
    "PopulateHistoryRequest",
    "BackfillSummary",
    "PopulateHistoryResult",
    "Alert",
    "SystemStats",
]
