from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class EmissionIngest(BaseModel):
    """
    Reading pushed by an IoT device. Any gas may be missing.
    """
    device_id: str = Field(..., min_length=1, description="Sensor that produced the reading")
    co2: Optional[float] = Field(None, ge=0, description="CO2 in ppm")
    co: Optional[float] = Field(None, ge=0, description="CO in ppm")
    nox: Optional[float] = Field(None, ge=0, description="NOx in ppm")
    pm_level: Optional[float] = Field(None, ge=0, description="Particulate matter in ug/m3")

class EmissionReading(BaseModel):
    """
    Represents a stored emission reading.
    Corresponds to the emission_readings table.
    """
    id: int
    vehicle_id: int
    timestamp: datetime
    co2: Optional[float] = None
    co: Optional[float] = None
    nox: Optional[float] = None
    pm_level: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)

class ThresholdBreach(BaseModel):
    gas_type: str = Field(..., description="CO2, CO, NOx or PM")
    measured_value: float
    threshold_value: float

    @classmethod
    def from_breach(cls, breach) -> "ThresholdBreach":
        return cls(
            gas_type=breach.gas_type.value,
            measured_value=breach.measured_value,
            threshold_value=breach.threshold_value,
        )

class ComplianceStatus(BaseModel):
    """
    Latest reading of a vehicle and the limits it exceeds.
    """
    vehicle_id: int
    compliant: bool
    latest: Optional[EmissionReading] = None
    breaches: List[ThresholdBreach] = Field(default_factory=list)

class MockGenerationRequest(BaseModel):
    vehicle_id: Optional[int] = Field(None, description="Vehicle to simulate")
    generate_for_all: bool = Field(False, description="Simulate every registered vehicle")

class GeneratedReading(BaseModel):
    vehicle_id: int
    reading: EmissionReading
    breaches: List[ThresholdBreach] = Field(default_factory=list)

class MockGenerationResult(BaseModel):
    generated: int = Field(..., ge=0)
    results: List[GeneratedReading]

class PopulateHistoryRequest(BaseModel):
    vehicle_id: Optional[int] = Field(None, description="Vehicle to backfill; all vehicles when omitted")
    hours_back: Optional[float] = Field(None, gt=0, description="Length of the synthetic history (configured default when omitted)")
    interval_minutes: Optional[float] = Field(None, gt=0, description="Spacing between synthetic readings (configured default when omitted)")

class BackfillSummary(BaseModel):
    vehicle_id: int
    generated: int = Field(..., ge=0)
    alerts_raised: int = Field(0, ge=0)

class PopulateHistoryResult(BaseModel):
    total_generated: int = Field(..., ge=0)
    vehicles: List[BackfillSummary]
