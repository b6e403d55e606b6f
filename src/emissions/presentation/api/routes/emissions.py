"""
API for emission readings, simulation and compliance.
"""
from typing import List, Optional
from fastapi import FastAPI, Depends, HTTPException, Query
from ..dependencies import get_monitoring_service, get_runtime
from ....application.builder import SimulationRuntime
from ....application.services.monitoring import EmissionMonitoringService
from .....common.exceptions import InvalidRequestError, VehicleNotFoundError
from .....common.schemas import (
    BackfillSummary, ComplianceStatus, EmissionIngest, EmissionReading, GeneratedReading,
    MockGenerationRequest, MockGenerationResult, PopulateHistoryRequest,
    PopulateHistoryResult, ThresholdBreach
)

app = FastAPI()

def _to_generated(result) -> GeneratedReading:
    return GeneratedReading(
        vehicle_id=result.vehicle_id,
        reading=EmissionReading.model_validate(result.reading),
        breaches=[ThresholdBreach.from_breach(b) for b in result.breaches],
    )

@app.get("/emissions/{vehicle_id}/latest", response_model=Optional[EmissionReading])
def latest_reading(vehicle_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    """Most recent reading, or null when the vehicle has none."""
    return service.latest_reading(vehicle_id)

@app.get("/emissions/{vehicle_id}/history", response_model=List[EmissionReading])
def reading_history(
    vehicle_id: int,
    hours_back: float = Query(24, gt=0),
    service: EmissionMonitoringService = Depends(get_monitoring_service),
):
    """Readings of the last hours_back hours, oldest first."""
    return service.reading_history(vehicle_id, hours_back)

@app.get("/emissions/{vehicle_id}/compliance", response_model=ComplianceStatus)
def compliance_status(vehicle_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    try:
        report = service.compliance_status(vehicle_id)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ComplianceStatus(
        vehicle_id=report.vehicle_id,
        compliant=report.compliant,
        latest=EmissionReading.model_validate(report.latest) if report.latest is not None else None,
        breaches=[ThresholdBreach.from_breach(b) for b in report.breaches],
    )

@app.post("/emissions/ingest", response_model=GeneratedReading)
def ingest(payload: EmissionIngest, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    """
    Entry point for IoT devices.

    Body example:
    {
        "device_id": "SENSOR-0001",
        "co2": 1200.5,
        "nox": 40.2
    }
    """
    try:
        result = service.ingest(**payload.model_dump())
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_generated(result)

@app.post("/emissions/generate-mock", response_model=MockGenerationResult)
def generate_mock(request: MockGenerationRequest, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    try:
        results = service.generate_mock(request.vehicle_id, request.generate_for_all)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MockGenerationResult(generated=len(results), results=[_to_generated(r) for r in results])

@app.post("/emissions/populate-history", response_model=PopulateHistoryResult)
def populate_history(
    request: PopulateHistoryRequest,
    service: EmissionMonitoringService = Depends(get_monitoring_service),
    runtime: SimulationRuntime = Depends(get_runtime),
):
    hours_back = request.hours_back if request.hours_back is not None else runtime.default_hours_back
    interval = request.interval_minutes if request.interval_minutes is not None else runtime.default_interval_minutes
    try:
        results = service.populate_history(request.vehicle_id, hours_back, interval)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PopulateHistoryResult(
        total_generated=sum(r.generated for r in results),
        vehicles=[
            BackfillSummary(vehicle_id=r.vehicle_id, generated=r.generated, alerts_raised=r.alerts_raised)
            for r in results
        ],
    )

@app.post("/emissions/{vehicle_id}/reset-simulation")
def reset_simulation(vehicle_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    """Next mock reading for this vehicle starts from a freshly randomized profile."""
    service.reset_simulation(vehicle_id)
    return {"status": "reset", "vehicle_id": vehicle_id}
