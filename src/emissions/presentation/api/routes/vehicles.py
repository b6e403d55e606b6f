"""
API for registering and managing vehicles.
"""
from typing import List
from fastapi import FastAPI, Depends, HTTPException, Query
from ..dependencies import get_monitoring_service
from ....application.services.monitoring import EmissionMonitoringService
from .....common.exceptions import DuplicateDeviceError, VehicleNotFoundError
from .....common.schemas import Vehicle, VehicleCreate

app = FastAPI()

@app.get("/vehicles", response_model=List[Vehicle])
def list_vehicles(
    owner_id: str = Query(..., min_length=1),
    service: EmissionMonitoringService = Depends(get_monitoring_service),
):
    """Vehicles owned by a user, newest first."""
    return service.list_vehicles(owner_id)

@app.get("/vehicles/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    try:
        return service.get_vehicle(vehicle_id)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.post("/vehicles", response_model=Vehicle, status_code=201)
def create_vehicle(payload: VehicleCreate, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    """
    Registers a vehicle and binds its emission sensor.

    Body example:
    {
        "owner_id": "user-42",
        "make": "Toyota",
        "model": "Hilux",
        "fuel_type": "diesel",
        "device_id": "SENSOR-0001"
    }
    """
    try:
        return service.register_vehicle(**payload.model_dump())
    except DuplicateDeviceError as e:
        raise HTTPException(status_code=409, detail=str(e))

@app.delete("/vehicles/{vehicle_id}")
def delete_vehicle(
    vehicle_id: int,
    owner_id: str = Query(..., min_length=1),
    service: EmissionMonitoringService = Depends(get_monitoring_service),
):
    try:
        service.delete_vehicle(vehicle_id, owner_id)
    except VehicleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "deleted", "vehicle_id": vehicle_id}
