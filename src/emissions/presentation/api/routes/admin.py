"""
Fleet-wide views for administrators.
"""
from typing import List
from fastapi import FastAPI, Depends, Query
from ..dependencies import get_monitoring_service
from ....application.services.monitoring import EmissionMonitoringService, MAX_RECENT_READINGS
from .....common.schemas import EmissionReading, SystemStats, Vehicle

app = FastAPI()

@app.get("/admin/stats", response_model=SystemStats)
def stats(service: EmissionMonitoringService = Depends(get_monitoring_service)):
    return SystemStats(**service.system_stats())

@app.get("/admin/vehicles", response_model=List[Vehicle])
def all_vehicles(service: EmissionMonitoringService = Depends(get_monitoring_service)):
    return service.list_all_vehicles()

@app.get("/admin/readings", response_model=List[EmissionReading])
def recent_readings(
    limit: int = Query(50, ge=1, le=MAX_RECENT_READINGS),
    service: EmissionMonitoringService = Depends(get_monitoring_service),
):
    return service.recent_readings(limit)
