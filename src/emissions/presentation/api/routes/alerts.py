"""
API for compliance alerts.
"""
from typing import List
from fastapi import FastAPI, Depends, HTTPException
from ..dependencies import get_monitoring_service
from ....application.services.monitoring import EmissionMonitoringService
from .....common.exceptions import AlertNotFoundError
from .....common.schemas import Alert

app = FastAPI()

@app.get("/alerts/active", response_model=List[Alert])
def active_alerts(service: EmissionMonitoringService = Depends(get_monitoring_service)):
    return service.active_alerts()

@app.get("/alerts/vehicle/{vehicle_id}", response_model=List[Alert])
def vehicle_alerts(vehicle_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    return service.vehicle_alerts(vehicle_id)

@app.post("/alerts/{alert_id}/acknowledge", response_model=Alert)
def acknowledge_alert(alert_id: int, service: EmissionMonitoringService = Depends(get_monitoring_service)):
    try:
        return service.acknowledge_alert(alert_id)
    except AlertNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
