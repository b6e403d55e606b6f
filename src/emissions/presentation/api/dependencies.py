"""
Shared runtime and per-request service wiring for the API.
"""
from typing import Optional
from fastapi import Depends, HTTPException
from omegaconf import DictConfig
from sqlalchemy.orm import Session
from ...application.builder import EmissionsApplicationBuilder, SimulationRuntime
from ...application.services.monitoring import EmissionMonitoringService
from ....common.database import get_db

# Singleton
_runtime: Optional[SimulationRuntime] = None

def init_runtime(config: Optional[DictConfig] = None) -> SimulationRuntime:
    global _runtime
    _runtime = EmissionsApplicationBuilder(config).build_runtime()
    return _runtime

def get_runtime() -> SimulationRuntime:
    if _runtime is None:
        raise HTTPException(status_code=503, detail="Simulation runtime not initialized")
    return _runtime

def get_monitoring_service(
    db: Session = Depends(get_db),
    runtime: SimulationRuntime = Depends(get_runtime),
) -> EmissionMonitoringService:
    return EmissionMonitoringService(
        session=db,
        generator=runtime.generator,
        evaluator=runtime.evaluator,
        metrics=runtime.metrics,
        history_alert_sample_rate=runtime.history_alert_sample_rate,
    )
