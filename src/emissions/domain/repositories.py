"""
Domain repositories for the Emissions module.
"""
from datetime import datetime
from typing import Any, List, Optional, Protocol
from .entities import EmissionReading, ThresholdBreach


class VehicleRepository(Protocol):
    def add(self, owner_id: str, make: str, model: str, fuel_type: str, device_id: str) -> Any:
        ...

    def get(self, vehicle_id: int) -> Optional[Any]:
        ...

    def get_by_device(self, device_id: str) -> Optional[Any]:
        ...

    def list_for_owner(self, owner_id: str) -> List[Any]:
        ...

    def list_all(self) -> List[Any]:
        ...

    def delete(self, vehicle: Any) -> None:
        ...


class ReadingRepository(Protocol):
    def save(self, reading: EmissionReading) -> Any:
        ...

    def latest(self, vehicle_id: int) -> Optional[Any]:
        ...

    def since(self, vehicle_id: int, cutoff: datetime) -> List[Any]:
        ...

    def recent(self, limit: int) -> List[Any]:
        ...


class AlertRepository(Protocol):
    def save(self, vehicle_id: int, timestamp: datetime, breach: ThresholdBreach) -> Any:
        ...

    def active(self) -> List[Any]:
        ...

    def for_vehicle(self, vehicle_id: int) -> List[Any]:
        ...

    def get(self, alert_id: int) -> Optional[Any]:
        ...
