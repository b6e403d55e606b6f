"""
Domain protocols for the Emissions module.
"""
from typing import Any, Optional, Protocol, Sequence
from .entities import VehicleKey, VehicleProfile


class RandomSource(Protocol):
    """
    Source of uniform draws. random.Random satisfies it.
    """
    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[Any]) -> Any:
        ...


class ProfileStore(Protocol):
    """
    Holds exactly one simulation profile per vehicle.
    """
    def get_or_create(self, vehicle_id: VehicleKey, fuel_type: Optional[str]) -> VehicleProfile:
        ...

    def reset(self, vehicle_id: VehicleKey) -> None:
        ...
