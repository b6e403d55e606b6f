import random
import threading
from typing import Dict, Optional
from ..domain import (
    ProfileStore, RandomSource, Trend, VehicleKey, VehicleProfile, baseline_for
)

MIN_VOLATILITY = 0.1
VOLATILITY_SPAN = 0.2


class InMemoryProfileStore(ProfileStore):
    """
    Keeps simulation profiles in process memory, one per vehicle id.
    Profiles live until reset() or until the process exits.
    """
    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else random.Random()
        self._profiles: Dict[VehicleKey, VehicleProfile] = {}
        self._lock = threading.Lock()

    def get_or_create(self, vehicle_id: VehicleKey, fuel_type: Optional[str]) -> VehicleProfile:
        with self._lock:
            profile = self._profiles.get(vehicle_id)
            if profile is None:
                profile = VehicleProfile(
                    vehicle_id=vehicle_id,
                    baseline=baseline_for(fuel_type),
                    trend=self.rng.choice(list(Trend)),
                    volatility=MIN_VOLATILITY + self.rng.random() * VOLATILITY_SPAN,
                )
                self._profiles[vehicle_id] = profile
            return profile

    def get(self, vehicle_id: VehicleKey) -> Optional[VehicleProfile]:
        with self._lock:
            return self._profiles.get(vehicle_id)

    def reset(self, vehicle_id: VehicleKey) -> None:
        with self._lock:
            self._profiles.pop(vehicle_id, None)

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, vehicle_id: VehicleKey) -> bool:
        return vehicle_id in self._profiles
