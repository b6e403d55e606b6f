from .profile_store import InMemoryProfileStore
from .repositories import SqlAlertRepository, SqlReadingRepository, SqlVehicleRepository

__all__ = [
    'InMemoryProfileStore',
    'SqlVehicleRepository',
    'SqlReadingRepository',
    'SqlAlertRepository',
]
