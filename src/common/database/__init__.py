from .database import (
    SessionLocal, Base, get_db, init_db, create_db_engine, configure_database
)
from .models import VehicleDB, EmissionReadingDB, AlertDB

__all__ = [
    "SessionLocal", "Base", "get_db", "init_db",
    "create_db_engine", "configure_database",
    "VehicleDB", "EmissionReadingDB", "AlertDB"
]
