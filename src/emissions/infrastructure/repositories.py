from datetime import datetime
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from ..domain import (
    AlertRepository, EmissionReading, ReadingRepository, ThresholdBreach, VehicleRepository
)
from ...common.database.models import AlertDB, EmissionReadingDB, VehicleDB


class SqlVehicleRepository(VehicleRepository):
    """
    Vehicles stored through SQLAlchemy.
    """
    def __init__(self, session: Session):
        self.session = session

    def add(self, owner_id: str, make: str, model: str, fuel_type: str, device_id: str) -> VehicleDB:
        vehicle = VehicleDB(
            owner_id=owner_id,
            make=make,
            model=model,
            fuel_type=fuel_type,
            device_id=device_id,
        )
        self.session.add(vehicle)
        self.session.flush()
        return vehicle

    def get(self, vehicle_id: int) -> Optional[VehicleDB]:
        return self.session.get(VehicleDB, vehicle_id)

    def get_by_device(self, device_id: str) -> Optional[VehicleDB]:
        return self.session.query(VehicleDB).filter(VehicleDB.device_id == device_id).first()

    def list_for_owner(self, owner_id: str) -> List[VehicleDB]:
        return (
            self.session.query(VehicleDB)
            .filter(VehicleDB.owner_id == owner_id)
            .order_by(VehicleDB.created_at.desc(), VehicleDB.id.desc())
            .all()
        )

    def list_all(self) -> List[VehicleDB]:
        return self.session.query(VehicleDB).order_by(VehicleDB.id).all()

    def delete(self, vehicle: VehicleDB) -> None:
        self.session.delete(vehicle)
        self.session.flush()

    def count(self) -> int:
        return self.session.query(func.count(VehicleDB.id)).scalar() or 0

    def count_owners(self) -> int:
        return self.session.query(func.count(func.distinct(VehicleDB.owner_id))).scalar() or 0


class SqlReadingRepository(ReadingRepository):
    """
    Emission readings stored through SQLAlchemy.
    """
    def __init__(self, session: Session):
        self.session = session

    def save(self, reading: EmissionReading) -> EmissionReadingDB:
        row = EmissionReadingDB(
            vehicle_id=reading.vehicle_id,
            timestamp=reading.timestamp,
            co2=reading.co2,
            co=reading.co,
            nox=reading.nox,
            pm_level=reading.pm_level,
        )
        self.session.add(row)
        self.session.flush()
        return row

    def save_many(self, readings: List[EmissionReading]) -> List[EmissionReadingDB]:
        rows = [
            EmissionReadingDB(
                vehicle_id=r.vehicle_id,
                timestamp=r.timestamp,
                co2=r.co2,
                co=r.co,
                nox=r.nox,
                pm_level=r.pm_level,
            )
            for r in readings
        ]
        self.session.add_all(rows)
        self.session.flush()
        return rows

    def latest(self, vehicle_id: int) -> Optional[EmissionReadingDB]:
        return (
            self.session.query(EmissionReadingDB)
            .filter(EmissionReadingDB.vehicle_id == vehicle_id)
            .order_by(EmissionReadingDB.timestamp.desc(), EmissionReadingDB.id.desc())
            .first()
        )

    def since(self, vehicle_id: int, cutoff: datetime) -> List[EmissionReadingDB]:
        return (
            self.session.query(EmissionReadingDB)
            .filter(
                EmissionReadingDB.vehicle_id == vehicle_id,
                EmissionReadingDB.timestamp >= cutoff,
            )
            .order_by(EmissionReadingDB.timestamp.asc(), EmissionReadingDB.id.asc())
            .all()
        )

    def recent(self, limit: int) -> List[EmissionReadingDB]:
        return (
            self.session.query(EmissionReadingDB)
            .order_by(EmissionReadingDB.timestamp.desc(), EmissionReadingDB.id.desc())
            .limit(limit)
            .all()
        )

    def count(self, since: Optional[datetime] = None) -> int:
        query = self.session.query(func.count(EmissionReadingDB.id))
        if since is not None:
            query = query.filter(EmissionReadingDB.timestamp >= since)
        return query.scalar() or 0


class SqlAlertRepository(AlertRepository):
    """
    Alerts stored through SQLAlchemy.
    """
    def __init__(self, session: Session):
        self.session = session

    def save(self, vehicle_id: int, timestamp: datetime, breach: ThresholdBreach) -> AlertDB:
        alert = AlertDB(
            vehicle_id=vehicle_id,
            timestamp=timestamp,
            gas_type=breach.gas_type.value,
            measured_value=breach.measured_value,
            threshold_value=breach.threshold_value,
            is_active=True,
        )
        self.session.add(alert)
        self.session.flush()
        return alert

    def get(self, alert_id: int) -> Optional[AlertDB]:
        return self.session.get(AlertDB, alert_id)

    def active(self) -> List[AlertDB]:
        return (
            self.session.query(AlertDB)
            .filter(AlertDB.is_active.is_(True))
            .order_by(AlertDB.timestamp.desc(), AlertDB.id.desc())
            .all()
        )

    def for_vehicle(self, vehicle_id: int) -> List[AlertDB]:
        return (
            self.session.query(AlertDB)
            .filter(AlertDB.vehicle_id == vehicle_id)
            .order_by(AlertDB.timestamp.desc(), AlertDB.id.desc())
            .all()
        )

    def count(self, active_only: bool = False) -> int:
        query = self.session.query(func.count(AlertDB.id))
        if active_only:
            query = query.filter(AlertDB.is_active.is_(True))
        return query.scalar() or 0
