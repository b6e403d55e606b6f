"""
Application service that ties the simulator to the fleet database.

Resolves vehicles, persists readings, raises alerts for threshold breaches and
answers the dashboard queries. Every mutating call runs in its own transaction.
"""
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..generator import ReadingGenerator
from ..thresholds import ThresholdEvaluator
from ...domain import EmissionReading, ThresholdBreach
from ...infrastructure.repositories import (
    SqlAlertRepository, SqlReadingRepository, SqlVehicleRepository
)
from ....common.exceptions import (
    AlertNotFoundError, DuplicateDeviceError, InvalidRequestError, VehicleNotFoundError
)
from ....common.logging import log_execution_time, setup_logger
from ....common.metrics import MetricsCollector
from ....common.utils import utcnow

logger = setup_logger(__name__)

MAX_RECENT_READINGS = 100
STATS_WINDOW = timedelta(hours=24)


@dataclass
class GenerationResult:
    vehicle_id: int
    reading: Any  # EmissionReadingDB
    breaches: List[ThresholdBreach] = field(default_factory=list)


@dataclass
class BackfillResult:
    vehicle_id: int
    generated: int
    alerts_raised: int = 0


@dataclass
class ComplianceReport:
    vehicle_id: int
    latest: Optional[Any]  # EmissionReadingDB
    breaches: List[ThresholdBreach] = field(default_factory=list)

    @property
    def compliant(self) -> bool:
        return not self.breaches


class EmissionMonitoringService:
    """
    Orchestrates vehicles, readings and alerts around the reading generator.
    """
    def __init__(
        self,
        session: Session,
        generator: ReadingGenerator,
        evaluator: ThresholdEvaluator,
        metrics: Optional[MetricsCollector] = None,
        history_alert_sample_rate: float = 0.1,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.session = session
        self.generator = generator
        self.evaluator = evaluator
        self.metrics = metrics
        self.history_alert_sample_rate = history_alert_sample_rate
        self.clock = clock

        self.vehicles = SqlVehicleRepository(session)
        self.readings = SqlReadingRepository(session)
        self.alerts = SqlAlertRepository(session)

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    # --- Vehicles ---

    def register_vehicle(self, owner_id: str, make: str, model: str, fuel_type: str, device_id: str):
        if self.vehicles.get_by_device(device_id) is not None:
            raise DuplicateDeviceError(f"Device {device_id} is already registered")
        try:
            with self._transaction():
                vehicle = self.vehicles.add(owner_id, make, model, fuel_type, device_id)
        except IntegrityError as e:
            raise DuplicateDeviceError(f"Device {device_id} is already registered") from e
        logger.info(f"Registered vehicle {vehicle.id} ({fuel_type}) with device {device_id}")
        return vehicle

    def get_vehicle(self, vehicle_id: int):
        vehicle = self.vehicles.get(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def list_vehicles(self, owner_id: str) -> List[Any]:
        return self.vehicles.list_for_owner(owner_id)

    def list_all_vehicles(self) -> List[Any]:
        return self.vehicles.list_all()

    def delete_vehicle(self, vehicle_id: int, owner_id: str) -> None:
        vehicle = self.vehicles.get(vehicle_id)
        if vehicle is None or vehicle.owner_id != owner_id:
            raise VehicleNotFoundError(
                f"Vehicle {vehicle_id} not found or you don't have permission to delete it"
            )
        with self._transaction():
            self.vehicles.delete(vehicle)
        self.generator.store.reset(vehicle_id)
        logger.info(f"Deleted vehicle {vehicle_id}")

    # --- Readings ---

    def ingest(
        self,
        device_id: str,
        co2: Optional[float] = None,
        co: Optional[float] = None,
        nox: Optional[float] = None,
        pm_level: Optional[float] = None,
    ) -> GenerationResult:
        """
        Stores a device reading and raises one alert per exceeded gas.
        """
        vehicle = self.vehicles.get_by_device(device_id)
        if vehicle is None:
            raise VehicleNotFoundError(f"No vehicle registered for device {device_id}")

        reading = EmissionReading(
            vehicle_id=vehicle.id,
            timestamp=self.clock(),
            co2=co2,
            co=co,
            nox=nox,
            pm_level=pm_level,
        )
        with self._transaction():
            row = self.readings.save(reading)
            breaches = self._raise_alerts(vehicle.id, reading)

        if self.metrics:
            self.metrics.record_ingestion()
        logger.debug(f"Ingested reading {row.id} for vehicle {vehicle.id} from {device_id}")
        return GenerationResult(vehicle_id=vehicle.id, reading=row, breaches=breaches)

    def latest_reading(self, vehicle_id: int):
        return self.readings.latest(vehicle_id)

    def reading_history(self, vehicle_id: int, hours_back: float = 24) -> List[Any]:
        if hours_back <= 0:
            raise InvalidRequestError("hours_back must be positive")
        cutoff = self.clock() - timedelta(hours=hours_back)
        return self.readings.since(vehicle_id, cutoff)

    def recent_readings(self, limit: int = 50) -> List[Any]:
        if not 1 <= limit <= MAX_RECENT_READINGS:
            raise InvalidRequestError(f"limit must be between 1 and {MAX_RECENT_READINGS}")
        return self.readings.recent(limit)

    # --- Simulation ---

    def generate_mock(self, vehicle_id: Optional[int] = None, generate_for_all: bool = False) -> List[GenerationResult]:
        """
        Simulates one reading for a vehicle, or for every vehicle.
        """
        if generate_for_all:
            vehicles = self.vehicles.list_all()
        elif vehicle_id is not None:
            vehicles = [self.get_vehicle(vehicle_id)]
        else:
            raise InvalidRequestError("Either vehicle_id or generate_for_all must be provided")

        results = []
        with self._transaction():
            for vehicle in vehicles:
                results.append(self._simulate(vehicle))
        logger.debug(f"Generated {len(results)} mock readings")
        return results

    @log_execution_time(logger)
    def populate_history(
        self,
        vehicle_id: Optional[int] = None,
        hours_back: float = 24,
        interval_minutes: float = 5,
    ) -> List[BackfillResult]:
        """
        Backfills synthetic history for one vehicle, or for every vehicle.

        Single-vehicle backfills raise alerts for a random sample of the
        generated readings; fleet-wide backfills raise none.
        """
        if hours_back < 0:
            raise InvalidRequestError("hours_back must not be negative")
        if interval_minutes <= 0:
            raise InvalidRequestError("interval_minutes must be positive")

        if vehicle_id is not None:
            targets = [(self.get_vehicle(vehicle_id), True)]
        else:
            targets = [(vehicle, False) for vehicle in self.vehicles.list_all()]

        results = []
        with self._transaction():
            for vehicle, raise_alerts in targets:
                results.append(self._backfill(vehicle, hours_back, interval_minutes, raise_alerts))

        total = sum(r.generated for r in results)
        logger.info(
            f"Backfilled {total} readings over {hours_back}h "
            f"every {interval_minutes}min for {len(results)} vehicle(s)"
        )
        return results

    def reset_simulation(self, vehicle_id: int) -> None:
        self.generator.store.reset(vehicle_id)
        logger.info(f"Reset simulation profile for vehicle {vehicle_id}")

    def _simulate(self, vehicle) -> GenerationResult:
        start = time.perf_counter()
        levels = self.generator.generate(vehicle.id, vehicle.fuel_type)
        if self.metrics:
            self.metrics.record_generation((time.perf_counter() - start) * 1000)

        reading = EmissionReading.from_levels(vehicle.id, self.clock(), levels)
        row = self.readings.save(reading)
        breaches = self._raise_alerts(vehicle.id, reading)
        return GenerationResult(vehicle_id=vehicle.id, reading=row, breaches=breaches)

    def _backfill(self, vehicle, hours_back: float, interval_minutes: float, raise_alerts: bool) -> BackfillResult:
        start = time.perf_counter()
        series = self.generator.generate_history(vehicle.id, vehicle.fuel_type, hours_back, interval_minutes)
        if self.metrics:
            # Recorded per reading
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.metrics.record_generation(elapsed_ms / len(series), len(series))

        # Oldest first, the newest reading lands on "now"
        now = self.clock()
        step = timedelta(minutes=interval_minutes)
        readings = [
            EmissionReading.from_levels(vehicle.id, now - step * (len(series) - 1 - i), levels)
            for i, levels in enumerate(series)
        ]
        self.readings.save_many(readings)

        alerts_raised = 0
        if raise_alerts:
            for reading in readings:
                if self.generator.rng.random() < self.history_alert_sample_rate:
                    alerts_raised += len(self._raise_alerts(vehicle.id, reading))
        return BackfillResult(vehicle_id=vehicle.id, generated=len(readings), alerts_raised=alerts_raised)

    # --- Alerts ---

    def _raise_alerts(self, vehicle_id: int, reading: EmissionReading) -> List[ThresholdBreach]:
        breaches = self.evaluator.evaluate(reading)
        for breach in breaches:
            self.alerts.save(vehicle_id, reading.timestamp, breach)
            logger.warning(
                f"Vehicle {vehicle_id}: {breach.gas_type.value} at {breach.measured_value} "
                f"exceeds {breach.threshold_value}"
            )
        if breaches and self.metrics:
            self.metrics.record_alerts(len(breaches))
        return breaches

    def active_alerts(self) -> List[Any]:
        return self.alerts.active()

    def vehicle_alerts(self, vehicle_id: int) -> List[Any]:
        return self.alerts.for_vehicle(vehicle_id)

    def acknowledge_alert(self, alert_id: int):
        alert = self.alerts.get(alert_id)
        if alert is None:
            raise AlertNotFoundError(f"Alert {alert_id} not found")
        with self._transaction():
            alert.is_active = False
        return alert

    # --- Dashboards ---

    def compliance_status(self, vehicle_id: int) -> ComplianceReport:
        self.get_vehicle(vehicle_id)
        latest = self.readings.latest(vehicle_id)
        breaches = self.evaluator.evaluate(latest) if latest is not None else []
        return ComplianceReport(vehicle_id=vehicle_id, latest=latest, breaches=breaches)

    def system_stats(self) -> Dict[str, int]:
        return {
            'total_owners': self.vehicles.count_owners(),
            'total_vehicles': self.vehicles.count(),
            'total_readings': self.readings.count(),
            'total_alerts': self.alerts.count(),
            'active_alerts': self.alerts.count(active_only=True),
            'recent_readings': self.readings.count(since=self.clock() - STATS_WINDOW),
        }
