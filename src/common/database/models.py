from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .database import Base
from ..utils import utcnow

# --- Fleet ---

class VehicleDB(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String, nullable=False, index=True)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    fuel_type = Column(String, nullable=False)
    device_id = Column(String, nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    readings = relationship("EmissionReadingDB", back_populates="vehicle", cascade="all, delete-orphan")
    alerts = relationship("AlertDB", back_populates="vehicle", cascade="all, delete-orphan")

# --- Telemetry ---

class EmissionReadingDB(Base):
    __tablename__ = "emission_readings"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
    co2 = Column(Float, nullable=True)
    co = Column(Float, nullable=True)
    nox = Column(Float, nullable=True)
    pm_level = Column(Float, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    vehicle = relationship("VehicleDB", back_populates="readings")

# --- Compliance ---

class AlertDB(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
    gas_type = Column(String, nullable=False)  # CO2, CO, NOx, PM
    measured_value = Column(Float, nullable=False)
    threshold_value = Column(Float, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    vehicle = relationship("VehicleDB", back_populates="alerts")
