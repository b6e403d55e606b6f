from dataclasses import dataclass, field
from typing import Optional

@dataclass
class DatabaseConfig:
    url: str = "sqlite:///./ecotrack.db"
    echo: bool = False

@dataclass
class SimulationConfig:
    seed: Optional[int] = None
    default_hours_back: float = 24.0
    default_interval_minutes: float = 5.0
    history_alert_sample_rate: float = 0.1

@dataclass
class ThresholdConfig:
    co2: float = 1000.0
    co: float = 50.0
    nox: float = 100.0
    pm_level: float = 100.0

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class EmissionsConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
