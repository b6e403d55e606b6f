import threading
import time
from dataclasses import dataclass
from typing import Dict, List


@dataclass
class SimulationMetrics:
    """Emission pipeline metrics"""
    uptime_seconds: float
    readings_generated: int
    readings_ingested: int
    alerts_raised: int
    avg_generation_time_ms: float

    def to_dict(self) -> Dict:
        return {
            'uptime_seconds': self.uptime_seconds,
            'readings_generated': self.readings_generated,
            'readings_ingested': self.readings_ingested,
            'alerts_raised': self.alerts_raised,
            'avg_generation_time_ms': self.avg_generation_time_ms
        }


class MetricsCollector:
    """Collects and aggregates emission pipeline metrics"""

    def __init__(self):
        self.generation_times: List[float] = []
        self.readings_generated = 0
        self.readings_ingested = 0
        self.alerts_raised = 0
        self.start_time = time.time()
        self._lock = threading.Lock()

    def record_generation(self, duration_ms: float, reading_count: int = 1):
        with self._lock:
            self.generation_times.append(duration_ms)
            self.readings_generated += reading_count
            # Keep buffer size manageable
            if len(self.generation_times) > 1000:
                self.generation_times.pop(0)

    def record_ingestion(self):
        with self._lock:
            self.readings_ingested += 1

    def record_alerts(self, count: int):
        with self._lock:
            self.alerts_raised += count

    def get_metrics(self) -> SimulationMetrics:
        with self._lock:
            avg_gen = sum(self.generation_times) / len(self.generation_times) if self.generation_times else 0.0
            return SimulationMetrics(
                uptime_seconds=time.time() - self.start_time,
                readings_generated=self.readings_generated,
                readings_ingested=self.readings_ingested,
                alerts_raised=self.alerts_raised,
                avg_generation_time_ms=avg_gen
            )
