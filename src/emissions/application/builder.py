import random
from dataclasses import dataclass
from typing import Optional
from omegaconf import DictConfig

from .generator import ReadingGenerator
from .thresholds import ThresholdEvaluator
from ..infrastructure.profile_store import InMemoryProfileStore
from ...common.config.manager import ConfigManager
from ...common.metrics import MetricsCollector
from ...common.logging import setup_logger

logger = setup_logger(__name__)


@dataclass
class SimulationRuntime:
    """
    Process-wide simulation components shared by every request.
    """
    store: InMemoryProfileStore
    generator: ReadingGenerator
    evaluator: ThresholdEvaluator
    metrics: MetricsCollector
    history_alert_sample_rate: float = 0.1
    default_hours_back: float = 24.0
    default_interval_minutes: float = 5.0


class EmissionsApplicationBuilder:
    """
    Builder pattern for constructing the emission simulation runtime.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: Optional[DictConfig] = None):
        self.config = config if config is not None else ConfigManager.defaults()
        self.simulation_cfg = self.config.simulation

        # Components
        self.store: Optional[InMemoryProfileStore] = None
        self.generator: Optional[ReadingGenerator] = None
        self.evaluator: Optional[ThresholdEvaluator] = None
        self.metrics: Optional[MetricsCollector] = None

    def build_store(self) -> 'EmissionsApplicationBuilder':
        seed = self.simulation_cfg.get('seed')
        if seed is not None:
            logger.info(f"Seeding simulation with {seed}")
        self.store = InMemoryProfileStore(rng=random.Random(seed))
        return self

    def build_generator(self) -> 'EmissionsApplicationBuilder':
        if self.store is None:
            self.build_store()
        self.generator = ReadingGenerator(self.store)
        return self

    def build_evaluator(self) -> 'EmissionsApplicationBuilder':
        self.evaluator = ThresholdEvaluator.from_config(self.config.get('thresholds', {}))
        return self

    def build_metrics(self) -> 'EmissionsApplicationBuilder':
        self.metrics = MetricsCollector()
        return self

    def build_runtime(self) -> SimulationRuntime:
        if self.generator is None:
            self.build_generator()
        if self.evaluator is None:
            self.build_evaluator()
        if self.metrics is None:
            self.build_metrics()

        return SimulationRuntime(
            store=self.store,
            generator=self.generator,
            evaluator=self.evaluator,
            metrics=self.metrics,
            history_alert_sample_rate=self.simulation_cfg.history_alert_sample_rate,
            default_hours_back=self.simulation_cfg.default_hours_back,
            default_interval_minutes=self.simulation_cfg.default_interval_minutes,
        )
