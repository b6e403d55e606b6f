import random
from datetime import datetime
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from src.common.database import Base, init_db
from src.emissions.application.generator import ReadingGenerator
from src.emissions.application.thresholds import ThresholdEvaluator
from src.emissions.application.services.monitoring import EmissionMonitoringService
from src.emissions.infrastructure.profile_store import InMemoryProfileStore

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


class StubRandom:
    """
    Deterministic random source: random() cycles through values,
    choice() always returns the configured item when it is in the sequence.
    """
    def __init__(self, values=(0.5,), pick=None):
        self.values = list(values)
        self.pick = pick
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def choice(self, seq):
        if self.pick is not None and self.pick in seq:
            return self.pick
        return seq[0]


@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def store(rng):
    return InMemoryProfileStore(rng=rng)

@pytest.fixture
def generator(store):
    return ReadingGenerator(store)

@pytest.fixture
def evaluator():
    return ThresholdEvaluator()

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def service(session, generator, evaluator):
    return EmissionMonitoringService(
        session=session,
        generator=generator,
        evaluator=evaluator,
        history_alert_sample_rate=0.0,
        clock=lambda: FIXED_NOW,
    )

@pytest.fixture
def stub_random():
    return StubRandom
