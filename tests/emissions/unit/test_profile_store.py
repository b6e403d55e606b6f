import random
from concurrent.futures import ThreadPoolExecutor
from src.emissions.domain import EMISSION_BASELINES, FuelType, Trend
from src.emissions.infrastructure.profile_store import InMemoryProfileStore


def test_profile_created_lazily(store):
    assert 1 not in store
    profile = store.get_or_create(1, "diesel")
    assert 1 in store
    assert profile.vehicle_id == 1
    assert profile.last_reading is None

def test_profile_is_stable_without_reset(store):
    first = store.get_or_create(7, "hybrid")
    for _ in range(20):
        again = store.get_or_create(7, "hybrid")
        assert again is first
        assert again.trend == first.trend
        assert again.volatility == first.volatility
        assert again.baseline == first.baseline

def test_existing_profile_ignores_new_fuel_type(store):
    first = store.get_or_create(3, "electric")
    again = store.get_or_create(3, "diesel")
    assert again.baseline == EMISSION_BASELINES[FuelType.ELECTRIC]

def test_fuel_type_lookup_is_case_insensitive(store):
    assert store.get_or_create(1, "DIESEL").baseline == EMISSION_BASELINES[FuelType.DIESEL]
    assert store.get_or_create(2, " Cng ").baseline == EMISSION_BASELINES[FuelType.CNG]

def test_unknown_fuel_type_falls_back_to_petrol(store):
    assert store.get_or_create(1, "hydrogen").baseline == EMISSION_BASELINES[FuelType.PETROL]
    assert store.get_or_create(2, "").baseline == EMISSION_BASELINES[FuelType.PETROL]
    assert store.get_or_create(3, None).baseline == EMISSION_BASELINES[FuelType.PETROL]

def test_random_choices_within_bounds(store):
    for vehicle_id in range(500):
        profile = store.get_or_create(vehicle_id, "petrol")
        assert isinstance(profile.trend, Trend)
        assert 0.1 <= profile.volatility < 0.3

def test_all_trends_reachable(store):
    trends = {store.get_or_create(i, "petrol").trend for i in range(200)}
    assert trends == set(Trend)

def test_string_and_integer_ids_are_distinct(store):
    store.get_or_create(1, "petrol")
    store.get_or_create("1", "petrol")
    assert len(store) == 2

def test_reset_removes_profile(store):
    store.get_or_create(1, "petrol")
    store.reset(1)
    assert 1 not in store
    assert store.get(1) is None

def test_reset_unknown_vehicle_is_noop(store):
    store.reset(999)
    store.reset("missing")
    assert len(store) == 0

def test_reset_draws_fresh_random_values():
    rng = random.Random(42)
    store = InMemoryProfileStore(rng=rng)
    first = store.get_or_create(1, "diesel")

    store.reset(1)
    rng.seed(42)
    second = store.get_or_create(1, "diesel")

    assert second is not first
    assert second.trend == first.trend
    assert second.volatility == first.volatility

def test_reset_consumes_new_draws(stub_random):
    rng = stub_random(values=(0.25,))
    store = InMemoryProfileStore(rng=rng)
    store.get_or_create(1, "petrol")
    calls = rng.calls

    store.get_or_create(1, "petrol")
    assert rng.calls == calls

    store.reset(1)
    store.get_or_create(1, "petrol")
    assert rng.calls == calls + 1

def test_concurrent_access_keeps_one_profile_per_vehicle(store):
    def worker(vehicle_id):
        return store.get_or_create(vehicle_id % 10, "petrol")

    with ThreadPoolExecutor(max_workers=8) as pool:
        profiles = list(pool.map(worker, range(400)))

    assert len(store) == 10
    for profile in profiles:
        assert store.get(profile.vehicle_id) is profile
