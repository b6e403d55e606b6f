import argparse
import datetime
import os
import random
import sys

import pandas as pd

# Add src to path to import the simulator
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from src.emissions.application.generator import ReadingGenerator
from src.emissions.application.thresholds import ThresholdEvaluator
from src.emissions.infrastructure.profile_store import InMemoryProfileStore

# Simulation Configuration
FLEET = {
    # Vehicle ID : Fuel type
    1: "petrol",
    2: "diesel",
    3: "hybrid",
    4: "electric",
    5: "cng",
}

def generate_data(hours_back=24, interval_minutes=5, seed=None,
                  output_file="data/emissions/synthetic_history.csv"):
    print(f"Generating {hours_back}h of synthetic emission history every {interval_minutes} min...")

    store = InMemoryProfileStore(rng=random.Random(seed))
    generator = ReadingGenerator(store)
    evaluator = ThresholdEvaluator()
    end = datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None, second=0, microsecond=0)
    step = datetime.timedelta(minutes=interval_minutes)

    records = []
    for vehicle_id, fuel_type in FLEET.items():
        series = generator.generate_history(vehicle_id, fuel_type, hours_back, interval_minutes)
        profile = store.get(vehicle_id)
        for i, levels in enumerate(series):
            record = {
                "timestamp": end - step * (len(series) - 1 - i),
                "vehicle_id": vehicle_id,
                "fuel_type": fuel_type,
                "trend": profile.trend.value,
                "volatility": round(profile.volatility, 3),
                **levels.to_dict(),
            }
            record["breaches"] = ",".join(b.gas_type.value for b in evaluator.evaluate(levels))
            records.append(record)

    df = pd.DataFrame(records)
    df = df.sort_values(by=["timestamp", "vehicle_id"])

    print(df.head())
    print(df.groupby("fuel_type")[["co2", "co", "nox", "pm_level"]].mean().round(1))

    # Ensure output directory exists
    os.makedirs(os.path.dirname(output_file), exist_ok=True)

    df.to_csv(output_file, index=False)
    print(f"Dataset saved to {output_file}")
    return df

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export synthetic emission history to CSV")
    parser.add_argument("--hours-back", type=float, default=24)
    parser.add_argument("--interval-minutes", type=float, default=5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="data/emissions/synthetic_history.csv")
    args = parser.parse_args()
    generate_data(args.hours_back, args.interval_minutes, args.seed, args.output)
