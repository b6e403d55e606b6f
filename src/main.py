import argparse
import sys
import os

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number

def main():
    """
    Main entry point for the EcoTrack application.
    """
    parser = argparse.ArgumentParser(description="EcoTrack - Vehicle Emission Monitor")
    parser.add_argument('module', choices=['server', 'simulate'], help="Module to run")
    parser.add_argument('--vehicle-id', default="1", help="Vehicle to simulate")
    parser.add_argument('--fuel-type', default="petrol", help="Fuel type of the simulated vehicle")
    parser.add_argument('--steps', type=positive_int, default=10, help="Number of readings to simulate (at least 1)")

    args, unknown = parser.parse_known_args()

    from omegaconf import OmegaConf
    from src.common.config.manager import ConfigManager
    from src.common.logging import setup_logger, set_log_level

    logger = setup_logger("src.main")

    # Load configuration and merge with CLI overrides (e.g. simulation.seed=7)
    manager = ConfigManager()
    try:
        base_cfg = manager.load_emissions_config()
    except FileNotFoundError:
        logger.warning("conf/emissions/default.yaml not found, using defaults.")
        base_cfg = manager.defaults()
    cfg = manager.validate(OmegaConf.merge(base_cfg, OmegaConf.from_dotlist(unknown)))
    set_log_level(cfg.logging.level)

    logger.info(f"Starting module: {args.module}")

    if args.module == 'server':
        import uvicorn
        from src.common.database import configure_database, init_db
        from src.emissions.presentation.api import app
        from src.emissions.presentation.api.dependencies import init_runtime

        configure_database(cfg.database.url, echo=cfg.database.echo)
        init_db()
        init_runtime(cfg)
        uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)

    elif args.module == 'simulate':
        from src.emissions.application.builder import EmissionsApplicationBuilder

        runtime = EmissionsApplicationBuilder(cfg).build_runtime()
        vehicle_id = int(args.vehicle_id) if args.vehicle_id.isdigit() else args.vehicle_id

        for step in range(args.steps):
            levels = runtime.generator.generate(vehicle_id, args.fuel_type)
            breaches = runtime.evaluator.evaluate(levels)
            flags = ", ".join(f"{b.gas_type.value}>{b.threshold_value:g}" for b in breaches) or "compliant"
            print(
                f"[{step:03d}] co2={levels.co2:7.1f} co={levels.co:5.1f} "
                f"nox={levels.nox:6.1f} pm={levels.pm_level:6.1f}  {flags}"
            )

        profile = runtime.store.get(vehicle_id)
        print(f"Profile: trend={profile.trend.value} volatility={profile.volatility:.3f}")

if __name__ == "__main__":
    main()
