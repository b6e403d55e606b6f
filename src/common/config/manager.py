import os
from omegaconf import DictConfig, OmegaConf
from pathlib import Path
from typing import Optional
from .models import EmissionsConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of configuration"""

    required_keys = ['database', 'simulation', 'thresholds']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = config_dir

    def load_emissions_config(self, profile: str = "default") -> DictConfig:
        """Loads the emissions config profile and merges it over typed defaults"""
        config_path = self.config_dir / "emissions" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        return self.validate(cfg)

    def validate(self, cfg: DictConfig) -> DictConfig:
        """Checks required sections and applies schema defaults and env overrides"""
        for key in self.required_keys:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            merged = OmegaConf.merge(OmegaConf.structured(EmissionsConfig), cfg)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        rate = merged.simulation.history_alert_sample_rate
        if not 0.0 <= rate <= 1.0:
            raise ConfigurationError(f"history_alert_sample_rate must be within [0, 1], got {rate}")
        if merged.simulation.default_interval_minutes <= 0:
            raise ConfigurationError("default_interval_minutes must be positive")

        database_url: Optional[str] = os.getenv("DATABASE_URL")
        if database_url:
            merged.database.url = database_url
        return merged

    @staticmethod
    def defaults() -> DictConfig:
        return OmegaConf.structured(EmissionsConfig)
