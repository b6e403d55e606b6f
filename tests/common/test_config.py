import pytest
from pathlib import Path
from omegaconf import OmegaConf
from src.common.config.manager import ConfigManager
from src.common.exceptions import ConfigurationError

CONF_DIR = Path(__file__).resolve().parents[2] / "conf"


def test_defaults():
    cfg = ConfigManager.defaults()
    assert cfg.simulation.seed is None
    assert cfg.simulation.history_alert_sample_rate == 0.1
    assert cfg.thresholds.co2 == 1000.0
    assert cfg.thresholds.pm_level == 100.0

def test_load_shipped_profile(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = ConfigManager(CONF_DIR).load_emissions_config()
    assert cfg.simulation.default_hours_back == 24
    assert cfg.simulation.default_interval_minutes == 5
    assert cfg.database.url == "sqlite:///./ecotrack.db"

def test_missing_profile(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(tmp_path).load_emissions_config("missing")

def test_missing_section():
    cfg = OmegaConf.create({"database": {}, "simulation": {}})
    with pytest.raises(ConfigurationError, match="thresholds"):
        ConfigManager().validate(cfg)

def test_partial_sections_get_defaults():
    cfg = OmegaConf.create({"database": {}, "simulation": {"seed": 7}, "thresholds": {"co": 40}})
    merged = ConfigManager().validate(cfg)
    assert merged.simulation.seed == 7
    assert merged.thresholds.co == 40
    assert merged.thresholds.nox == 100.0
    assert merged.server.port == 8000

@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_sample_rate_out_of_range(rate):
    cfg = OmegaConf.create({
        "database": {}, "thresholds": {},
        "simulation": {"history_alert_sample_rate": rate},
    })
    with pytest.raises(ConfigurationError):
        ConfigManager().validate(cfg)

def test_non_positive_interval():
    cfg = OmegaConf.create({
        "database": {}, "thresholds": {},
        "simulation": {"default_interval_minutes": 0},
    })
    with pytest.raises(ConfigurationError):
        ConfigManager().validate(cfg)

def test_invalid_value_type():
    cfg = OmegaConf.create({"database": {}, "thresholds": {"co2": "lots"}, "simulation": {}})
    with pytest.raises(ConfigurationError):
        ConfigManager().validate(cfg)

def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./override.db")
    cfg = ConfigManager().validate(OmegaConf.create({"database": {}, "simulation": {}, "thresholds": {}}))
    assert cfg.database.url == "sqlite:///./override.db"
