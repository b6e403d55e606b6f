import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.database import configure_database, init_db
from src.common.logging import setup_logger, set_log_level
from src.emissions.presentation.api import app
from src.emissions.presentation.api.dependencies import init_runtime

logger = setup_logger("src.server")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    emissions_cfg = ConfigManager().validate(cfg.emissions)
    set_log_level(emissions_cfg.logging.level)
    logger.info("Configuration loaded.")

    # 1. Database
    configure_database(emissions_cfg.database.url, echo=emissions_cfg.database.echo)
    init_db()
    logger.info(f"Database ready at {emissions_cfg.database.url}")

    # 2. Simulation runtime (profile store, generator, thresholds)
    init_runtime(emissions_cfg)

    # 3. Start Server
    server_cfg = emissions_cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
