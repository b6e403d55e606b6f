import logging
import pytest
from src.common.logging import log_execution_time, set_log_level, setup_logger


@pytest.fixture(autouse=True)
def restore_levels():
    yield
    set_log_level("INFO")

def test_setup_logger_is_idempotent():
    first = setup_logger("src.tests.idempotent")
    second = setup_logger("src.tests.idempotent")
    assert first is second
    assert len(first.handlers) == 1

@pytest.mark.parametrize("name", ["src.main", "src.server", "src.emissions.application.services.monitoring"])
def test_set_log_level_reaches_entry_point_loggers(name):
    logger = setup_logger(name)
    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

def test_set_log_level_leaves_foreign_loggers():
    foreign = setup_logger("thirdparty.client", level=logging.WARNING)
    set_log_level("DEBUG")
    assert foreign.level == logging.WARNING

def test_log_execution_time_reraises():
    logger = setup_logger("src.tests.timing")

    @log_execution_time(logger)
    def explode():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()
