import logging

import pytest

from leastsquaresregression.__main__ import main
from leastsquaresregression.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.handlers[-1].flush()
    assert "Logging initialized at level DEBUG" in log_file.read_text(encoding="utf-8")


def test_cli_writes_fit_to_log_file(tmp_path):
    log_file = tmp_path / "cli.log"
    main(["--points", "12", "--seed", "3", "--angle", "30", "--intercept", "5", "--log-file", str(log_file)])

    for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "My line: y = 0.58 x + 5.00" in text
    assert "Best fit line: y = " in text
    assert "r = " in text
