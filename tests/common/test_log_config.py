"""Tests for shopclone/common/log_config.py"""

import logging
import sys

import pytest

from shopclone.common.log_config import setup_logging


@pytest.fixture(autouse=True)
def reset_loggers():
    yield
    logger = logging.getLogger("shopclone")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


class TestSetupLogging:
    @pytest.mark.parametrize("kwargs, level", [
        ({}, logging.INFO),
        ({"verbose": True}, logging.DEBUG),
        ({"quiet": True}, logging.WARNING),
    ])
    def test_level(self, kwargs, level):
        setup_logging(**kwargs)
        assert logging.getLogger("shopclone").level == level

    def test_single_stderr_handler(self):
        setup_logging()
        setup_logging(verbose=True)

        handlers = logging.getLogger("shopclone").handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_urllib3_quiet_unless_verbose(self):
        setup_logging()
        assert logging.getLogger("urllib3").level == logging.WARNING

        setup_logging(verbose=True)
        assert logging.getLogger("urllib3").level == logging.DEBUG
