"""Tests for logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

from config.logging_config import configure_logging


class TestConfigureLogging:
    def test_default_level_returns_app_logger(self):
        logger = configure_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "occupancy_planner"

    def test_repeated_calls_return_same_logger(self):
        assert configure_logging("DEBUG") is configure_logging(None)
