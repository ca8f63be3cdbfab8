"""Logging setup for the Occupancy Planner."""

import logging
import os
from typing import Optional

from config.defaults import LOG_FORMAT, LOG_LEVEL, LOG_LEVEL_ENV_VAR

_configured = False


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging once per process and return the app logger.

    Streamlit reruns the script on every interaction, so repeated calls are
    ignored after the first one.
    """
    global _configured
    if not _configured:
        level_name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or LOG_LEVEL).upper()
        logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
        _configured = True
    return logging.getLogger("occupancy_planner")
