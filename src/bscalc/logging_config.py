# bscalc/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once at program start (stderr)."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
