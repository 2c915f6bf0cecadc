"""Singleton logging configuration.

setup_logging() configures the root logger once; later calls only adjust the
level. A level passed on the command line (explicit=True) wins over the one
read from config later in the same process.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_configured = False
_explicit = False


def setup_logging(level: str = "WARNING", *, explicit: bool = False) -> None:
    """Configure the root logger (first call) or update its level (later calls)."""
    global _configured, _explicit  # noqa: PLW0603
    if _explicit and not explicit:
        return
    if explicit:
        _explicit = True

    if not _configured:
        _configured = True
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))
