"""Logging setup shared by the API and the CLI."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply the root logging configuration once per process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("drug_browser").setLevel(level.upper())
