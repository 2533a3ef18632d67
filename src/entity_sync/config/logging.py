"""Shared logging helpers for entity-sync."""

from __future__ import annotations

import logging

SQLALCHEMY_LOGGER = "sqlalchemy.engine"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Set up the root logger for command-line runs.

    SQL statement logging stays at WARNING unless ``level`` asks for DEBUG output.
    ``force=True`` replaces handlers installed earlier (tests, notebooks).
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger(SQLALCHEMY_LOGGER).setLevel(
        logging.INFO if level <= logging.DEBUG else logging.WARNING
    )
