from __future__ import annotations

import logging

from entity_sync.config import configure_logging


def test_verbose_logging_enables_sql_statements() -> None:
    configure_logging(level=logging.DEBUG, force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


def test_default_logging_silences_sql_statements() -> None:
    configure_logging(force=True)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
