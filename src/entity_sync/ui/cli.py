from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from entity_sync.adapters.sqlalchemy import mapped_metadata, shutdown, startup
from entity_sync.app import synchronize_records
from entity_sync.config import configure_logging
from entity_sync.domain.model import Operation, SyncOutcome
from entity_sync.ui.schema import SyncPayload

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from entity_sync.domain.model import SynchronizeResult

log = logging.getLogger(__name__)

EXIT_FAILED = 1
EXIT_USAGE = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise stored entities from a JSON file of records"
    )
    parser.add_argument(
        "operation",
        choices=[operation.value for operation in Operation],
        help="Reconciliation to run against the database",
    )
    parser.add_argument(
        "--entity",
        required=True,
        help="Mapped entity class as 'package.module:ClassName'",
    )
    parser.add_argument(
        "--dto",
        required=True,
        help="Transfer object class as 'package.module:ClassName'",
    )
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="JSON file with a list of records or an object with a 'records' list",
    )
    parser.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the data directory)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create the entity's tables before synchronising",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including SQL statements",
    )
    return parser.parse_args(list(argv))


def _import_class(path: str) -> type[Any]:
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:ClassName', got: {path}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import module: {module_name}") from exc
    target = getattr(module, attribute, None)
    if not isinstance(target, type):
        raise ValueError(f"{path} is not a class")
    return target


def _exit_code(result: SynchronizeResult) -> int:
    if result.outcome is SyncOutcome.FAILED:
        return EXIT_FAILED
    if result.outcome is SyncOutcome.REJECTED:
        return EXIT_USAGE
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        entity_type = _import_class(parsed_args.entity)
        dto_type = _import_class(parsed_args.dto)
        records = SyncPayload.from_file(parsed_args.input).to_dtos(dto_type)
    except (OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(EXIT_USAGE)

    try:
        startup(
            database_uri=parsed_args.database_uri,
            metadata=mapped_metadata(entity_type) if parsed_args.create_tables else None,
            force=True,
        )
        result = synchronize_records(
            entity_type=entity_type,
            records=records,
            operation=parsed_args.operation,
        )
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(EXIT_FAILED)
    finally:
        shutdown()

    if result.is_no_op:
        log.warning("Nothing to do: %s", result.message)
    else:
        log.info("%s", result.message)
    code = _exit_code(result)
    if code:
        sys.exit(code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
