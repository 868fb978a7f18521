from __future__ import annotations

import logging
import sys
from typing import Sequence

from dotenv import load_dotenv

from docdb import App, AppInitError, Firestore, FirestoreInitError, InvalidDocumentPathError

from .args import Operation, ParseError, parse_arguments
from .operations import do_read, do_write
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INIT_FAILED = 1
EXIT_BAD_ARGS = 2


def configure_logging(level: str) -> None:
    resolved = logging.getLevelName(level)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        stream=sys.stdout,
        format="%(message)s",
        level=resolved,
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv("local.env")
    settings = get_settings()
    configure_logging(settings.log_level)

    tokens = list(sys.argv[1:] if argv is None else argv)
    try:
        args = parse_arguments(tokens)
    except ParseError as e:
        logger.error("ERROR: Invalid command-line arguments: %s", e)
        return EXIT_BAD_ARGS

    logger.info("Creating docdb.App")
    try:
        app = App.create(_app_options(settings))
    except AppInitError as e:
        logger.error("ERROR: Creating docdb.App FAILED: %s", e)
        return EXIT_INIT_FAILED

    try:
        logger.info("Creating docdb.Firestore")
        try:
            firestore = Firestore.get_instance(app)
        except FirestoreInitError as e:
            logger.error("ERROR: Creating docdb.Firestore FAILED: %s", e)
            return EXIT_INIT_FAILED

        try:
            doc = firestore.document(settings.document_path)
        except InvalidDocumentPathError as e:
            logger.error("ERROR: Resolving document FAILED: %s", e)
            return EXIT_INIT_FAILED

        payload = args.write_payload(settings.default_write_key, settings.default_write_value)
        timeout = settings.wait_timeout_seconds

        logger.info("Performing %d operations on document: %s", len(args.operations), doc.path)
        for operation in args.operations:
            if operation is Operation.READ:
                do_read(doc, timeout=timeout)
            elif operation is Operation.WRITE:
                do_write(doc, payload, timeout=timeout)
            else:
                logger.error("INTERNAL ERROR: unknown value for operation: %r", operation)
                return EXIT_INIT_FAILED
        return EXIT_OK
    finally:
        app.delete()


def _app_options(settings: Settings) -> dict[str, object]:
    return {
        "project_id": settings.project_id,
        "data_dir": settings.data_dir,
        "persist_to_disk": settings.persist_to_disk,
    }


def run() -> None:
    sys.exit(main())
