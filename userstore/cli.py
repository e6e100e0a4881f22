#!/usr/bin/env python3
"""
Manage user records stored as a JSON array in a file.

Uso:
  userstore -operation list     -fileName users.json
  userstore -operation add      -fileName users.json -item '{"id":"1","email":"a@b.c","age":30}'
  userstore -operation remove   -fileName users.json -id 1
  userstore -operation findById -fileName users.json -id 1

findById consumes the file: it is left empty when the id is found and
holding a single newline when it is not.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Dict, Sequence

from userstore.core.config import get_settings
from userstore.core.errors import UserStoreError
from userstore.domain.commands import FILE_NAME, ID, ITEM, OPERATION, OPERATIONS, PARAMETERS, validate
from userstore.services.user_service import perform

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="userstore",
        description="Manage user records stored as a JSON array in a file",
        epilog="findById leaves the file empty on a hit and holding a newline on a miss.",
        allow_abbrev=False,
    )
    ap.add_argument(f"-{OPERATION}", f"--{OPERATION}", dest=OPERATION, default="",
                    help=f"one of: {', '.join(OPERATIONS)}")
    ap.add_argument(f"-{FILE_NAME}", f"--{FILE_NAME}", dest=FILE_NAME, default="",
                    help="path to the JSON file")
    ap.add_argument(f"-{ITEM}", f"--{ITEM}", dest=ITEM, default="",
                    help='record for add, e.g. {"id":"1","email":"a@b.c","age":30}')
    ap.add_argument(f"-{ID}", f"--{ID}", dest=ID, default="",
                    help="record id for remove and findById")
    return ap


def resolve_arguments(argv: Sequence[str] | None = None) -> Dict[str, str]:
    """Map each known parameter to its string value; missing ones are empty."""
    namespace = build_parser().parse_args(argv)
    return {name: getattr(namespace, name) or "" for name in PARAMETERS}


def main(argv: Sequence[str] | None = None, sink: BinaryIO | None = None) -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    out = sink if sink is not None else sys.stdout.buffer
    invocation = validate(resolve_arguments(argv))
    perform(invocation, out)
    out.flush()


def run() -> None:
    """Console entry point: any userstore error is fatal."""
    try:
        main()
    except UserStoreError as exc:
        logger.debug("Aborting", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        raise SystemExit(1)


if __name__ == "__main__":
    run()
