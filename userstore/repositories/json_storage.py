"""
JSON-file persistence adapter.

The whole collection lives in one file as a JSON array. Every operation
opens the file, reads it in full and, when it mutates, truncates and
rewrites it from offset 0. There is no locking and no atomic rename: an
interrupted rewrite leaves the file truncated.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator
import logging
import os

from userstore.core.config import get_settings
from userstore.core.errors import FileOpenError, FileReadError, FileWriteError
from userstore.domain.users import User, decode_users, encode_users

logger = logging.getLogger(__name__)


class UserFile:
    """An open backing file. Only valid inside open_user_file()."""

    def __init__(self, path: Path, handle: BinaryIO) -> None:
        self.path = path
        self._handle = handle

    def read_raw(self) -> bytes:
        try:
            return self._handle.read()
        except OSError as exc:
            raise FileReadError(self.path, exc) from exc

    def load(self) -> list[User]:
        users = decode_users(self.read_raw(), source=str(self.path))
        logger.debug("Loaded %d users from %s", len(users), self.path)
        return users

    def replace(self, payload: bytes) -> None:
        """Truncate the file and write payload from the start."""
        try:
            self._handle.truncate(0)
            self._handle.seek(0)
            self._handle.write(payload)
            self._handle.flush()
        except OSError as exc:
            raise FileWriteError(self.path, exc) from exc
        logger.debug("Rewrote %s with %d bytes", self.path, len(payload))

    def save(self, users: list[User]) -> None:
        self.replace(encode_users(users))


@contextmanager
def open_user_file(path: str | os.PathLike, *, create: bool = True) -> Iterator[UserFile]:
    """
    Open path for the duration of one operation.

    create=True opens read-write and creates a missing file with the
    configured mode; create=False opens read-only and fails on a missing
    file. The handle is closed on every exit path. A failing close is
    logged and never replaces the operation's own outcome.
    """
    target = Path(path)
    flags = os.O_RDWR | os.O_CREAT if create else os.O_RDONLY
    try:
        fd = os.open(target, flags, get_settings().file_mode)
    except OSError as exc:
        raise FileOpenError(target, exc) from exc
    try:
        handle = os.fdopen(fd, "r+b" if create else "rb")
    except BaseException:
        os.close(fd)
        raise
    logger.debug("Opened %s (%s)", target, "read-write" if create else "read-only")
    try:
        yield UserFile(target, handle)
    finally:
        try:
            handle.close()
        except OSError as exc:
            logger.warning("Failed to close %s: %s", target, exc)
