"""Error hierarchy raised by the validator, repository and services."""

from __future__ import annotations

from os import PathLike


class UserStoreError(Exception):
    """Base exception for every userstore failure."""


class MissingParameterError(UserStoreError):
    """Raised when a mandatory parameter is absent or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"-{name} flag has to be specified")
        self.name = name


class UnknownOperationError(UserStoreError):
    """Raised when the operation name is not one of the supported ones."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Operation {name} not allowed!")
        self.name = name


class StorageError(UserStoreError):
    """Base for failures touching the backing file."""

    action = "access"

    def __init__(self, path: str | PathLike, reason: object = None) -> None:
        message = f"could not {self.action} {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path


class FileOpenError(StorageError):
    action = "open"


class FileReadError(StorageError):
    action = "read"


class FileWriteError(StorageError):
    action = "write"


class DecodeError(UserStoreError):
    """Raised when the file content or the item parameter is not valid user JSON."""

    def __init__(self, source: str, reason: object) -> None:
        super().__init__(f"invalid JSON in {source}: {reason}")
        self.source = source


class EncodeError(UserStoreError):
    """Raised when records cannot be serialized back to JSON."""
