"""Typed commands built from the raw CLI parameters, and their validation."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Union

from userstore.core.errors import MissingParameterError, UnknownOperationError

OPERATION = "operation"
FILE_NAME = "fileName"
ITEM = "item"
ID = "id"

PARAMETERS = (OPERATION, FILE_NAME, ITEM, ID)

OPERATION_LIST = "list"
OPERATION_ADD = "add"
OPERATION_REMOVE = "remove"
OPERATION_FIND_BY_ID = "findById"

OPERATIONS = (OPERATION_LIST, OPERATION_ADD, OPERATION_REMOVE, OPERATION_FIND_BY_ID)


@dataclass(frozen=True)
class ListUsers:
    pass


@dataclass(frozen=True)
class AddUser:
    item: str


@dataclass(frozen=True)
class RemoveUser:
    user_id: str


@dataclass(frozen=True)
class FindUser:
    user_id: str


Command = Union[ListUsers, AddUser, RemoveUser, FindUser]


@dataclass(frozen=True)
class Invocation:
    """A validated request: which file, which command."""

    file_name: Path
    command: Command


def validate(args: Mapping[str, str]) -> Invocation:
    """
    Check mandatory parameters in order and build the Invocation.

    Does not parse the item JSON nor touch the file; those failures show up
    when the command runs.
    """
    operation = args.get(OPERATION) or ""
    if not operation:
        raise MissingParameterError(OPERATION)
    if operation not in OPERATIONS:
        raise UnknownOperationError(operation)

    file_name = args.get(FILE_NAME) or ""
    if not file_name:
        raise MissingParameterError(FILE_NAME)

    command: Command
    if operation == OPERATION_ADD:
        item = args.get(ITEM) or ""
        if not item:
            raise MissingParameterError(ITEM)
        command = AddUser(item)
    elif operation in (OPERATION_REMOVE, OPERATION_FIND_BY_ID):
        user_id = args.get(ID) or ""
        if not user_id:
            raise MissingParameterError(ID)
        command = RemoveUser(user_id) if operation == OPERATION_REMOVE else FindUser(user_id)
    else:
        command = ListUsers()

    return Invocation(file_name=Path(file_name), command=command)
