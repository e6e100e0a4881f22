"""The four record operations: list, add, remove and findById."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Dict, Type
import logging

from userstore.core.config import get_settings
from userstore.domain.commands import (
    AddUser,
    Command,
    FindUser,
    Invocation,
    ListUsers,
    RemoveUser,
)
from userstore.domain.users import decode_user, decode_users, encode_user, find_index
from userstore.repositories.json_storage import open_user_file

logger = logging.getLogger(__name__)


class UserService:
    """Runs commands against one backing file, writing results to a sink."""

    def __init__(self, file_name: str | Path, sink: BinaryIO) -> None:
        self.file_name = Path(file_name)
        self.sink = sink

    def _say(self, message: str) -> None:
        self.sink.write(message.encode(get_settings().encoding))

    def list_users(self) -> None:
        """Copy the file verbatim to the sink. A missing file is an error."""
        with open_user_file(self.file_name, create=False) as store:
            self.sink.write(store.read_raw())

    def add_user(self, item: str) -> None:
        with open_user_file(self.file_name) as store:
            raw = store.read_raw()
            user = decode_user(item)
            users = decode_users(raw, source=str(self.file_name))
            if find_index(users, user.id) is not None:
                self._say(f"Item with id {user.id} already exists")
                return
            users.append(user)
            store.save(users)
            logger.debug("Added user %s to %s", user.id, self.file_name)

    def remove_user(self, user_id: str) -> None:
        with open_user_file(self.file_name) as store:
            users = store.load()
            index = find_index(users, user_id)
            if index is None:
                self._say(f"Item with id {user_id} not found")
                return
            del users[index]
            store.save(users)
            logger.debug("Removed user %s from %s", user_id, self.file_name)

    def find_user(self, user_id: str) -> None:
        """
        Write the matching record to the sink.

        The backing file is consumed either way: on a hit it is left empty,
        on a miss it is left holding a single newline.
        """
        with open_user_file(self.file_name) as store:
            users = store.load()
            index = find_index(users, user_id)
            if index is None:
                store.replace(b"\n")
                logger.debug("User %s not in %s", user_id, self.file_name)
                return
            payload = encode_user(users[index])
            store.replace(b"")
            self.sink.write(payload)

    def run(self, command: Command) -> None:
        handler = _HANDLERS[type(command)]
        handler(self, command)


_HANDLERS: Dict[Type, Callable[[UserService, Command], None]] = {
    ListUsers: lambda svc, cmd: svc.list_users(),
    AddUser: lambda svc, cmd: svc.add_user(cmd.item),
    RemoveUser: lambda svc, cmd: svc.remove_user(cmd.user_id),
    FindUser: lambda svc, cmd: svc.find_user(cmd.user_id),
}


def perform(invocation: Invocation, sink: BinaryIO) -> None:
    """Dispatch a validated invocation to its operation."""
    logger.debug("Running %s on %s", type(invocation.command).__name__, invocation.file_name)
    UserService(invocation.file_name, sink).run(invocation.command)
