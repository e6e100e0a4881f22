"""User record model and the JSON codec for collections of them."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from userstore.core.errors import DecodeError, EncodeError


class User(BaseModel):
    """One entry of the collection. Missing fields keep their zero value."""

    model_config = ConfigDict(strict=True, extra="ignore")

    id: str = ""
    email: str = ""
    age: int = 0


# null decodes to an empty collection / a zero-valued User
_collection = TypeAdapter(Optional[List[User]])
_single = TypeAdapter(Optional[User])

# HTML-sensitive characters and line/paragraph separators are written as
# \u escapes. They can only occur inside JSON strings here.
_ESCAPES = (
    (b"<", b"\\u003c"),
    (b">", b"\\u003e"),
    (b"&", b"\\u0026"),
    ("\u2028".encode("utf-8"), b"\\u2028"),
    ("\u2029".encode("utf-8"), b"\\u2029"),
)


def _escape(payload: bytes) -> bytes:
    for raw, escaped in _ESCAPES:
        payload = payload.replace(raw, escaped)
    return payload


def decode_users(raw: bytes, source: str = "file") -> list[User]:
    """
    Decode a JSON array of users.

    Only zero-length content is an empty collection; anything else, a lone
    newline included, has to be valid JSON.
    """
    if not raw:
        return []
    try:
        return _collection.validate_json(raw) or []
    except ValidationError as exc:
        raise DecodeError(source, exc) from exc


def decode_user(raw: str | bytes, source: str = "item") -> User:
    try:
        user = _single.validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(source, exc) from exc
    return user if user is not None else User()


def encode_users(users: list[User]) -> bytes:
    try:
        return _escape(_collection.dump_json(users))
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"could not encode {len(users)} users: {exc}") from exc


def encode_user(user: User) -> bytes:
    try:
        return _escape(user.model_dump_json().encode("utf-8"))
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"could not encode user {user.id}: {exc}") from exc


def find_index(users: list[User], user_id: str) -> int | None:
    """Position of the first record with user_id, or None."""
    for index, user in enumerate(users):
        if user.id == user_id:
            return index
    return None
