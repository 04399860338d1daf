"""Example API models with their little-endian binary serialization."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional

MODEL_ID_AUTH_REQUEST = 1
MODEL_ID_AUTH_RESPONSE = 2
MODEL_ID_USER_INFO = 3
MODEL_ID_GET_USERS_RESULT = 4

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NIL = b"\x00"


def _u32(value: int) -> bytes:
    return struct.pack("<I", value)


def _i64(value: int) -> bytes:
    return struct.pack("<q", value)


def _blob(data: bytes) -> bytes:
    return _u32(len(data)) + data


def _text(value: str) -> bytes:
    return _blob(value.encode("utf-8"))


def _unix_nano(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(microseconds=1) * 1000


def _from_unix_nano(nanos: int) -> datetime:
    return _EPOCH + timedelta(microseconds=nanos // 1000)


class _Reader:
    """Sequential reader over serialized bytes; ValueError when data runs out."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ValueError("unexpected end of data")
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]

    def i64(self) -> int:
        return struct.unpack("<q", self.take(8))[0]

    def blob(self) -> bytes:
        return self.take(self.u32())

    def text(self) -> str:
        return self.blob().decode("utf-8")

    def moment(self) -> datetime:
        return _from_unix_nano(self.i64())


@dataclass
class AuthRequest:
    """Credentials sent to log in."""

    MODEL_ID: ClassVar[int] = MODEL_ID_AUTH_REQUEST

    username: str = ""
    password: str = ""

    def serialize(self) -> bytes:
        return _text(self.username) + _text(self.password)

    @classmethod
    def deserialize(cls, data: bytes) -> AuthRequest:
        reader = _Reader(data)
        return cls(username=reader.text(), password=reader.text())


@dataclass
class AuthResponse:
    """Answer to a successful login."""

    MODEL_ID: ClassVar[int] = MODEL_ID_AUTH_RESPONSE

    token: str = ""
    user_id: int = 0
    profile_image: bytes = b""

    def serialize(self) -> bytes:
        return _text(self.token) + _i64(self.user_id) + _blob(bytes(self.profile_image))

    @classmethod
    def deserialize(cls, data: bytes) -> AuthResponse:
        reader = _Reader(data)
        return cls(token=reader.text(), user_id=reader.i64(), profile_image=reader.blob())


@dataclass
class UserInfo:
    """A user's public profile; times travel as nanoseconds since the Unix epoch."""

    MODEL_ID: ClassVar[int] = MODEL_ID_USER_INFO

    id: int = 0
    username: str = ""
    email: str = ""
    profile_image: bytes = b""
    created_at: datetime = _EPOCH
    updated_at: datetime = _EPOCH

    def serialize(self) -> bytes:
        return b"".join(
            (
                _i64(self.id),
                _text(self.username),
                _text(self.email),
                _blob(bytes(self.profile_image)),
                _i64(_unix_nano(self.created_at)),
                _i64(_unix_nano(self.updated_at)),
            )
        )

    @classmethod
    def deserialize(cls, data: bytes) -> UserInfo:
        reader = _Reader(data)
        return cls(
            id=reader.i64(),
            username=reader.text(),
            email=reader.text(),
            profile_image=reader.blob(),
            created_at=reader.moment(),
            updated_at=reader.moment(),
        )


def _write_users(users: list[Optional[UserInfo]]) -> bytes:
    parts = [_u32(len(users))]
    for user in users:
        parts.append(_blob(user.serialize() if user is not None else _NIL))
    return b"".join(parts)


def _read_users(reader: _Reader) -> list[Optional[UserInfo]]:
    users: list[Optional[UserInfo]] = []
    for _ in range(reader.u32()):
        chunk = reader.blob()
        users.append(None if chunk in (b"", _NIL) else UserInfo.deserialize(chunk))
    return users


@dataclass
class GetUsersResult:
    """Two lists of users; a missing user travels as a single zero byte."""

    MODEL_ID: ClassVar[int] = MODEL_ID_GET_USERS_RESULT

    users: list[Optional[UserInfo]] = field(default_factory=list)
    other_users: list[Optional[UserInfo]] = field(default_factory=list)

    def serialize(self) -> bytes:
        return _write_users(self.users) + _write_users(self.other_users)

    @classmethod
    def deserialize(cls, data: bytes) -> GetUsersResult:
        reader = _Reader(data)
        users = _read_users(reader)
        return cls(users=users, other_users=_read_users(reader))