from datetime import datetime, timezone

import pytest

from cclgen.api_types import AuthRequest, AuthResponse, GetUsersResult, UserInfo


def test_get_users_result_round_trip():
    now = datetime.now(timezone.utc)
    original = GetUsersResult(
        users=[
            UserInfo(id=1, username="user1", email="user1@example.com",
                     created_at=now, updated_at=now),
            UserInfo(id=2, username="user2", email="user2@example.com",
                     created_at=now, updated_at=now),
        ]
    )
    restored = GetUsersResult.deserialize(original.serialize())
    assert len(restored.users) == len(original.users)
    for expected, actual in zip(original.users, restored.users):
        assert expected.id == actual.id
        assert expected.username == actual.username
        assert expected.email == actual.email
        assert expected.created_at == actual.created_at
        assert expected.updated_at == actual.updated_at
    assert restored.other_users == []


def test_auth_request_wire_format():
    password = "password"
    data = AuthRequest(username="ab", password=password).serialize()
    assert data == b"\x02\x00\x00\x00ab\x08\x00\x00\x00password"
    assert AuthRequest.deserialize(data) == AuthRequest(username="ab", password=password)


def test_auth_response_round_trip():
    original = AuthResponse(token="token", user_id=-42, profile_image=b"\x01\x02\x03")
    assert AuthResponse.deserialize(original.serialize()) == original


def test_user_info_default_times_are_epoch_zero():
    data = UserInfo(id=1, username="a", email="b").serialize()
    assert data == (
        b"\x01" + b"\x00" * 7
        + b"\x01\x00\x00\x00a"
        + b"\x01\x00\x00\x00b"
        + b"\x00\x00\x00\x00"
        + b"\x00" * 16
    )


def test_user_info_unicode_and_naive_time():
    naive = datetime(2024, 5, 6, 7, 8, 9, 123456)
    original = UserInfo(id=7, username="ünïcode", created_at=naive, updated_at=naive)
    restored = UserInfo.deserialize(original.serialize())
    assert restored.username == "ünïcode"
    assert restored.created_at == naive.replace(tzinfo=timezone.utc)


def test_missing_user_round_trips_as_none():
    original = GetUsersResult(users=[None], other_users=[UserInfo(id=3)])
    restored = GetUsersResult.deserialize(original.serialize())
    assert restored.users == [None]
    assert restored.other_users[0].id == 3


def test_truncated_data_raises():
    data = UserInfo(id=1, username="abc").serialize()
    with pytest.raises(ValueError):
        UserInfo.deserialize(data[:-3])


def test_empty_strings_at_end_round_trip():
    assert AuthRequest.deserialize(AuthRequest().serialize()) == AuthRequest()