"""Tests for login tokens and timestamps (mock/factory.py)."""

from __future__ import annotations

from datetime import datetime

import pytest

from cms_mock.mock.factory import create_token, parse_login_type, timestamp


def test_create_token_shape():
    token = create_token("manager")
    body, login_type = token.split("~")
    assert login_type == "manager"
    assert len(body) == 11
    assert set(body) <= set("0123456789abcdefghijklmnopqrstuv")


def test_create_token_is_random():
    assert create_token("student") != create_token("student")


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("abc~teacher", "teacher"),
        ("abc~teacher~extra", "teacher"),
        ("abc", None),
        ("abc~", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_login_type(token, expected):
    assert parse_login_type(token) == expected


def test_timestamp_uses_twelve_hour_clock():
    assert timestamp(datetime(2020, 5, 4, 15, 7, 9)) == "2020-05-04 03:07:09"
    assert timestamp(datetime(2020, 5, 4, 9, 30, 0)) == "2020-05-04 09:30:00"
