import math

import pytest

from ers.core.parsing import parse_number
from ers.core.validators import (
    is_empty_object,
    is_positive_number,
    is_property_of,
    is_valid_id,
    is_valid_object,
    is_valid_strings,
)
from ers.domain.entities import Reimbursement, User


@pytest.mark.parametrize("value", [1, 2, 9999])
def test_is_valid_id_accepts_positive_ints(value):
    assert is_valid_id(value) is True


@pytest.mark.parametrize("value", [0, -2, 3.14, 1.0, math.nan, None, "1", True, False])
def test_is_valid_id_rejects_everything_else(value):
    assert is_valid_id(value) is False


@pytest.mark.parametrize("value", [0.01, 1, 250.75])
def test_is_positive_number_accepts_positive_amounts(value):
    assert is_positive_number(value) is True


@pytest.mark.parametrize("value", [0, -50, -0.5, math.nan, math.inf, None, "10", True])
def test_is_positive_number_rejects_everything_else(value):
    assert is_positive_number(value) is False


def test_is_valid_strings():
    assert is_valid_strings("a", "bc")
    assert is_valid_strings()
    assert not is_valid_strings("a", "")
    assert not is_valid_strings("a", None)
    assert not is_valid_strings(5)


def test_is_valid_object_honours_nullable_keys():
    user = User(username="u", password="p", first_name="f", last_name="l", email="e", role="employee")

    assert not is_valid_object(user)
    assert is_valid_object(user, "id")
    assert not is_valid_object(None)
    assert is_valid_object({"a": 1, "b": None}, "b")
    assert not is_valid_object({"a": 0})
    assert not is_valid_object({"a": math.nan})


def test_is_property_of_only_knows_entity_attributes():
    assert is_property_of("username", User)
    assert is_property_of("email", User)
    assert is_property_of("status", Reimbursement)
    assert not is_property_of("user_role_id; drop table", User)
    assert not is_property_of("", User)
    assert not is_property_of("username", None)


def test_is_empty_object():
    assert is_empty_object({})
    assert not is_empty_object({"username": "x"})
    assert not is_empty_object(None)
    assert not is_empty_object(User())


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), (" 7 ", 7), ("3.14", 3.14), ("-2", -2), (5, 5), ("1.0", 1), ("1e3", 1000)],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_parse_number_integral_text_is_a_valid_id():
    assert type(parse_number("1.0")) is int
    assert is_valid_id(parse_number("1.0"))
    assert not is_valid_id(parse_number("1.5"))


@pytest.mark.parametrize("raw", ["abc", "", None, True])
def test_parse_number_junk_is_nan(raw):
    assert math.isnan(parse_number(raw))
