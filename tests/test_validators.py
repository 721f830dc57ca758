"""Tests for reservation and table field validators"""

from datetime import datetime

import pytest

from app.errors import (
    InvalidCapacity,
    InvalidDate,
    InvalidField,
    InvalidPeopleCount,
    InvalidStatus,
    InvalidTableName,
    InvalidText,
    InvalidTime,
    MissingField,
)
from app.pipeline import validators
from app.pipeline.stages import CONTINUE, Fail

# Monday 2026-10-19, noon
NOW = datetime(2026, 10, 19, 12, 0)


def test_whitelist_accepts_recognized_fields(make_reservation_data):
    data = make_reservation_data(status="booked", reservation_id=1, created_at="x", updated_at="y")
    assert validators.has_valid_fields(data) is CONTINUE


def test_whitelist_names_every_offending_key(make_reservation_data):
    """Regression: the complement of the recognized set is actually computed"""
    data = make_reservation_data(table_name="#1", favourite_color="teal")

    result = validators.has_valid_fields(data)

    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidField)
    assert result.error.fields == ["table_name", "favourite_color"]
    assert result.error.message == "Invalid field(s): table_name, favourite_color"


def test_whitelist_with_custom_allowed_set():
    result = validators.has_valid_fields({"table_name": "#1", "people": 2}, allowed=validators.TABLE_FIELDS)
    assert isinstance(result, Fail)
    assert result.error.fields == ["people"]


@pytest.mark.parametrize("value", [None, "", 0])
def test_missing_field(value, make_reservation_data):
    data = make_reservation_data(first_name=value)

    result = validators.has_field(data, "first_name")

    assert isinstance(result, Fail)
    assert isinstance(result.error, MissingField)
    assert result.error.message == "Must include a first_name"


def test_field_present(make_reservation_data):
    assert validators.has_field(make_reservation_data(), "mobile_number") is CONTINUE


@pytest.mark.parametrize("value", ["2999-01-01", "2999-01-08", "2030-01-01", "2024-01-02"])
def test_tuesdays_are_closed(value):
    """Every Tuesday is rejected with the closed-day reason, past or future"""
    for reservation_time in ("00:00", "12:30", "23:59"):
        result = validators.is_valid_date(
            {"reservation_date": value, "reservation_time": reservation_time}, now=NOW
        )
        assert isinstance(result, Fail)
        assert isinstance(result.error, InvalidDate)
        assert result.error.message == "Restaurant is closed on Tuesdays"


def test_closed_weekday_is_configurable():
    # 2999-01-09 is a Wednesday
    result = validators.is_valid_date({"reservation_date": "2999-01-09"}, now=NOW, closed_weekday=2)
    assert isinstance(result, Fail)
    assert result.error.message == "Restaurant is closed on Wednesdays"


@pytest.mark.parametrize("value", [None, "", "tomorrow", "2999-02-30", "2999-13-01", 29990109])
def test_unparseable_date(value):
    result = validators.is_valid_date({"reservation_date": value}, now=NOW)
    assert isinstance(result, Fail)
    assert result.error.message == "Invalid reservation_date"


def test_past_date():
    # 2020-01-01 is a Wednesday
    result = validators.is_valid_date({"reservation_date": "2020-01-01", "reservation_time": "18:00"}, now=NOW)
    assert isinstance(result, Fail)
    assert result.error.message == "Reservation must be set in the future"


def test_earlier_today_is_past():
    data = {"reservation_date": "2026-10-19", "reservation_time": "09:00"}
    result = validators.is_valid_date(data, now=NOW)
    assert isinstance(result, Fail)
    assert result.error.message == "Reservation must be set in the future"


def test_later_today_is_future():
    data = {"reservation_date": "2026-10-19", "reservation_time": "18:00"}
    assert validators.is_valid_date(data, now=NOW) is CONTINUE


def test_future_date(make_reservation_data):
    assert validators.is_valid_date(make_reservation_data(), now=NOW) is CONTINUE


@pytest.mark.parametrize("value", ["00:00", "23:59", "18:00", "09:05:30", "23:59:59"])
def test_valid_times(value):
    assert validators.is_valid_time({"reservation_time": value}) is CONTINUE


@pytest.mark.parametrize(
    "value",
    ["24:00", "9:00", "12:60", "12:00:60", "noon", "", None, "12:00 PM", "12:00:00:00", 1800],
)
def test_invalid_times(value):
    result = validators.is_valid_time({"reservation_time": value})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidTime)
    assert result.error.message == "Invalid reservation_time"


@pytest.mark.parametrize("value", [1, 2, 12, 500])
def test_positive_people(value):
    assert validators.is_valid_people({"people": value}) is CONTINUE


@pytest.mark.parametrize("value", [0, -1, -20, 2.5, "2", None, True])
def test_invalid_people(value):
    result = validators.is_valid_people({"people": value})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidPeopleCount)
    assert result.error.message == "Invalid number of people"


@pytest.mark.parametrize("status", ["seated", "finished"])
def test_cannot_create_occupying_status(status):
    result = validators.is_creatable_status({"status": status})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidStatus)
    assert result.error.message == f"status is {status}"


@pytest.mark.parametrize("status", [None, "", "booked", "cancelled"])
def test_creatable_status(status):
    assert validators.is_creatable_status({"status": status}) is CONTINUE


def test_unknown_status():
    result = validators.is_creatable_status({"status": "waitlisted"})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidStatus)


@pytest.mark.parametrize("status", [["seated"], {"a": 1}, 3, True])
def test_status_must_be_text(status):
    result = validators.is_creatable_status({"status": status})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidStatus)
    assert result.error.message == "status must be text"


@pytest.mark.parametrize("value", [123, ["Rick"], {"first": "Rick"}, 1.5])
def test_non_text_name(value, make_reservation_data):
    result = validators.is_text(make_reservation_data(first_name=value), "first_name")
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidText)
    assert result.error.message == "first_name must be text"


def test_text_fields(make_reservation_data):
    data = make_reservation_data()
    for name in validators.TEXT_FIELDS:
        assert validators.is_text(data, name) is CONTINUE


@pytest.mark.parametrize("name", ["#1", "Bar #1", "Patio"])
def test_valid_table_name(name):
    assert validators.is_valid_table_name({"table_name": name}) is CONTINUE


@pytest.mark.parametrize("name", ["A", "", " x ", None, 12])
def test_invalid_table_name(name):
    result = validators.is_valid_table_name({"table_name": name})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidTableName)


@pytest.mark.parametrize("capacity", [0, -2, "4", 1.5, None])
def test_invalid_capacity(capacity):
    result = validators.is_valid_capacity({"capacity": capacity})
    assert isinstance(result, Fail)
    assert isinstance(result.error, InvalidCapacity)
