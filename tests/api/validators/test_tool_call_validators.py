"""Testes dos validadores de campos de agendamento."""

from __future__ import annotations

import pytest

from api.normalizers.tool_call import SanitizedFields
from api.validators.tool_call import (
    ValidationError,
    is_valid_date,
    is_valid_time,
    validate_meeting_fields,
)


@pytest.mark.parametrize("value", ["2024-01-05", "2025-12-31", "2025-13-40"])
def test_date_pattern_accepts_zero_padded(value: str) -> None:
    assert is_valid_date(value) is True


@pytest.mark.parametrize("value", ["2024-1-5", "24-01-05", "2024/01/05", "2024-01-05x", "", "２０２４-01-05"])
def test_date_pattern_rejects_malformed(value: str) -> None:
    assert is_valid_date(value) is False


@pytest.mark.parametrize("value", ["14:00", "00:00", "23:59", "25:00"])
def test_time_pattern_accepts_two_digit_hours(value: str) -> None:
    assert is_valid_time(value) is True


@pytest.mark.parametrize("value", ["2:00", "14:0", "14h00", "14:00:00", "", "14:00\n"])
def test_time_pattern_rejects_malformed(value: str) -> None:
    assert is_valid_time(value) is False


def test_valid_fields_pass() -> None:
    validate_meeting_fields(SanitizedFields(name="Ana", date="2025-03-10", time="09:30"))


def test_name_is_checked_before_date() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_meeting_fields(SanitizedFields(name="", date="", time=""), tool_call_id="tc")

    assert exc_info.value.field == "name"
    assert exc_info.value.tool_call_id == "tc"


def test_date_is_checked_before_time() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_meeting_fields(SanitizedFields(name="Ana", date="2025/03/10", time=""))

    assert exc_info.value.field == "date"
    assert str(exc_info.value) == "Invalid date format. Expected YYYY-MM-DD"
