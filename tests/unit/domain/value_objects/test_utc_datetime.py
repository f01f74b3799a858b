"""Unit tests for the UTCdatetime value object.

A datestamp literal is only meaningful together with the granularity it was
declared at, so most cases here check the pairing.
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.exceptions import InvalidArgumentError, ValidationRule
from src.domain.value_objects.granularity import Granularity
from src.domain.value_objects.utc_datetime import UTCdatetime


class TestUTCdatetime:
    """Test cases for UTCdatetime value object."""

    def test_day_granularity(self):
        # Act
        stamp = UTCdatetime("2024-06-10", Granularity.DATE)

        # Assert
        assert stamp.date_time == "2024-06-10"
        assert stamp.granularity is Granularity.DATE
        assert stamp.moment == datetime(2024, 6, 10, tzinfo=timezone.utc)

    def test_second_granularity(self, second_granularity_datestamp):
        assert second_granularity_datestamp.moment == datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "literal, granularity",
        [
            ("2024-06-10T12:00:00Z", Granularity.DATE),
            ("2024-06-10", Granularity.DATE_TIME_SECOND),
            ("2024-06-10T12:00:00", Granularity.DATE_TIME_SECOND),
            ("2024-06-10T12:00:00+00:00", Granularity.DATE_TIME_SECOND),
            ("2024-06-10T12:00:00.5Z", Granularity.DATE_TIME_SECOND),
            ("24-06-10", Granularity.DATE),
            ("2024/06/10", Granularity.DATE),
            ("", Granularity.DATE),
        ],
    )
    def test_literal_must_match_granularity(self, literal, granularity):
        with pytest.raises(InvalidArgumentError, match="does not match granularity") as exc_info:
            UTCdatetime(literal, granularity)
        assert exc_info.value.rule is ValidationRule.INVALID_FORMAT

    @pytest.mark.parametrize(
        "literal, granularity",
        [
            ("2024-13-01", Granularity.DATE),
            ("2023-02-29", Granularity.DATE),
            ("2024-06-31", Granularity.DATE),
            ("2024-06-10T24:00:00Z", Granularity.DATE_TIME_SECOND),
            ("2024-06-10T12:60:00Z", Granularity.DATE_TIME_SECOND),
        ],
    )
    def test_impossible_calendar_values_rejected(self, literal, granularity):
        with pytest.raises(InvalidArgumentError, match="not a valid calendar date/time") as exc_info:
            UTCdatetime(literal, granularity)
        assert exc_info.value.rule is ValidationRule.INVALID_DATE

    def test_leap_day_accepted(self):
        assert UTCdatetime("2024-02-29", Granularity.DATE).moment.day == 29

    def test_wrong_argument_types_rejected(self):
        with pytest.raises(TypeError):
            UTCdatetime(datetime(2024, 6, 10), Granularity.DATE)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            UTCdatetime("2024-06-10", "YYYY-MM-DD")  # type: ignore[arg-type]

    def test_equality_requires_same_granularity(self):
        """Test that the same instant at different granularities are different values."""
        # Arrange
        day = UTCdatetime("2024-06-10", Granularity.DATE)
        second = UTCdatetime("2024-06-10T00:00:00Z", Granularity.DATE_TIME_SECOND)

        # Assert
        assert day.moment == second.moment
        assert day != second
        assert day == UTCdatetime("2024-06-10", Granularity.DATE)
        assert hash(day) == hash(UTCdatetime("2024-06-10", Granularity.DATE))

    def test_immutability(self):
        stamp = UTCdatetime("2024-06-10", Granularity.DATE)
        with pytest.raises(AttributeError):
            stamp.date_time = "2024-06-11"  # type: ignore[misc]

    def test_from_datetime_truncates_to_granularity(self):
        # Arrange
        source = datetime(2024, 6, 10, 14, 30, 15, 999999, tzinfo=timezone(timedelta(hours=2)))

        # Act
        day = UTCdatetime.from_datetime(source, Granularity.DATE)
        second = UTCdatetime.from_datetime(source, Granularity.DATE_TIME_SECOND)

        # Assert
        assert day == UTCdatetime("2024-06-10", Granularity.DATE)
        assert second == UTCdatetime("2024-06-10T12:30:15Z", Granularity.DATE_TIME_SECOND)

    def test_from_datetime_rejects_naive_values(self):
        with pytest.raises(InvalidArgumentError, match="timezone-aware") as exc_info:
            UTCdatetime.from_datetime(datetime(2024, 6, 10), Granularity.DATE)
        assert exc_info.value.rule is ValidationRule.INVALID_DATE

    def test_string_representation(self):
        assert str(UTCdatetime("2024-06-10", Granularity.DATE)) == (
            "UTCdatetime(dateTime: 2024-06-10, granularity: Granularity(granularity: YYYY-MM-DD))"
        )
