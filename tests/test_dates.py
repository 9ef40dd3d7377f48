from datetime import datetime, timedelta, timezone

import pytest

from consolog.config import TimestampFormat
from consolog.dates import format_instant

PLUS_TWO = timezone(timedelta(hours=2))
# Tuesday
AFTERNOON = datetime(2024, 3, 5, 14, 7, 9, 250000, tzinfo=PLUS_TWO)


@pytest.mark.parametrize(
    "preset,expected",
    [
        (TimestampFormat.FULL_24, "Tue, Mar 05 2024 @ 14:07:09 UTC+02:00"),
        (TimestampFormat.FULL_12, "Tue, Mar 05 2024 @ 02:07:09 PM UTC+02:00"),
        (TimestampFormat.CONDENSED_24, "03/05/2024 @ 14:07:09 UTC+02:00"),
        (TimestampFormat.CONDENSED_12, "03/05/2024 @ 02:07:09 PM UTC+02:00"),
        (TimestampFormat.MINIMAL_24, "03/05/2024 @ 14:07:09"),
        (TimestampFormat.MINIMAL_12, "03/05/2024 @ 02:07:09 PM"),
        (TimestampFormat.TIME_24, "14:07:09"),
        (TimestampFormat.TIME_12, "02:07:09 PM"),
    ],
)
def test_presets(preset, expected):
    assert format_instant(AFTERNOON, preset.value) == expected


def test_midnight_is_twelve_am():
    midnight = datetime(2024, 1, 1, 0, 0, 5, tzinfo=timezone.utc)
    assert format_instant(midnight, "hh:mm:ss aa zzzz") == "12:00:05 AM UTC+00:00"


def test_negative_and_fractional_offsets():
    india_west = timezone(-timedelta(hours=5, minutes=30))
    date = datetime(2023, 12, 31, 23, 59, 59, tzinfo=india_west)
    assert format_instant(date, "zzzz") == "UTC-05:30"
    assert format_instant(date, "z") == "UTC-5:30"
    assert format_instant(AFTERNOON, "zz") == "UTC+2"


def test_long_names_and_milliseconds():
    assert format_instant(AFTERNOON, "EEEE, MMMM d, yy") == "Tuesday, March 5, 24"
    assert format_instant(AFTERNOON, "HH:mm:ss.SSS") == "14:07:09.250"


def test_quoted_literals_and_unknown_letters():
    assert format_instant(AFTERNOON, "yyyy 'at' HH") == "2024 at 14"
    assert format_instant(AFTERNOON, "'it''s' h a") == "it's 2 PM"
    assert format_instant(AFTERNOON, "HH''mm") == "14'07"
    assert format_instant(AFTERNOON, "QQ yyyy") == "QQ 2024"


def test_naive_datetime_is_local():
    naive = datetime(2024, 6, 1, 9, 30, 0)
    assert format_instant(naive, "MM/dd/yyyy HH:mm") == "06/01/2024 09:30"
    assert format_instant(naive, "zzzz").startswith("UTC")
