from playbar.utils.time_format import format_elapsed_time, split_duration


def _fields(text):
    elapsed, _ = text.split(' / ')
    return tuple(int(part) for part in elapsed.split(':'))


def test_formats_hours_minutes_seconds():
    assert format_elapsed_time(3725_000, 7384_000) == "1:02:05 / 2:03:04"


def test_fractional_seconds_are_truncated():
    assert format_elapsed_time(59_999, 60_000) == "0:00:59 / 0:01:00"
    assert split_duration(1_999.9) == (0, 0, 1)


def test_zero_and_unknown_total():
    assert format_elapsed_time(0, 0) == "0:00:00 / 0:00:00"
    assert format_elapsed_time(12_000, None) == "0:00:12 / 0:00:00"


def test_hours_are_not_padded():
    assert format_elapsed_time(36_000_000, 360_000_000) == "10:00:00 / 100:00:00"


def test_display_is_monotonic_as_elapsed_grows():
    total = 2 * 3600_000 + 17_500
    previous = _fields(format_elapsed_time(0, total))
    for elapsed in range(0, total + 1, 7_321):
        current = _fields(format_elapsed_time(elapsed, total))
        assert current >= previous
        previous = current
