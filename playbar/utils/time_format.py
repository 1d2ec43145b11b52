"""Elapsed/total time text shown next to the seekbar."""

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

TIME_LABEL_FORMAT = '{}:{:02d}:{:02d} / {}:{:02d}:{:02d}'


def split_duration(duration_ms: float | None) -> tuple[int, int, int]:
    """Split a duration in milliseconds into whole (hours, minutes, seconds).

    Fractional seconds are truncated. An unknown duration (None) splits to
    zeros.
    """
    if duration_ms is None:
        return 0, 0, 0
    seconds = int(duration_ms) // 1000
    hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
    return hours, minutes, seconds


def format_elapsed_time(elapsed_ms: float | None, total_ms: float | None) -> str:
    """Format as 'H:MM:SS / H:MM:SS' (hours unpadded)."""
    return TIME_LABEL_FORMAT.format(*split_duration(elapsed_ms), *split_duration(total_ms))
