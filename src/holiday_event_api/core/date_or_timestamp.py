"""Date values that arrive either as a date string or as an epoch timestamp."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class DateValue:
    """Human-readable date string, e.g. ``"08/08/2024"``."""

    value: str

    def to_json(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class TimestampValue:
    """Signed epoch timestamp in seconds."""

    value: int

    def to_json(self) -> int:
        return self.value


DateOrTimestamp = DateValue | TimestampValue


def parse_date_or_timestamp(value: object) -> DateOrTimestamp:
    """Pick the variant from the native JSON type of ``value``."""

    # bool is an int subclass but is not a timestamp on the wire
    if isinstance(value, bool):
        raise ValueError("expected a date string or an integer timestamp, got bool")
    if isinstance(value, str):
        return DateValue(value)
    if isinstance(value, int):
        return TimestampValue(value)
    raise ValueError(
        "expected a date string or an integer timestamp, "
        f"got {type(value).__name__}"
    )


__all__ = [
    "DateValue",
    "TimestampValue",
    "DateOrTimestamp",
    "parse_date_or_timestamp",
]
