from datetime import datetime, timezone

from crtime.name_rules import derive_new_name, format_created


def test_prefix_uses_minute_and_second_without_hour() -> None:
    created = datetime(2023, 7, 4, 0, 9, 5, tzinfo=timezone.utc)
    assert derive_new_name(created, "report.txt") == "202307040905 report.txt"


def test_hour_is_not_part_of_prefix() -> None:
    morning = datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    evening = datetime(2021, 1, 2, 23, 4, 5, tzinfo=timezone.utc)
    assert format_created(morning) == "202101020405"
    assert format_created(morning) == format_created(evening)


def test_original_name_is_kept_verbatim() -> None:
    created = datetime(1999, 12, 31, 12, 59, 58, tzinfo=timezone.utc)
    assert derive_new_name(created, "my file.tar.gz") == "199912315958 my file.tar.gz"
