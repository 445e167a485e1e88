import time

import pytest

from fieldfold.context import Context
from fieldfold.timefmt import TimeFormat, parse_timestamp

LAYOUT = "%Y-%m-%d %H:%M:%S"


@pytest.fixture
def local_tz(monkeypatch: pytest.MonkeyPatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


def test_time_format_renders_original_in_local_time(local_tz) -> None:
    local_tz("UTC")
    ctx = Context(original="2024-03-05T10:11:12Z")
    assert TimeFormat(LAYOUT).transform(ctx, "ignored") == "2024-03-05 10:11:12"


def test_time_format_converts_aware_input_to_local_zone(local_tz) -> None:
    local_tz("JST-9")
    ctx = Context(original="2024-03-05T10:11:12+00:00")
    assert TimeFormat("%H:%M").transform(ctx, "x") == "19:11"


def test_naive_input_is_taken_as_local_time(local_tz) -> None:
    local_tz("JST-9")
    ctx = Context(original="2024-03-05 10:11:12")
    assert TimeFormat(LAYOUT).transform(ctx, "x") == "2024-03-05 10:11:12"
    assert TimeFormat("%z").transform(ctx, "x") == "+0900"


@pytest.mark.parametrize(
    "original",
    [
        "2024-03-05 10:11:12",
        "2024/03/05 10:11:12",
        "Mar 5 2024 10:11:12",
        "Tue, 05 Mar 2024 10:11:12 +0000",
        "20240305101112",
    ],
)
def test_heuristic_parsing_shapes(local_tz, original: str) -> None:
    local_tz("UTC")
    out = TimeFormat(LAYOUT).transform(Context(original=original), "x")
    assert out == "2024-03-05 10:11:12"


@pytest.mark.parametrize(
    "original",
    ["1700000000", "1700000000000", "1700000000000000", "1700000000000000000"],
)
def test_epoch_units_guessed_from_length(local_tz, original: str) -> None:
    local_tz("UTC")
    out = TimeFormat(LAYOUT).transform(Context(original=original), "x")
    assert out == "2023-11-14 22:13:20"


def test_calendar_date_digits(local_tz) -> None:
    local_tz("UTC")
    ctx = Context(original="20240305")
    assert TimeFormat("%Y-%m-%d").transform(ctx, "x") == "2024-03-05"


def test_time_format_uses_original_not_input(local_tz) -> None:
    local_tz("UTC")
    ctx = Context(original="2024-03-05T10:11:12Z")
    # an upstream transform already mangled the value
    assert TimeFormat("%H:%M:%S").transform(ctx, "2024-03-…") == "10:11:12"


def test_unparseable_original_returns_input() -> None:
    for original in ("not-a-date", "", "   "):
        ctx = Context(original=original)
        assert TimeFormat(LAYOUT).transform(ctx, "input value") == "input value"
    assert parse_timestamp("not-a-date") is None


def test_time_format_is_deterministic(local_tz) -> None:
    local_tz("UTC")
    ctx = Context(original="2024-03-05T10:11:12.123456Z")
    fmt = TimeFormat("%H:%M:%S.%f")
    assert fmt.transform(ctx, "x") == fmt.transform(ctx, "x") == "10:11:12.123456"


def test_layout_must_be_text() -> None:
    with pytest.raises(ValueError):
        TimeFormat(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("original", ["now", "Today", " tomorrow ", "YESTERDAY"])
def test_relative_keywords_are_not_parsed(original: str) -> None:
    ctx = Context(original=original)
    fmt = TimeFormat("%H:%M:%S.%f")
    assert fmt.transform(ctx, "now") == "now"
    assert fmt.transform(ctx, "now") == fmt.transform(ctx, "now")
    assert parse_timestamp(original) is None
