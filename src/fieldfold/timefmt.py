from __future__ import annotations

import logging
import re
import warnings
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from .context import Context
from .transforms import _as_text

_LOG = logging.getLogger(__name__)

_EPOCH_RE = re.compile(r"^[0-9]+$")
# All-digit calendar stamps that would otherwise be read as epochs.
_DIGIT_LAYOUTS = {4: "%Y", 8: "%Y%m%d", 14: "%Y%m%d%H%M%S"}
# Relative keywords resolve against the clock, so the same text would render
# differently on every call.
_RELATIVE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})


def _epoch_unit(digits: int) -> str:
    """
    Guess the unit of an all-digit timestamp from its length:
      1332151919          -> seconds
      1332151919123       -> milliseconds
      1332151919123456    -> microseconds
      1332151919123456789 -> nanoseconds
    """
    if digits <= 10:
        return "s"
    if digits <= 13:
        return "ms"
    if digits <= 16:
        return "us"
    return "ns"


def parse_timestamp(value: str) -> datetime | None:
    """
    Best-effort timestamp parsing without a format hint.

    - "2024", "20240305" and "20240305101112" are calendar stamps.
    - Other all-digit strings are Unix epochs (UTC), unit guessed by length.
    - "now", "today", "tomorrow" and "yesterday" are rejected.
    - Anything else goes through `pandas.to_datetime` (ISO-8601, RFC 2822,
      "Mar 5 2024 10:11:12", "2024/03/05 10:11", ...).

    Naive results are interpreted in the local time zone. The returned datetime
    is always aware and expressed in local time. Returns None when the value
    cannot be parsed.
    """
    s = str(value or "").strip()
    if not s or s.lower() in _RELATIVE_WORDS:
        return None
    try:
        with warnings.catch_warnings():
            # pandas warns about format inference and dropped nanoseconds;
            # neither matters for display.
            warnings.simplefilter("ignore")
            if _EPOCH_RE.fullmatch(s) and len(s) in _DIGIT_LAYOUTS:
                ts = pd.to_datetime(s, format=_DIGIT_LAYOUTS[len(s)])
            elif _EPOCH_RE.fullmatch(s):
                ts = pd.to_datetime(int(s), unit=_epoch_unit(len(s)), utc=True)
            else:
                ts = pd.to_datetime(s)
            if pd.isna(ts):
                return None
            # Naive datetimes are taken as local time by astimezone().
            return ts.to_pydatetime().astimezone()
    except (ValueError, TypeError, OverflowError, OSError) as exc:
        _LOG.debug("parse_timestamp: could not parse %r (%s)", s, exc)
        return None


@dataclass(frozen=True)
class TimeFormat:
    """
    Re-render the *original* field text as a local-time timestamp:
      TimeFormat("%H:%M:%S") with original "2024-03-05T10:11:12Z" -> "10:11:12"
      (in a UTC local zone)

    The incoming text is ignored unless the original cannot be parsed, in which
    case it is returned unchanged.
    """

    layout: str

    def __post_init__(self) -> None:
        _as_text(self.layout, kind="layout")

    def transform(self, ctx: Context, text: str) -> str:
        date = parse_timestamp(ctx.original)
        if date is None:
            return text
        try:
            return date.strftime(self.layout)
        except ValueError as exc:
            _LOG.debug("time format: layout %r failed (%s)", self.layout, exc)
            return text


__all__ = ["TimeFormat", "parse_timestamp"]
