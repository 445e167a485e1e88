"""
Composable string transforms ("stringers") for rendering log fields.

Every transform implements `transform(ctx, text) -> str` and is total: it
returns a string for any input and never raises while rendering. Widths are
counted in code points (`len(str)`), not bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from .context import Context

_LOG = logging.getLogger(__name__)

ELLIPSIS = "…"


@runtime_checkable
class Transformer(Protocol):
    def transform(self, ctx: Context, text: str) -> str: ...


def _as_width(value: Any, *, kind: str) -> int:
    """
    Coerce a width parameter to int, rejecting non-numeric values early so the
    transform itself can stay total.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {kind}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid {kind}: {value!r}") from e


def _as_text(value: Any, *, kind: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{kind} must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TransformFunc:
    """Adapter to use an ordinary `str -> str` function as a Transformer."""

    func: Callable[[str], str]

    def transform(self, ctx: Context, text: str) -> str:
        return self.func(text)


upper_case = TransformFunc(str.upper)
lower_case = TransformFunc(str.lower)


@dataclass(frozen=True)
class Truncate:
    """Cut the text to at most `limit` characters."""

    limit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "limit", _as_width(self.limit, kind="limit"))

    def transform(self, ctx: Context, text: str) -> str:
        if ctx.disable_truncate:
            return text
        if len(text) <= self.limit:
            return text
        return text[: max(self.limit, 0)]


@dataclass(frozen=True)
class Ellipsize:
    """
    Replace the middle of the text with a single "…" so the result is `remain`
    characters long, keeping both ends.

    The head gets the smaller half when the budget is odd:
      Ellipsize(5) on "abcdefghij" -> "ab…ij"
    """

    remain: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "remain", _as_width(self.remain, kind="remain"))

    def transform(self, ctx: Context, text: str) -> str:
        if ctx.disable_truncate:
            return text
        length = len(text)
        if length <= self.remain:
            return text
        budget = self.remain - 1  # room for the ellipsis
        chomped = length - budget
        start = max(budget, 0) // 2
        end = start + chomped
        return text[:start] + ELLIPSIS + text[end:]


@dataclass(frozen=True)
class LeftPad:
    """Pad the left side with spaces up to `width` characters."""

    width: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _as_width(self.width, kind="width"))

    def transform(self, ctx: Context, text: str) -> str:
        spaces = self.width - len(text)
        if spaces <= 0:
            return text
        return " " * spaces + text


@dataclass(frozen=True)
class RightPad:
    """Pad the right side with spaces up to `width` characters."""

    width: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _as_width(self.width, kind="width"))

    def transform(self, ctx: Context, text: str) -> str:
        pad = self.width - len(text)
        if pad <= 0:
            return text
        return text + " " * pad


@dataclass(frozen=True)
class Format:
    """
    Render a printf-style template with the text as its only argument:
      Format("[%s]") on "x" -> "[x]"
    """

    template: str

    def __post_init__(self) -> None:
        _as_text(self.template, kind="template")

    def transform(self, ctx: Context, text: str) -> str:
        try:
            return self.template % (text,)
        except (TypeError, ValueError) as exc:
            _LOG.debug("format: template %r rejected value (%s)", self.template, exc)
            return text


__all__ = [
    "ELLIPSIS",
    "Transformer",
    "TransformFunc",
    "upper_case",
    "lower_case",
    "Truncate",
    "Ellipsize",
    "LeftPad",
    "RightPad",
    "Format",
]
