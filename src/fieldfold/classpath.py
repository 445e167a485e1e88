from __future__ import annotations

import re
from dataclasses import dataclass

from .context import Context
from .transforms import _as_width

# A sub-word starts at a capital letter or a run of "$" (inner classes).
_SUBWORD_BOUNDARY_RE = re.compile(r"(.)([A-Z]|(?:\$+))")


def split_subwords(identifier: str) -> list[str]:
    """
    Split a camel-case identifier into the pieces used for compaction:
      "MyHandlerClass" -> ["My", "Handler", "Class"]
      "Outer$Inner"    -> ["Outer", "$Inner"]

    Existing underscores also act as boundaries (and are dropped).
    """
    return _SUBWORD_BOUNDARY_RE.sub(r"\1_\2", identifier).split("_")


@dataclass(frozen=True)
class ClassPathFold:
    """
    Abbreviate a dotted qualified name (JVM class, Python module, logger name)
    so it fits in `cap` characters.

    The final identifier is kept whole when possible; leading path segments are
    folded to their first letter, nearest-to-the-identifier last:
      ClassPathFold(20) on "com.example.service.MyHandlerClass"
        -> "c.e.s.MyHandlerClass"
      ClassPathFold(30) on the same -> "c.e.service.MyHandlerClass"

    When the identifier itself does not fit, its camel-case sub-words are kept
    whole until the budget runs short, then cut down while leaving at least one
    character for every sub-word that follows; in that case every path segment
    is folded too (or dropped once the budget is exhausted).

    The budget is not clamped, so very small caps can produce results slightly
    longer than `cap` ("MyHandlerCl" for cap 10); callers rely on that exact
    output.
    """

    cap: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cap", _as_width(self.cap, kind="cap"))

    def transform(self, ctx: Context, text: str) -> str:
        if ctx.disable_truncate:
            return text
        if len(text) <= self.cap:
            return text

        remaining = self.cap
        parts = text.split(".")
        identifier = parts[-1]
        compact = False

        if len(identifier) <= remaining:
            output = identifier
            remaining -= len(identifier)
        else:
            output = ""
            words = split_subwords(identifier)
            for i, word in enumerate(words):
                reserve = len(words) - i - 1
                if not compact and len(word) + reserve > remaining:
                    compact = True
                if compact:
                    cut = remaining - reserve
                    output += word[: max(cut + 1, 0)]
                    remaining -= cut
                else:
                    output += word
                    remaining -= len(word)

        # `i` path segments precede this one; each needs a letter and a dot.
        for i in range(len(parts) - 2, -1, -1):
            segment = parts[i]
            if not compact and i * 2 + 1 + len(segment) >= remaining:
                compact = True
            if compact:
                if remaining > 1:
                    output = segment[:1] + "." + output
                    remaining -= 2
            else:
                output = segment + "." + output
                remaining -= len(segment) + 1
        return output


__all__ = ["ClassPathFold", "split_subwords"]
