from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

NO_COLOR_ENV = "FIELDFOLD_NO_COLOR"
NO_TRUNCATE_ENV = "FIELDFOLD_NO_TRUNCATE"
# https://no-color.org/
FALLBACK_NO_COLOR_ENV = "NO_COLOR"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"", "0", "false", "no", "off"})


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    raw = str(env.get(name, "") or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(
        f"Invalid value for {name}: {env.get(name)!r} "
        "(expected one of 1/0, true/false, yes/no, on/off)"
    )


@dataclass(frozen=True)
class Context:
    """
    Rendering context shared by every transform applied to one field.

    `original` is the field text before any transform ran. Transforms receive
    the (possibly already transformed) value separately, so anything that must
    look at the source text (e.g. timestamp parsing) reads it from here.
    """

    original: str = ""
    disable_color: bool = False
    disable_truncate: bool = False

    def with_original(self, original: str) -> "Context":
        return replace(self, original=original)

    @classmethod
    def from_env(
        cls, original: str = "", *, env: Mapping[str, str] | None = None
    ) -> "Context":
        """
        Build a context whose flags come from environment variables.

        Users typically export:
          FIELDFOLD_NO_TRUNCATE=1   (show full field values)
          FIELDFOLD_NO_COLOR=1      (or the common NO_COLOR=<anything>)
        """
        e = os.environ if env is None else env
        if str(e.get(NO_COLOR_ENV, "") or "").strip():
            disable_color = _env_flag(e, NO_COLOR_ENV)
        else:
            # NO_COLOR convention: present and non-empty means "no color".
            disable_color = bool(str(e.get(FALLBACK_NO_COLOR_ENV, "") or "").strip())
        return cls(
            original=original,
            disable_color=disable_color,
            disable_truncate=_env_flag(e, NO_TRUNCATE_ENV),
        )


__all__ = [
    "Context",
    "NO_COLOR_ENV",
    "NO_TRUNCATE_ENV",
    "FALLBACK_NO_COLOR_ENV",
]
