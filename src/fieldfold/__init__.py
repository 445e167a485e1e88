"""
fieldfold: composable string transforms for rendering structured log fields.

Every transform implements `transform(ctx, text) -> str`:
- `fieldfold.transforms`: case, truncation, ellipsis, padding, printf format
- `fieldfold.classpath.ClassPathFold`: compact dotted qualified names
- `fieldfold.timefmt.TimeFormat`: re-render timestamps in local time
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Context",
    "Transformer",
    "TransformFunc",
    "upper_case",
    "lower_case",
    "Truncate",
    "Ellipsize",
    "LeftPad",
    "RightPad",
    "Format",
    "ClassPathFold",
    "TimeFormat",
    "parse_timestamp",
    "transform_series",
    "TableLogFormatter",
    "configure_logging",
]

# Submodules are imported on first attribute access so `import fieldfold`
# does not pull in pandas unless a pandas-backed transform is used.
_EXPORTS: dict[str, tuple[str, str]] = {
    # context
    "Context": ("fieldfold.context", "Context"),
    # transforms
    "Transformer": ("fieldfold.transforms", "Transformer"),
    "TransformFunc": ("fieldfold.transforms", "TransformFunc"),
    "upper_case": ("fieldfold.transforms", "upper_case"),
    "lower_case": ("fieldfold.transforms", "lower_case"),
    "Truncate": ("fieldfold.transforms", "Truncate"),
    "Ellipsize": ("fieldfold.transforms", "Ellipsize"),
    "LeftPad": ("fieldfold.transforms", "LeftPad"),
    "RightPad": ("fieldfold.transforms", "RightPad"),
    "Format": ("fieldfold.transforms", "Format"),
    # classpath
    "ClassPathFold": ("fieldfold.classpath", "ClassPathFold"),
    # timefmt
    "TimeFormat": ("fieldfold.timefmt", "TimeFormat"),
    "parse_timestamp": ("fieldfold.timefmt", "parse_timestamp"),
    # frame
    "transform_series": ("fieldfold.frame", "transform_series"),
    # logging_utils
    "TableLogFormatter": ("fieldfold.logging_utils", "TableLogFormatter"),
    "configure_logging": ("fieldfold.logging_utils", "configure_logging"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover
    target = _EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    mod_name, attr_name = target
    mod = import_module(mod_name)
    return getattr(mod, attr_name)


def __dir__() -> list[str]:  # pragma: no cover
    return sorted(set(globals().keys()) | set(__all__))
