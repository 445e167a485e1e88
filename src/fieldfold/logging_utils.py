from __future__ import annotations

import logging
from typing import Iterable

from .classpath import ClassPathFold
from .context import Context
from .transforms import Ellipsize, RightPad, Truncate


class TableLogFormatter(logging.Formatter):
    """
    Render logs in a stable, readable, "table-like" console format.

    Example:
      2026-01-01 12:34:56 | INFO    | f.classpath                | fold: cap=20
                                                                   ↳ <continuation line>

    Logger names are compacted like qualified class names (leading packages
    folded to one letter) so the most specific part stays readable.
    """

    def __init__(
        self,
        *,
        datefmt: str = "%Y-%m-%d %H:%M:%S",
        ts_width: int = 19,
        level_width: int = 7,
        name_width: int = 26,
        strip_prefix: str | None = None,
        ctx: Context | None = None,
    ) -> None:
        super().__init__(datefmt=datefmt)
        self._ts_width = int(ts_width)
        self._level_width = int(level_width)
        self._name_width = int(name_width)
        self._strip_prefix = strip_prefix or ""
        self._ctx = Context.from_env() if ctx is None else ctx

        self._ts_cell = (Ellipsize(self._ts_width), RightPad(self._ts_width))
        self._level_cell = (Ellipsize(self._level_width), RightPad(self._level_width))
        # Very small widths can fold past the cap; Truncate keeps the column fixed.
        self._name_cell = (
            ClassPathFold(self._name_width),
            Truncate(self._name_width),
            RightPad(self._name_width),
        )

    def _cell(self, value: str, steps: tuple) -> str:
        ctx = self._ctx.with_original(value)
        out = value
        for step in steps:
            out = step.transform(ctx, out)
        return out

    def _format_row(self, ts: str, level: str, name: str, msg: str) -> str:
        ts_cell = self._cell(ts, self._ts_cell)
        level_cell = self._cell(level, self._level_cell)
        name_cell = self._cell(name, self._name_cell)
        return f"{ts_cell} | {level_cell} | {name_cell} | {msg}"

    def _display_logger_name(self, name: str) -> str:
        """
        Optionally hide a common top-level package prefix:
          strip_prefix="fieldfold." : "fieldfold.timefmt" -> "timefmt"
        """
        n = "" if name is None else str(name)
        prefix = self._strip_prefix
        if prefix and n.startswith(prefix):
            return n[len(prefix) :]
        return n

    def format(self, record: logging.LogRecord) -> str:
        # Keep logging's semantics for %-formatting, lazy args, etc.
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        lines = message.splitlines() or [""]

        ts = self.formatTime(record, self.datefmt)
        level = record.levelname
        name = self._display_logger_name(record.name)

        first = self._format_row(ts, level, name, lines[0])
        out: list[str] = [first]
        if len(lines) > 1:
            # Continuation rows sit under the message column.
            msg_indent = " " * (self._ts_width + 3 + self._level_width + 3 + self._name_width + 3)
            for line in lines[1:]:
                out.append(f"{msg_indent}↳ {line}")
        return "\n".join(out)


def configure_logging(
    *,
    level: int = logging.INFO,
    handlers: Iterable[logging.Handler] | None = None,
) -> None:
    """
    Configure root logging with a table-like formatter.

    Safe to call multiple times.
    """
    if handlers is None:
        h = logging.StreamHandler()
        h.setFormatter(TableLogFormatter())
        handlers = [h]

    # `force=True` removes any existing root handlers first, so our formatter
    # is used even if something configured the root logger already.
    logging.basicConfig(level=level, handlers=list(handlers), force=True)


__all__ = ["TableLogFormatter", "configure_logging"]
