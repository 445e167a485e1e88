import logging

from fieldfold.context import Context
from fieldfold.logging_utils import TableLogFormatter, configure_logging


def _record(name: str, msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_table_log_formatter_folds_logger_name_to_keep_the_identifier() -> None:
    fmt = TableLogFormatter(name_width=20, ctx=Context())
    out = fmt.format(_record("com.example.service.MyHandlerClass"))
    assert "| c.e.s.MyHandlerClass | hello" in out


def test_table_log_formatter_pads_cells() -> None:
    fmt = TableLogFormatter(level_width=7, name_width=12, ctx=Context())
    out = fmt.format(_record("app.db", level=logging.WARNING))
    parts = out.split(" | ")
    assert parts[1] == "WARNING"
    assert parts[2] == "app.db      "
    assert parts[3] == "hello"


def test_table_log_formatter_strip_prefix() -> None:
    fmt = TableLogFormatter(strip_prefix="fieldfold.", ctx=Context())
    out = fmt.format(_record("fieldfold.timefmt"))
    assert "fieldfold" not in out
    assert "timefmt" in out


def test_table_log_formatter_respects_disable_truncate() -> None:
    name = "com.example.service.MyHandlerClass"
    fmt = TableLogFormatter(name_width=10, ctx=Context(disable_truncate=True))
    assert name in fmt.format(_record(name))


def test_table_log_formatter_continuation_lines() -> None:
    fmt = TableLogFormatter(ctx=Context())
    out = fmt.format(_record("app", msg="first\nsecond"))
    first, second = out.split("\n")
    assert first.endswith("| first")
    assert second.strip() == "↳ second"
    assert second.index("↳") == first.index("first")


def test_configure_logging_installs_formatter() -> None:
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        configure_logging(level=logging.DEBUG)
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, TableLogFormatter) for h in root.handlers)
    finally:
        root.handlers[:] = saved[1]
        root.setLevel(saved[0])


def test_table_log_formatter_name_cell_never_exceeds_width() -> None:
    # folding "HelloWorld" to 5 chars overshoots to "HelloWo"
    fmt = TableLogFormatter(name_width=5, ctx=Context())
    parts = fmt.format(_record("x.HelloWorld")).split(" | ")
    assert parts[2] == "Hello"
