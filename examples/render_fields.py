from __future__ import annotations

import logging

import pandas as pd

from fieldfold import (
    ClassPathFold,
    Context,
    Ellipsize,
    TimeFormat,
    configure_logging,
    transform_series,
)


def make_toy_records() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "timestamp": [
                "2024-03-05T10:11:12Z",
                "1709633472",
                "Mar 5 2024 10:11:14",
            ],
            "logger": [
                "com.example.service.MyHandlerClass",
                "org.apache.kafka.clients.consumer.KafkaConsumer",
                "io.netty.util.internal.PlatformDependent$Cleaner",
            ],
            "message": [
                "request handled",
                "partition assignment took longer than the configured session timeout",
                "cleaner unavailable",
            ],
        }
    )


def main() -> None:
    configure_logging(level=logging.INFO)
    ctx = Context.from_env()

    records = make_toy_records()
    out = pd.DataFrame(
        {
            "time": transform_series(TimeFormat("%H:%M:%S"), records["timestamp"], ctx=ctx),
            "logger": transform_series(ClassPathFold(24), records["logger"], ctx=ctx),
            "message": transform_series(Ellipsize(40), records["message"], ctx=ctx),
        }
    )
    print(out.to_string(index=False))

    logging.getLogger("com.example.service.MyHandlerClass").info("folded logger names")


if __name__ == "__main__":
    main()
