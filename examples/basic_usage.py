#!/usr/bin/env python3
"""Basic usage example"""

import analog
from analog import LogLevel, SinkAppender


def main():
    errors = SinkAppender.memory(level=LogLevel.ERROR)

    analog.configure({
        "appenders": [{"name": "errors", "appender": errors}],
        "loggers": [
            {"name": "", "level": LogLevel.INFO},
            {"name": "db", "level": "debug", "appenders": ["", "errors"]},
        ],
    })

    root = analog.get_logger()
    root.info("Application started")
    root.debug("Not written, root is at INFO")

    db = analog.get_logger("db")
    db.debug("Query plan", {"table": "users", "rows": 42})
    db.trace(lambda: "never evaluated, db is at DEBUG")
    db.error("Connection lost", lambda: {"retries": 3})

    print("Captured errors:", errors.sink.buffer)


if __name__ == "__main__":
    main()
