"""Focused example: dispose a chain in reverse order and collect failures."""

from __future__ import annotations

import logging

from disposal import DisposalChainError, dispose_all


def main() -> None:
    # Failed steps are logged at WARNING; keep the demo output on stdout only.
    logging.getLogger("disposal").setLevel(logging.ERROR)

    events: list[str] = []

    def close_database() -> None:
        events.append("database")

    def flush_cache() -> None:
        events.append("cache")
        msg = "cache backend unreachable"
        raise ConnectionError(msg)

    def stop_worker() -> None:
        events.append("worker")

    try:
        dispose_all([close_database, flush_cache, stop_worker])
    except DisposalChainError as error:
        print(f"failures={len(error.errors)}")  # => failures=1
        print(f"first={error.errors[0]}")  # => first=cache backend unreachable

    print(f"order={events}")  # => order=['worker', 'cache', 'database']


if __name__ == "__main__":
    main()
