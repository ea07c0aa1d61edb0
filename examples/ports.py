#!/usr/bin/env python3
"""
Open Ports Example

Renders a process/port listing, as printed by ``lsof -i``, capped at five
rows so only the first and last entries remain visible.

Run:
    uv run python examples/ports.py
"""

from plaintable import Alignment, TableBuilder

PORTS = [
    ["rapportd", "449", "Quentin", "*:61165"],
    ["Python", "22396", "Quentin", "*:8000"],
    ["foo", "108", "root", "*:1337"],
    ["rustrover", "30928", "Quentin", "127.0.0.1:63342"],
    ["Transmiss", "94671", "Quentin", "*:51413"],
    ["Transmiss", "94671", "Quentin", "*:51413"],
]


def main() -> None:
    table = (
        TableBuilder()
        .headers(["COMMAND", "PID", "USER", "HOST:PORTS"])
        .alignments([Alignment.LEFT, Alignment.RIGHT, Alignment.LEFT, Alignment.RIGHT])
        .data(PORTS)
        .max_rows(5)
    )
    print(table, end="")


if __name__ == "__main__":
    main()
