"""Fluent builder for table configurations.

Configuration is accumulated through method chaining, then ``build()``
snapshots it into an immutable TableConfig and ``render()`` turns it into
text.

Example:
    table = (
        TableBuilder()
        .headers(["COMMAND", "PID", "USER", "HOST:PORTS"])
        .alignments(["l", "r", "l", "r"])
        .data(ports)
        .max_rows(5)
        .render()
    )
    print(table, end="")
"""

from collections.abc import Iterable, Sequence

from .models import DEFAULT_COLUMN_SEPARATOR, Alignment, TableConfig
from .renderer import render


class TableBuilder:
    """Fluent builder for constructing a TableConfig.

    All configuration methods return ``self`` for chaining. Any subset of
    the setters can be called, in any order; unset values fall back to an
    empty table, left alignment, no row cap and a two-space separator.
    """

    def __init__(self) -> None:
        self._headers: Sequence[str] = ()
        self._alignments: list[Alignment | str] = []
        self._data: list[Sequence[str]] = []
        self._max_rows: int | None = None
        self._column_separator = DEFAULT_COLUMN_SEPARATOR

    def headers(self, headers: Iterable[str]) -> "TableBuilder":
        """Set the column titles; their count fixes the number of columns."""
        # Strings are kept whole so build() can reject them.
        self._headers = headers if isinstance(headers, str) else list(headers)
        return self

    def alignments(self, alignments: Iterable[Alignment | str]) -> "TableBuilder":
        """Set per-column alignments (missing ones default to LEFT)."""
        self._alignments = list(alignments)
        return self

    def data(self, rows: Iterable[Iterable[str]]) -> "TableBuilder":
        """Set the data rows."""
        self._data = [row if isinstance(row, str) else list(row) for row in rows]
        return self

    def max_rows(self, value: int | None) -> "TableBuilder":
        """Cap the number of rendered data rows (ellipsis row included).

        None removes the cap.
        """
        self._max_rows = value
        return self

    def column_separator(self, separator: str) -> "TableBuilder":
        """Set the text placed between adjacent cells (default: two spaces)."""
        self._column_separator = separator
        return self

    def build(self) -> TableConfig:
        """Snapshot the current settings into an immutable TableConfig.

        Raises:
            ValidationError: If headers, a row, an alignment, max_rows or the
                separator is invalid
        """
        return TableConfig.from_input(
            self._headers,
            alignments=self._alignments,
            rows=self._data,
            max_rows=self._max_rows,
            column_separator=self._column_separator,
        )

    def render(self) -> str:
        """Build and render the table."""
        return render(self.build())

    def __str__(self) -> str:
        return self.render()
