"""
Plain-text table renderer.

This module turns a TableConfig into aligned, fixed-width text:

    COMMAND      PID  USER     HOST:PORTS
    rapportd     449  Quentin     *:61165
    Python     22396  Quentin      *:8000
    ...          ...  ...             ...
    Transmiss  94671  Quentin     *:51413
    Transmiss  94671  Quentin     *:51413
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .ansi import visible_width
from .models import Alignment, TableConfig

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


class TableRenderer:
    """Render a TableConfig as aligned columns, one line per row.

    The renderer holds no state; one instance can render any number of
    configurations, from any number of threads.
    """

    def render(self, config: TableConfig) -> str:
        """Render headers and rows as a formatted table.

        Args:
            config: Normalized table snapshot

        Returns:
            The header line followed by one line per rendered row, every
            line terminated by a newline
        """
        rows = self.apply_max_rows(config.rows, config.max_rows, config.column_count)
        widths = self.column_widths(config.headers, rows)

        lines = [self._render_row(config.headers, widths, config)]
        lines.extend(self._render_row(row, widths, config) for row in rows)
        return "".join(line + "\n" for line in lines)

    @staticmethod
    def apply_max_rows(
        rows: Sequence[tuple[str, ...]], max_rows: int | None, nb_cols: int
    ) -> list[tuple[str, ...]]:
        """Drop rows in the middle to conform to the row cap.

        One slot of the cap goes to the ellipsis row. The remaining slots are
        split between the first and last rows, with the odd one going to the
        tail so the most recent rows stay visible.
        """
        if max_rows is None or len(rows) <= max_rows:
            return list(rows)

        available = max_rows - 1
        nb_head = available // 2
        nb_tail = available - nb_head
        logger.debug(
            "Truncating %d rows to %d head + ellipsis + %d tail",
            len(rows),
            nb_head,
            nb_tail,
        )

        ellipsis_row = (ELLIPSIS,) * nb_cols
        return [*rows[:nb_head], ellipsis_row, *rows[len(rows) - nb_tail :]]

    @staticmethod
    def column_widths(
        headers: Sequence[str], rows: Sequence[Sequence[str]]
    ) -> list[int]:
        """Determine the width of each column.

        The width of a column is the visible length of the longest value
        held in the column, header included.
        """
        widths = [visible_width(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], visible_width(cell))
        return widths

    def _render_row(
        self, row: Sequence[str], widths: Sequence[int], config: TableConfig
    ) -> str:
        last = len(widths) - 1
        cells = [
            self._align(cell, widths[i], config.alignments[i], is_last_column=i == last)
            for i, cell in enumerate(row)
        ]
        return config.column_separator.join(cells)

    @staticmethod
    def _align(cell: str, width: int, alignment: Alignment, is_last_column: bool) -> str:
        # Last column gets no trailing padding.
        padding = max(width - visible_width(cell), 0)
        if alignment == Alignment.RIGHT:
            return " " * padding + cell
        if alignment == Alignment.CENTER:
            left = padding // 2
            right = 0 if is_last_column else padding - left
            return " " * left + cell + " " * right
        if is_last_column:
            return cell
        return cell + " " * padding


def render(config: TableConfig) -> str:
    """Render a table configuration to text. See TableRenderer.render."""
    return TableRenderer().render(config)
