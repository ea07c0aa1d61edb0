"""Core models for plaintable."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_SEPARATOR = "  "


class Alignment(Enum):
    """Padding side for cells narrower than their column."""

    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"

    @classmethod
    def parse(cls, value: "Alignment | str") -> "Alignment":
        """
        Coerce an alignment given as a member, short code or name.

        Accepts ``Alignment.RIGHT``, ``"r"`` or ``"right"`` (case-insensitive).

        Raises:
            ValidationError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValidationError(
            "alignment",
            value,
            f"expected one of 'l', 'r', 'c', 'left', 'right', 'center', got {value!r}",
        )


@dataclass(frozen=True)
class TableConfig:
    """
    Ready-to-render table snapshot.

    Construction normalizes the shape so rendering never has to deal with
    ragged input: alignments are padded with LEFT (or cut) to the header
    count, and rows are padded with empty cells (or cut) to the header
    count.

    Attributes:
        headers: Column titles; their count fixes the number of columns
        alignments: One alignment per column
        rows: Data rows, one cell per column
        max_rows: Cap on rendered data rows (ellipsis row included), None for no cap
        column_separator: Text placed between two adjacent cells
    """

    headers: tuple[str, ...] = ()
    alignments: tuple[Alignment, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()
    max_rows: int | None = None
    column_separator: str = DEFAULT_COLUMN_SEPARATOR

    def __post_init__(self) -> None:
        headers = _normalize_headers(self.headers)
        nb_cols = len(headers)

        object.__setattr__(self, "headers", headers)
        alignments = tuple(self.alignments)
        if len(alignments) != nb_cols or not all(isinstance(a, Alignment) for a in alignments):
            alignments = _normalize_alignments(alignments, nb_cols)
        object.__setattr__(self, "alignments", alignments)
        object.__setattr__(self, "rows", _normalize_rows(self.rows, nb_cols))

        if self.max_rows is not None:
            if isinstance(self.max_rows, bool) or not isinstance(self.max_rows, int):
                raise ValidationError("max_rows", self.max_rows, "must be an integer or None")
            if self.max_rows < 1:
                raise ValidationError("max_rows", self.max_rows, "must be at least 1")

        if not isinstance(self.column_separator, str):
            raise ValidationError(
                "column_separator", self.column_separator, "must be a string"
            )

    @classmethod
    def from_input(
        cls,
        headers: Iterable[str],
        alignments: Iterable["Alignment | str"] = (),
        rows: Iterable[Sequence[str]] = (),
        max_rows: int | None = None,
        column_separator: str = DEFAULT_COLUMN_SEPARATOR,
    ) -> "TableConfig":
        """
        Create a TableConfig from loosely-typed input.

        Accepts lists, alignment codes and ragged rows, and normalizes them
        before the snapshot is built.

        Raises:
            ValidationError: If headers or a row is a bare string, or if an
                alignment, max_rows or the separator is invalid
        """
        normalized_headers = _normalize_headers(headers)
        nb_cols = len(normalized_headers)
        return cls(
            headers=normalized_headers,
            alignments=_normalize_alignments(alignments, nb_cols),
            rows=_normalize_rows(rows, nb_cols),
            max_rows=max_rows,
            column_separator=column_separator,
        )

    @property
    def column_count(self) -> int:
        """Number of columns, as set by the headers."""
        return len(self.headers)


def _normalize_headers(headers: Iterable[str]) -> tuple[str, ...]:
    if isinstance(headers, str):
        raise ValidationError("headers", headers, "must be a sequence of strings, not a string")
    return tuple(headers)


def _normalize_alignments(
    alignments: Iterable["Alignment | str"], nb_cols: int
) -> tuple[Alignment, ...]:
    parsed = [Alignment.parse(a) for a in alignments]
    if len(parsed) > nb_cols:
        logger.debug("Ignoring %d alignments beyond %d columns", len(parsed) - nb_cols, nb_cols)
        del parsed[nb_cols:]
    parsed.extend([Alignment.LEFT] * (nb_cols - len(parsed)))
    return tuple(parsed)


def _normalize_rows(
    rows: Iterable[Sequence[str]], nb_cols: int
) -> tuple[tuple[str, ...], ...]:
    normalized: list[tuple[str, ...]] = []
    for index, row in enumerate(rows):
        if isinstance(row, str):
            raise ValidationError(
                "rows", row, f"row {index} must be a sequence of strings, not a string"
            )
        cells = tuple(row)
        if len(cells) < nb_cols:
            logger.debug(
                "Row %d has %d cells, padding to %d with empty cells",
                index,
                len(cells),
                nb_cols,
            )
            cells = cells + ("",) * (nb_cols - len(cells))
        elif len(cells) > nb_cols:
            logger.debug(
                "Row %d has %d cells, dropping %d beyond %d columns",
                index,
                len(cells),
                len(cells) - nb_cols,
                nb_cols,
            )
            cells = cells[:nb_cols]
        normalized.append(cells)
    return tuple(normalized)


def configure(
    headers: Sequence[str],
    alignments: Sequence["Alignment | str"] | None = None,
    data: Sequence[Sequence[str]] | None = None,
    max_rows: int | None = None,
    column_separator: str = DEFAULT_COLUMN_SEPARATOR,
) -> TableConfig:
    """
    Build a table configuration in one call.

    Missing alignments default to LEFT and extra ones are ignored. Rows
    shorter than the headers are padded with empty cells, longer rows are
    cut to the header count.

    Example:
        config = configure(
            ["NAME", "SIZE"],
            alignments=[Alignment.LEFT, Alignment.RIGHT],
            data=[["a.txt", "12"], ["b.txt", "3"]],
        )

    Raises:
        ValidationError: If headers or a row is a bare string, or if an
            alignment, max_rows or the separator is invalid
    """
    return TableConfig.from_input(
        headers,
        alignments=alignments or (),
        rows=data or (),
        max_rows=max_rows,
        column_separator=column_separator,
    )
