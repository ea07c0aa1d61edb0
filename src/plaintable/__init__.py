"""
plaintable: fixed-width plain-text tables for terminal output.

This library renders a header row and rows of string cells as aligned
columns with:
- Per-column left, right or center alignment
- Row capping with an ellipsis row between the first and last rows
- Column widths that ignore ANSI colour sequences
- A fluent builder or a one-call ``configure()``

Example:
    from plaintable import TableBuilder

    ports = [
        ["rapportd", "449", "Quentin", "*:61165"],
        ["Python", "22396", "Quentin", "*:8000"],
    ]

    table = (
        TableBuilder()
        .headers(["COMMAND", "PID", "USER", "HOST:PORTS"])
        .alignments(["l", "r", "l", "r"])
        .data(ports)
        .render()
    )
    print(table, end="")
"""

from importlib.metadata import PackageNotFoundError, version

from .ansi import strip_ansi, visible_width
from .builder import TableBuilder
from .exceptions import PlainTableError, ValidationError
from .models import Alignment, TableConfig, configure
from .renderer import TableRenderer, render

try:
    __version__ = version("plaintable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "TableBuilder",
    "TableRenderer",
    # Models
    "Alignment",
    "TableConfig",
    # Functions
    "configure",
    "render",
    "strip_ansi",
    "visible_width",
    # Exceptions
    "PlainTableError",
    "ValidationError",
]
