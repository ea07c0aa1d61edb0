"""ANSI colour sequence handling for width computation.

Cells may carry SGR colour codes (``\\x1b[92m...\\x1b[0m``). Those codes take
no room on a terminal, so column widths are measured on the stripped text
while the cell itself is emitted untouched.
"""

import re

# ESC [ ... m, or ESC [ ... up to the end of the string when unterminated.
ANSI_SEQUENCE_PATTERN = re.compile(r"\x1b\[[^m]*(?:m|\Z)")


def strip_ansi(text: str) -> str:
    """
    Remove ANSI colour sequences from a string.

    Any sequence starting with ``ESC [`` is removed up to and including the
    first ``m``. The matching is naive: the body of the sequence is not
    validated, and an unterminated sequence swallows the rest of the string.
    A lone ``ESC`` that is not followed by ``[`` is left in place.

    Args:
        text: Possibly coloured text

    Returns:
        The text without colour sequences
    """
    if "\x1b" not in text:
        return text
    return ANSI_SEQUENCE_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Number of characters the text occupies once colour codes are removed."""
    return len(strip_ansi(text))
