"""Unit test fixtures for plaintable."""

import pytest


@pytest.fixture
def ports() -> list[list[str]]:
    """Six rows of open ports, as listed by lsof."""
    return [
        ["rapportd", "449", "Quentin", "*:61165"],
        ["Python", "22396", "Quentin", "*:8000"],
        ["foo", "108", "root", "*:1337"],
        ["rustrover", "30928", "Quentin", "127.0.0.1:63342"],
        ["Transmiss", "94671", "Quentin", "*:51413"],
        ["Transmiss", "94671", "Quentin", "*:51413"],
    ]


@pytest.fixture
def numbered_rows() -> list[list[str]]:
    """Seven numbered rows; rows 3 and 4 are wider than the rest."""
    return [
        ["1.", "---", "---"],
        ["2.", "---", "---"],
        ["3.", "------------", "------------"],
        ["4.", "------------", "------------"],
        ["5.", "---", "---"],
        ["6.", "---", "---"],
        ["7.", "---", "---"],
    ]
