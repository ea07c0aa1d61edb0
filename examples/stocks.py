#!/usr/bin/env python3
"""
Market Quotes Example

Renders a market summary with green/red ANSI-coloured figures. Colour codes
do not count toward column widths, so the columns stay aligned.

Run:
    uv run python examples/stocks.py
"""

from plaintable import configure, render


def up(value: str) -> str:
    return f"\x1b[92m{value}\x1b[0m"


def down(value: str) -> str:
    return f"\x1b[91m{value}\x1b[0m"


MARKETS = [
    ["DOW", "United States", up("42,313.00"), up("+ 137.89"), up("0.33%")],
    ["S&P 500", "United States", down("5,738.17"), down("- 7.20"), down("0.13%")],
    ["NASDAQ", "United States", down("18,119.59"), down("- 70.70"), down("0.39%")],
    ["CAC 40", "France", up("7,791.79"), up("+ 49.70"), up("0.64%")],
    ["FTSE 100", "United Kingdom", up("8,320.76"), up("+ 35.85"), up("0.43%")],
    ["DAX", "Germany", up("19,473.63"), up("+ 235.27"), up("1.22%")],
]


def main() -> None:
    config = configure(
        ["MARKET", "", "PRICE", "CHANGE", "%CHANGE"],
        alignments=["l", "l", "r", "r", "r"],
        data=MARKETS,
        column_separator=" | ",
    )
    print(render(config), end="")


if __name__ == "__main__":
    main()
