"""Parse, group and plot the classic iris flower measurements."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from dataclasses import dataclass
from itertools import cycle, groupby
from typing import Iterable, Iterator

from iterweave.adaptors import tuple_combinations
from iterweave.formatting import format_iter

PLOT_SIZE = 30
PLOT_SYMBOLS = "+ox"
COLUMNS = 4


class IrisParseError(ValueError):
    """A line could not be read as an iris record."""


@dataclass(frozen=True)
class Iris:
    """One flower: its species name and four measurements."""

    name: str
    data: tuple[float, float, float, float]


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_number(text: str) -> float:
    if "_" in text:
        raise IrisParseError(f"Numeric(invalid float literal {text!r})")
    try:
        return _f32(float(text))
    except ValueError:
        raise IrisParseError(f"Numeric(invalid float literal {text!r})") from None


def parse_iris(line: str) -> Iris:
    """Parse ``a,b,c,d,name`` into an :class:`Iris`; extra fields are ignored."""
    parts = [part.strip() for part in line.split(",")]
    data = tuple(_parse_number(part) for part in parts[:COLUMNS])
    if len(parts) <= COLUMNS:
        raise IrisParseError("Other(Missing name)")
    return Iris(parts[COLUMNS], data)  # type: ignore[arg-type]


def load_irises(lines: Iterable[str]) -> list[Iris]:
    """Parse every line, stopping at the first one that fails."""
    return [parse_iris(line.removesuffix("\n").removesuffix("\r")) for line in lines]


def _round_to_grid(x: float, low: float, high: float, n: int) -> int:
    diff = _f32(x - low)
    span = _f32(high - low)
    if span == 0:
        scaled = math.nan if diff == 0 or math.isnan(diff) else math.copysign(math.inf, diff)
    else:
        scaled = _f32(diff / span)
    value = _f32(scaled * (n - 1))
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        raise IndexError("plot position out of range")
    return int(value)


def _column_range(irises: list[Iris], column: int) -> tuple[float, float]:
    values = [iris.data[column] for iris in irises]
    if not values:
        raise ValueError("Can't find min/max of empty iterator")
    return min(values), max(values)


def _report(irises: list[Iris], size: int) -> Iterator[str]:
    ordered = sorted(irises, key=lambda iris: iris.name)
    symbols = cycle(PLOT_SYMBOLS)
    symbol_map: dict[str, str] = {}

    for species, group in groupby(ordered, key=lambda iris: iris.name):
        if species not in symbol_map:
            symbol_map[species] = next(symbols)
        yield f"{species} (symbol={symbol_map[species]})"
        for iris in group:
            yield f"{format_iter(iris.data, ', '):>3.1f}"

    for a, b in tuple_combinations(range(COLUMNS), 2):
        yield f"Column {a} vs {b}:"
        plot = [[" "] * size for _ in range(size)]
        min_x, max_x = _column_range(ordered, a)
        min_y, max_y = _column_range(ordered, b)
        for iris in ordered:
            ix = _round_to_grid(iris.data[a], min_x, max_x, size)
            iy = size - 1 - _round_to_grid(iris.data[b], min_y, max_y, size)
            if not (0 <= ix < size and 0 <= iy < size):
                raise IndexError("plot position out of range")
            plot[iy][ix] = symbol_map[iris.name]
        for row in plot:
            yield " ".join(row)


def render(irises: Iterable[Iris], size: int = PLOT_SIZE) -> str:
    """The full report: each species with its rows, then a plot per column pair."""
    if size < 1:
        raise ValueError("plot size must be at least 1")
    lines = list(_report(list(irises), size))
    return "".join(f"{line}\n" for line in lines)


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def main(argv: list[str] | None = None) -> int:
    """Read iris records from a file (or stdin) and print the report."""
    parser = argparse.ArgumentParser(description="Group and plot iris measurements.")
    parser.add_argument("data", nargs="?", default="-", help="data file, '-' for stdin")
    parser.add_argument("--size", type=int, default=PLOT_SIZE, help="plot size")
    args = parser.parse_args(argv)

    if args.data == "-":
        text = sys.stdin.read()
    else:
        with open(args.data, encoding="utf-8") as handle:
            text = handle.read()

    try:
        irises = load_irises(_split_lines(text))
    except IrisParseError as err:
        print(f"Error parsing: {err}")
        return 1

    sys.stdout.write(render(irises, args.size))
    return 0


if __name__ == "__main__":
    sys.exit(main())