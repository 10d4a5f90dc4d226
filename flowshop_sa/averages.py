"""Append per-group Lmax averages to experiment result CSV files."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Sequence

AVERAGE_COLUMN = "średnia"

_VALUE_COLUMN = {"n": "n", "h": "h", "tau": "tau", "range": "Pmax"}


def _split(text: str, delim: str = ",") -> list[str]:
    """Split like line-wise field reading: a trailing delimiter adds no field."""
    parts = text.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def output_name(path: str | os.PathLike[str]) -> str:
    """Name of the output file: ``_with_avg`` inserted before the last ``.csv``."""
    name = os.fspath(path)
    pos = name.rfind(".csv")
    if pos == -1:
        return name + "_with_avg.csv"
    return name[:pos] + "_with_avg" + name[pos:]


def group_key(row: Sequence[str], columns: Sequence[str]) -> str:
    """Group key ``<test type>:<swept value>`` of a result row."""
    typ = row[columns.index("TypTestu")]
    column = _VALUE_COLUMN.get(typ)
    if column is None:
        return f"{typ}:"
    if column not in columns:
        raise ValueError(f"column {column!r} needed for test type {typ!r} is missing")
    return f"{typ}:{row[columns.index(column)]}"


def add_averages(header: str, rows: Iterable[str]) -> list[str]:
    """Return output lines: the header and each valid row with its group's mean Lmax.

    Empty rows and rows whose field count differs from the header are dropped.
    """
    columns = _split(header)
    if "TypTestu" not in columns or "Lmax" not in columns:
        raise ValueError("missing required columns TypTestu and Lmax")
    lmax_index = columns.index("Lmax")

    records = [
        fields
        for fields in (_split(line) for line in rows if line)
        if len(fields) == len(columns)
    ]

    totals: dict[str, list[float]] = {}
    keys = []
    for fields in records:
        key = group_key(fields, columns)
        keys.append(key)
        bucket = totals.setdefault(key, [0.0, 0])
        bucket[0] += float(fields[lmax_index])
        bucket[1] += 1

    lines = [f"{header},{AVERAGE_COLUMN}"]
    for fields, key in zip(records, keys):
        total, count = totals[key]
        lines.append(",".join(fields) + f",{total / count:.2f}")
    return lines


def process_file(path: str | os.PathLike[str]) -> str:
    """Read a results CSV, write the averaged copy next to it and return its name."""
    with open(path, encoding="utf-8") as src:
        lines = src.read().splitlines()
    header, body = (lines[0], lines[1:]) if lines else ("", [])
    result = add_averages(header, body)
    target = output_name(path)
    Path(target).write_text("\n".join(result) + "\n", encoding="utf-8")
    return target


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Użycie: averages plik1.csv [plik2.csv ...]", file=sys.stderr)
        return 1
    for name in args:
        try:
            target = process_file(name)
        except OSError:
            print(f"Nie można otworzyć pliku: {name}", file=sys.stderr)
            continue
        except ValueError:
            print(f"Brak wymaganych kolumn w {name}", file=sys.stderr)
            continue
        print(f"Zapisano: {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())