"""Light-curve data points and their plain-text file format."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .elements import LcurveError


@dataclass
class Datum:
    """One light-curve point.

    ``expose`` is in the same units as ``time``. ``ndiv`` is the number of
    sub-divisions used to smear the exposure.
    """

    time: float
    expose: float
    flux: float
    ferr: float
    weight: float
    ndiv: int


def parse_datum(line: str) -> Datum:
    """Parse 'time expose flux ferr weight ndiv' from a line.

    Tokens after the sixth are ignored. A negative uncertainty marks the
    point as unused: its uncertainty and weight are both set to zero.
    """
    tokens = line.split()
    try:
        time, expose, flux, ferr, weight = (float(tok) for tok in tokens[:5])
        ndiv = int(tokens[5])
    except (ValueError, IndexError):
        raise LcurveError(
            "failed to read t,e,f,fe,wgt,ndiv of a Datum"
        ) from None
    if ferr < 0.0:
        ferr -= ferr
        weight = 0.0
    return Datum(time, expose, flux, ferr, weight, ndiv)


def format_datum(datum: Datum) -> str:
    """Format a datum as one line of a data file (no newline)."""
    return (
        f"{datum.time:17.8f} {datum.expose:.8f} "
        f"{datum.flux:10.5f} {datum.ferr:.5f} {datum.weight:.5f} {datum.ndiv}"
    )


def _is_skipped(line: str) -> bool:
    return not line or line[0] in "# \t"


def read_data(path: str | Path) -> list[Datum]:
    """Read data points from a file.

    Lines that are empty or start with '#', a space or a tab are skipped.
    """
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise LcurveError(f"failed to open {path} for data.") from exc

    data = []
    for number, line in enumerate(text.splitlines(), start=1):
        if _is_skipped(line):
            continue
        try:
            data.append(parse_datum(line))
        except LcurveError:
            raise LcurveError(
                f"Data file input failure on line {number}"
            ) from None
    return data


def write_data(data: Iterable[Datum], path: str | Path) -> None:
    """Write data points to a file, one per line."""
    try:
        with open(path, "w") as fout:
            for datum in data:
                fout.write(format_datum(datum) + "\n")
    except OSError as exc:
        raise LcurveError(f"failed to open {path} for output.") from exc