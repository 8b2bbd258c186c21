"""Formatting of values embedded in query strings and form bodies."""

import math
from decimal import Decimal


def format_float(f: float) -> str:
    """Format a float as the shortest decimal string that parses back to it.

    Positional notation only, with no trailing zeros and no trailing
    decimal point: ``0.0 -> "0"``, ``1.5 -> "1.5"``, ``1e-05 -> "0.00001"``.

    Raises:
        ValueError: If ``f`` is NaN or infinite.
    """
    f = float(f)
    if not math.isfinite(f):
        raise ValueError(f"cannot format non-finite float: {f!r}")

    # repr() is the shortest round-tripping form; Decimal drops the exponent.
    s = format(Decimal(repr(f)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s
