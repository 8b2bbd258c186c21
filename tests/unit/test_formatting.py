"""Tests for query value formatting."""

import math
import random

import pytest

from untappd_client import format_float


@pytest.mark.unit
@pytest.mark.parametrize(
    ("f", "s"),
    [
        (0.0, "0"),
        (1.5, "1.5"),
        (2.2345, "2.2345"),
        (3.456789, "3.456789"),
        (42.0, "42"),
        (-84.6, "-84.6"),
        (1e-05, "0.00001"),
        (1e21, "1000000000000000000000"),
        (0.1 + 0.2, "0.30000000000000004"),
    ],
)
def test_format_float(f, s):
    """Test format_float produces the minimal positional string."""
    assert format_float(f) == s


@pytest.mark.unit
def test_format_float_round_trips():
    """Test parsing the output gives back the same float."""
    rng = random.Random(1234)
    values = [rng.uniform(-180, 180) for _ in range(200)]
    values += [rng.random() * 10 ** rng.randint(-30, 30) for _ in range(200)]
    values += [5e-324, 1.7976931348623157e308, -0.0]

    for f in values:
        assert float(format_float(f)) == f


@pytest.mark.unit
def test_format_float_never_uses_exponent_or_trailing_point():
    """Test output is plain decimal notation."""
    for f in (1e-10, 123456789.0, 1e100, 10.0):
        s = format_float(f)
        assert "e" not in s.lower()
        assert not s.endswith(".")


@pytest.mark.unit
@pytest.mark.parametrize("f", [math.nan, math.inf, -math.inf])
def test_format_float_rejects_non_finite(f):
    """Test NaN and infinities cannot be formatted."""
    with pytest.raises(ValueError):
        format_float(f)
