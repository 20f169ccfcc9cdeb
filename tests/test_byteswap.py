import math

import pytest

from lcurvekit.byteswap import byte_swap


def test_single_low_byte_moves_to_top_32bit():
    assert byte_swap(1, "I") == 16777216


def test_16bit_swap():
    assert byte_swap(1, "H") == 256


def test_known_32bit_pattern():
    assert byte_swap(0x01020304, "I") == 0x04030201


def test_palindromic_bytes_unchanged():
    assert byte_swap(0x12343412, "I") == 0x12343412


def test_single_byte_unchanged():
    assert byte_swap(200, "B") == 200


@pytest.mark.parametrize(
    "value, fmt",
    [(123456789, "i"), (-5, "i"), (0xDEADBEEF, "I"), (-(2**40), "q"),
     (2**63 + 7, "Q"), (-300, "h"), (3.5, "d"), (-1.25e10, "d"), (0.75, "f")],
)
def test_round_trip(value, fmt):
    assert byte_swap(byte_swap(value, fmt), fmt) == value


def test_double_swap_changes_value():
    swapped = byte_swap(1.0, "d")
    assert swapped != 1.0
    assert byte_swap(swapped, "d") == 1.0
    assert not math.isnan(swapped)


def test_unsupported_format():
    with pytest.raises(ValueError):
        byte_swap(1, "s")


def test_out_of_range_value():
    with pytest.raises(ValueError):
        byte_swap(70000, "H")