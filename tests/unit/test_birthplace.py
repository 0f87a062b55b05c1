"""
Unit tests for the historical birthplace table.
"""

import pytest

from pnrparse.birthplace import BIRTHPLACE_RANGES, get_birthplace


class TestBirthplaceTable:
    """Tests for the static range table."""

    def test_has_27_ranges(self):
        assert len(BIRTHPLACE_RANGES) == 27

    def test_covers_0_to_99_without_gaps(self):
        """Test ranges are ordered, contiguous and non-overlapping."""
        expected_low = 0
        for low, high, _ in BIRTHPLACE_RANGES:
            assert low == expected_low
            assert high >= low
            expected_low = high + 1
        assert expected_low == 100


class TestGetBirthplace:
    """Tests for serial lookup."""

    @pytest.mark.parametrize(
        "serial,expected",
        [
            (0, "Stockholms län"),
            (5, "Stockholms län"),
            (13, "Stockholms län"),
            (14, "Uppsala län"),
            (32, "Gotlands län"),
            (44, "Malmöhus län"),
            (50, "Göteborgs och bohus län"),
            (65, "Extranummer"),
            (74, "Extranummer"),
            (92, "Norrbottens län"),
            (99, "Extranummer (immigrerade)"),
        ],
    )
    def test_lookup(self, serial, expected):
        assert get_birthplace(serial) == expected

    def test_every_serial_resolves(self):
        for serial in range(100):
            assert get_birthplace(serial) is not None

    @pytest.mark.parametrize("serial", [-1, 100, 1000])
    def test_out_of_range(self, serial):
        """Test lookup tolerates values outside the table."""
        assert get_birthplace(serial) is None
