"""Tests for C-Bus level conversion."""

import pytest

from pycgate import InvalidType, LevelError, OutOfRange, percent_to_raw, raw_to_percent


class TestRawToPercent:
    """Tests for raw_to_percent."""

    @pytest.mark.parametrize(
        ("raw", "percent"),
        [
            (0, 0),
            (1, 1),
            (2, 1),
            (3, 1),
            (4, 2),
            (5, 2),
            (6, 3),
            (43, 17),
            (44, 18),
            (128, 50),
            (129, 51),
            (250, 98),
            (251, 99),
            (252, 99),
            (253, 100),
            (255, 100),
        ],
    )
    def test_lookup_table(self, raw, percent):
        """Values from the C-Bus to percent level lookup table."""
        assert raw_to_percent(raw) == percent

    def test_not_linear(self):
        # round(44 / 255 * 100) would give 17
        assert raw_to_percent(44) == 18

    def test_total_and_monotonic(self):
        levels = [raw_to_percent(raw) for raw in range(256)]
        assert all(0 <= level <= 100 for level in levels)
        assert levels == sorted(levels)

    @pytest.mark.parametrize("raw", [-1, 256, 1000])
    def test_out_of_range(self, raw):
        with pytest.raises(OutOfRange):
            raw_to_percent(raw)

    @pytest.mark.parametrize("raw", ["129", 129.0, None, True])
    def test_bad_type(self, raw):
        with pytest.raises(InvalidType):
            raw_to_percent(raw)

    def test_errors_share_base(self):
        with pytest.raises(LevelError):
            raw_to_percent(-1)
        with pytest.raises(LevelError):
            raw_to_percent("1")


class TestPercentToRaw:
    """Tests for percent_to_raw."""

    def test_bounds(self):
        assert percent_to_raw(0) == 0
        assert percent_to_raw(100) == 255

    def test_known_values(self):
        assert percent_to_raw(1) == 3
        assert percent_to_raw(17) == 43
        assert percent_to_raw(50) == 128

    def test_inverse(self):
        for percent in range(101):
            assert raw_to_percent(percent_to_raw(percent)) == percent

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_out_of_range(self, percent):
        with pytest.raises(OutOfRange):
            percent_to_raw(percent)

    def test_bad_type(self):
        with pytest.raises(InvalidType):
            percent_to_raw("50")
