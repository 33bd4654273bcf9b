"""Tests for band_helpers module."""

import math
import unittest

from rigfreq.utils.band_helpers import (
    BAND_NAMES, BAND_RANGES, BandRange, band_to_bcd, frequency_to_band_mhz,
    get_band_range, _check_band_table
)


class TestBandTable(unittest.TestCase):
    """Tests for the band table itself."""

    def test_every_band_listed_once_in_order(self):
        """Test that the table lists each band name once, ascending."""
        self.assertEqual(tuple(r.band for r in BAND_RANGES), BAND_NAMES)
        self.assertEqual(len(BAND_NAMES), 11)

    def test_ranges_do_not_overlap(self):
        """Test that neighbouring ranges are disjoint and ascending."""
        for lower, upper in zip(BAND_RANGES, BAND_RANGES[1:]):
            self.assertLess(lower.max_mhz, upper.min_mhz)

    def test_table_is_immutable(self):
        """Test that the table cannot be modified in place."""
        with self.assertRaises(TypeError):
            BAND_RANGES[0] = BandRange("160m", 1.0, 2.0)
        with self.assertRaises(AttributeError):
            BAND_RANGES[0].min_mhz = 1.0

    def test_check_rejects_overlap(self):
        """Test that an inconsistent table is reported."""
        bad = list(BAND_RANGES)
        bad[1] = BandRange("80m", 1.9, 4.0)
        with self.assertRaises(AssertionError):
            _check_band_table(tuple(bad))

    def test_check_rejects_missing_band(self):
        """Test that a table missing a band is reported."""
        with self.assertRaises(AssertionError):
            _check_band_table(BAND_RANGES[:-1])


class TestFrequencyToBand(unittest.TestCase):
    """Tests for frequency_to_band_mhz."""

    def test_typical_frequencies(self):
        """Test band lookup for a frequency inside each band."""
        self.assertEqual(frequency_to_band_mhz(1.83), "160m")
        self.assertEqual(frequency_to_band_mhz(3.75), "80m")
        self.assertEqual(frequency_to_band_mhz(5.35), "60m")
        self.assertEqual(frequency_to_band_mhz(7.15), "40m")
        self.assertEqual(frequency_to_band_mhz(10.125), "30m")
        self.assertEqual(frequency_to_band_mhz(14.2), "20m")
        self.assertEqual(frequency_to_band_mhz(18.1), "17m")
        self.assertEqual(frequency_to_band_mhz(21.3), "15m")
        self.assertEqual(frequency_to_band_mhz(24.9), "12m")
        self.assertEqual(frequency_to_band_mhz(28.5), "10m")
        self.assertEqual(frequency_to_band_mhz(50.125), "6m")

    def test_band_edges_are_inclusive(self):
        """Test that both edges of every band resolve to that band."""
        for band_range in BAND_RANGES:
            with self.subTest(band=band_range.band):
                self.assertEqual(frequency_to_band_mhz(band_range.min_mhz), band_range.band)
                self.assertEqual(frequency_to_band_mhz(band_range.max_mhz), band_range.band)

    def test_just_outside_band_edges(self):
        """Test that values 1 kHz outside a band edge resolve to no band."""
        for band_range in BAND_RANGES:
            with self.subTest(band=band_range.band):
                self.assertEqual(frequency_to_band_mhz(band_range.min_mhz - 0.001), "")
                self.assertEqual(frequency_to_band_mhz(band_range.max_mhz + 0.001), "")

    def test_gaps_and_out_of_range(self):
        """Test frequencies between and beyond the bands."""
        self.assertEqual(frequency_to_band_mhz(2.5), "")
        self.assertEqual(frequency_to_band_mhz(12.0), "")
        self.assertEqual(frequency_to_band_mhz(144.2), "")
        self.assertEqual(frequency_to_band_mhz(0.0), "")
        self.assertEqual(frequency_to_band_mhz(-7.1), "")

    def test_missing_and_non_finite(self):
        """Test that absent and non-finite values give no band."""
        self.assertEqual(frequency_to_band_mhz(None), "")
        self.assertEqual(frequency_to_band_mhz(math.nan), "")
        self.assertEqual(frequency_to_band_mhz(math.inf), "")
        self.assertEqual(frequency_to_band_mhz("7.1"), "")
        self.assertEqual(frequency_to_band_mhz(True), "")

    def test_integer_input(self):
        """Test that whole MHz integers are accepted."""
        self.assertEqual(frequency_to_band_mhz(7), "40m")
        self.assertEqual(frequency_to_band_mhz(50), "6m")


class TestBandHelpers(unittest.TestCase):
    """Tests for the band lookup helpers."""

    def test_get_band_range(self):
        """Test looking up a band's range by name."""
        self.assertEqual(get_band_range("20m"), BandRange("20m", 14.0, 14.35))
        self.assertIsNone(get_band_range("2m"))
        self.assertIsNone(get_band_range(""))

    def test_band_to_bcd(self):
        """Test BCD values for each band."""
        self.assertEqual(band_to_bcd("160m"), 0b0001)
        self.assertEqual(band_to_bcd("80m"), 0b0010)
        self.assertEqual(band_to_bcd("60m"), 0b0000)
        self.assertEqual(band_to_bcd("40m"), 0b0011)
        self.assertEqual(band_to_bcd("30m"), 0b0100)
        self.assertEqual(band_to_bcd("20m"), 0b0101)
        self.assertEqual(band_to_bcd("17m"), 0b0110)
        self.assertEqual(band_to_bcd("15m"), 0b0111)
        self.assertEqual(band_to_bcd("12m"), 0b1000)
        self.assertEqual(band_to_bcd("10m"), 0b1001)
        self.assertEqual(band_to_bcd("6m"), 0b1010)

        # No band
        self.assertEqual(band_to_bcd(""), 0b0000)
        self.assertEqual(band_to_bcd("2m"), 0b0000)


if __name__ == '__main__':
    unittest.main()
