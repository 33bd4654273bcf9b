"""Amateur band table and band lookup helpers."""
import logging
import math
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# Closed set of band names, in ascending frequency order
BAND_NAMES: Tuple[str, ...] = (
    "160m",
    "80m",
    "60m",
    "40m",
    "30m",
    "20m",
    "17m",
    "15m",
    "12m",
    "10m",
    "6m",
)


class BandRange(NamedTuple):
    """One amateur band allocation with inclusive bounds in MHz."""

    band: str
    min_mhz: float
    max_mhz: float

    def contains(self, freq_mhz: float) -> bool:
        """Check whether a frequency lies inside the band (both edges included)."""
        return self.min_mhz <= freq_mhz <= self.max_mhz


# ADIF-like amateur band ranges in MHz (simplified)
BAND_RANGES: Tuple[BandRange, ...] = (
    BandRange("160m", 1.8, 2.0),
    BandRange("80m", 3.5, 4.0),
    BandRange("60m", 5.0, 5.5),
    BandRange("40m", 7.0, 7.3),
    BandRange("30m", 10.1, 10.15),
    BandRange("20m", 14.0, 14.35),
    BandRange("17m", 18.068, 18.168),
    BandRange("15m", 21.0, 21.45),
    BandRange("12m", 24.89, 24.99),
    BandRange("10m", 28.0, 29.7),
    BandRange("6m", 50.0, 54.0),
)

# Band data (BCD) codes as driven onto band decoder lines.
# 60m has no code of its own on most decoders.
BAND_BCD_CODES = {
    "160m": 0b0001,
    "80m": 0b0010,
    "60m": 0b0000,
    "40m": 0b0011,
    "30m": 0b0100,
    "20m": 0b0101,
    "17m": 0b0110,
    "15m": 0b0111,
    "12m": 0b1000,
    "10m": 0b1001,
    "6m": 0b1010,
}


def _check_band_table(ranges: Tuple[BandRange, ...]) -> None:
    """Verify the band table is ordered, non-overlapping and complete.

    Raises:
        AssertionError: if the table is inconsistent. This only happens when
            the table above is edited incorrectly.
    """
    names = [r.band for r in ranges]
    if tuple(names) != BAND_NAMES:
        raise AssertionError(f"Band table does not list every band exactly once: {names}")

    for r in ranges:
        if not 0 < r.min_mhz <= r.max_mhz:
            raise AssertionError(f"Invalid bounds for {r.band}: {r.min_mhz}-{r.max_mhz}")

    for lower, upper in zip(ranges, ranges[1:]):
        if lower.max_mhz >= upper.min_mhz:
            raise AssertionError(f"Bands {lower.band} and {upper.band} overlap or are out of order")


_check_band_table(BAND_RANGES)


def frequency_to_band_mhz(freq_mhz: Optional[float]) -> str:
    """Get the band name for a frequency in MHz.

    Args:
        freq_mhz: Frequency in MHz, or None

    Returns:
        str: Band name (e.g. "40m"), or an empty string when the value is
        missing, not finite, or outside every listed band
    """
    if freq_mhz is None or isinstance(freq_mhz, bool):
        return ""
    try:
        if not math.isfinite(freq_mhz):
            return ""
    except TypeError:
        logger.debug(f"Cannot resolve band for non-numeric value {freq_mhz!r}")
        return ""

    for band_range in BAND_RANGES:
        if band_range.contains(freq_mhz):
            return band_range.band

    return ""


def get_band_range(band: str) -> Optional[BandRange]:
    """Look up the range of a band by name.

    Args:
        band: Band name (e.g. "20m")

    Returns:
        Optional[BandRange]: The band's range, or None for an unknown band
    """
    for band_range in BAND_RANGES:
        if band_range.band == band:
            return band_range
    return None


def band_to_bcd(band: str) -> int:
    """Get the BCD band data value for a band name.

    Args:
        band: Band name (e.g. "20m"); empty string for no band

    Returns:
        int: 4-bit BCD value, 0 for 60m and for unknown bands
    """
    return BAND_BCD_CODES.get(band, 0b0000)
