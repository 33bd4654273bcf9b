"""Parsers for the textual frequency conventions used by the station software.

Each parser accepts exactly one convention and returns the frequency in MHz,
or None when the text does not parse. The conventions cannot be told apart by
shape alone ("7101000" is valid raw kHz and valid dotted kHz), so callers pick
the parser that matches where the string came from:

    CAT         "014320000"   fixed-width kHz with three sub-kHz digits
    USER_MHZ    "14,32"       typed by the operator, comma or dot decimal
    DOTTED_MHZ  "14.320.000"  Hz-resolution digits, dots are group separators
    DOTTED_KHZ  "14.320.000"  same shape, read as kHz * 1000
    RAW_KHZ     "14320"       plain kHz as stored in the database
    N1MM        "1432000"     N1MM+ RadioInfo frequency, units of 10 Hz
"""
import logging
import math
import re
from enum import Enum
from typing import Callable, Dict, Optional, Union

from rigfreq.utils.band_helpers import frequency_to_band_mhz

logger = logging.getLogger(__name__)

# Minimum CAT frequency string length (Yaesu-style: 9 digits, zero-padded)
FREQ_MIN_CAT_LENGTH = 9

# Anything above this is treated as a typo rather than a real frequency
MAX_PLAUSIBLE_MHZ = 1000.0
MIN_RAW_KHZ_MHZ = 1e-3

DIGITS_RE = re.compile(r"[0-9]+")
_DOTTED_RE = re.compile(r"[0-9]+(?:\.[0-9]+)*")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Unsigned 0x/0o/0b integer literals, as typed into some rig control fields
_PREFIXED_INT_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


class FrequencyFormat(str, Enum):
    """Known textual frequency conventions."""

    CAT = "cat"
    USER_MHZ = "mhz"
    DOTTED_MHZ = "dotted-mhz"
    DOTTED_KHZ = "dotted-khz"
    RAW_KHZ = "raw-khz"
    N1MM = "n1mm"


def clean_text(text: Optional[str]) -> str:
    """Strip surrounding whitespace, mapping None and non-strings to ''."""
    if not isinstance(text, str):
        return ""
    return text.strip()


def digits_to_float(digits: str) -> Optional[float]:
    """Convert an already validated numeric string to a finite float, or None."""
    # float() turns very long digit strings into inf rather than raising
    value = float(digits)
    if not math.isfinite(value):
        return None
    return value


def parse_cat_khz_to_mhz(freq_khz: Optional[str]) -> Optional[float]:
    """Parse a CAT frequency string into MHz.

    The CAT string is fixed width and zero padded, e.g. "007101000". Its value
    is kHz with three extra sub-kHz digits, so it is divided by one million:
    "007101000" -> 7101000 -> 7.101 MHz.

    Args:
        freq_khz: CAT frequency string

    Returns:
        Optional[float]: Frequency in MHz, or None if the string is invalid
    """
    trimmed = clean_text(freq_khz)
    if len(trimmed) < FREQ_MIN_CAT_LENGTH or not DIGITS_RE.fullmatch(trimmed):
        logger.debug(f"Rejected CAT frequency {freq_khz!r}")
        return None

    value = digits_to_float(trimmed)
    if value is None or value <= 0:
        logger.debug(f"Rejected CAT frequency {freq_khz!r}: not a positive value")
        return None

    return value / 1_000_000


def parse_user_mhz(freq_mhz_str: Optional[str]) -> Optional[float]:
    """Parse a user-entered frequency in MHz.

    A comma is accepted as the decimal separator ("7,074"). Unsigned hex,
    octal and binary literals ("0x1C") are read as whole MHz. Values above
    1000 MHz are rejected as obvious typos.

    Args:
        freq_mhz_str: Frequency as typed by the operator

    Returns:
        Optional[float]: Frequency in MHz, or None if the entry is invalid
    """
    normalized = clean_text(freq_mhz_str).replace(",", ".", 1)
    if _PREFIXED_INT_RE.fullmatch(normalized):
        value = int(normalized, 0)
    elif normalized and _DECIMAL_RE.fullmatch(normalized):
        value = digits_to_float(normalized)
    else:
        logger.debug(f"Rejected user frequency {freq_mhz_str!r}")
        return None

    if value is None or value <= 0 or value > MAX_PLAUSIBLE_MHZ:
        logger.debug(f"Rejected user frequency {freq_mhz_str!r}: out of range")
        return None

    return float(value)


def _parse_dotted(freq_str: Optional[str]) -> Optional[float]:
    """Strip group separators from a dotted string and return its integer value."""
    trimmed = clean_text(freq_str)
    if not _DOTTED_RE.fullmatch(trimmed):
        return None
    return digits_to_float(trimmed.replace(".", ""))


def _parse_dotted_mhz(freq_str: Optional[str]) -> Optional[float]:
    """Parse a dotted MHz string such as "7.200.000" into MHz.

    Dots separate digit groups, they are not decimal points. The digits are
    read as a Hz-resolution integer (six fractional MHz digits).
    """
    raw = _parse_dotted(freq_str)
    if raw is None:
        logger.debug(f"Rejected dotted MHz frequency {freq_str!r}")
        return None

    value_mhz = raw / 1_000_000
    if value_mhz <= 0 or value_mhz > MAX_PLAUSIBLE_MHZ:
        logger.debug(f"Rejected dotted MHz frequency {freq_str!r}: out of range")
        return None

    return value_mhz


def parse_dotted_khz_to_mhz(freq_str: Optional[str]) -> Optional[float]:
    """Parse a dotted kHz string such as "7.101.000" (7101.000 kHz) into MHz.

    The digits are read as kHz * 1000, so "7.101.000" -> 7101000 -> 7.101 MHz.
    Unlike the dotted MHz form there is no upper limit.

    Args:
        freq_str: Dotted kHz string

    Returns:
        Optional[float]: Frequency in MHz, or None if the string is invalid
    """
    raw = _parse_dotted(freq_str)
    if raw is None or raw <= 0:
        logger.debug(f"Rejected dotted kHz frequency {freq_str!r}")
        return None

    return raw / 1_000_000


def parse_raw_khz_to_mhz(freq_str: Optional[str]) -> Optional[float]:
    """Parse a plain kHz string from the database, e.g. "14320", into MHz.

    Args:
        freq_str: Unpadded, undotted kHz string

    Returns:
        Optional[float]: Frequency in MHz, or None if the string is invalid or
        the result lies outside 0.001-1000 MHz
    """
    trimmed = clean_text(freq_str)
    if not DIGITS_RE.fullmatch(trimmed):
        logger.debug(f"Rejected raw kHz frequency {freq_str!r}")
        return None

    value = digits_to_float(trimmed)
    if value is None or value <= 0:
        logger.debug(f"Rejected raw kHz frequency {freq_str!r}: not a positive value")
        return None

    mhz = value / 1_000
    if mhz > MAX_PLAUSIBLE_MHZ or mhz < MIN_RAW_KHZ_MHZ:
        logger.debug(f"Rejected raw kHz frequency {freq_str!r}: out of range")
        return None

    return mhz


def parse_n1mm_freq_to_mhz(freq: Optional[str]) -> Optional[float]:
    """Parse an N1MM+ RadioInfo frequency (units of 10 Hz) into MHz.

    "1415000" -> 14150.00 kHz -> 14.15 MHz.

    Args:
        freq: Contents of a <Freq> or <TXFreq> element

    Returns:
        Optional[float]: Frequency in MHz, or None if the value is invalid
    """
    trimmed = clean_text(freq)
    if not DIGITS_RE.fullmatch(trimmed):
        logger.debug(f"Rejected N1MM frequency {freq!r}")
        return None

    value = digits_to_float(trimmed)
    if value is None or value <= 0:
        logger.debug(f"Rejected N1MM frequency {freq!r}: not a positive value")
        return None

    mhz = value / 100_000
    if mhz > MAX_PLAUSIBLE_MHZ:
        logger.debug(f"Rejected N1MM frequency {freq!r}: out of range")
        return None

    return mhz


PARSERS: Dict[FrequencyFormat, Callable[[Optional[str]], Optional[float]]] = {
    FrequencyFormat.CAT: parse_cat_khz_to_mhz,
    FrequencyFormat.USER_MHZ: parse_user_mhz,
    FrequencyFormat.DOTTED_MHZ: _parse_dotted_mhz,
    FrequencyFormat.DOTTED_KHZ: parse_dotted_khz_to_mhz,
    FrequencyFormat.RAW_KHZ: parse_raw_khz_to_mhz,
    FrequencyFormat.N1MM: parse_n1mm_freq_to_mhz,
}


def get_parser(fmt: Union[FrequencyFormat, str]) -> Callable[[Optional[str]], Optional[float]]:
    """Get the parser for a frequency format.

    Args:
        fmt: A FrequencyFormat or its string value (e.g. "cat")

    Returns:
        Callable: The parser function

    Raises:
        ValueError: if the format is unknown
    """
    try:
        return PARSERS[FrequencyFormat(fmt)]
    except ValueError:
        valid = ", ".join(f.value for f in FrequencyFormat)
        raise ValueError(f"Unknown frequency format {fmt!r} (expected one of: {valid})") from None


def parse_frequency(text: Optional[str], fmt: Union[FrequencyFormat, str]) -> Optional[float]:
    """Parse a frequency string using the named convention.

    Args:
        text: Frequency string
        fmt: The convention the string is known to use

    Returns:
        Optional[float]: Frequency in MHz, or None if the string is invalid

    Raises:
        ValueError: if the format is unknown
    """
    return get_parser(fmt)(text)


def frequency_to_band(text: Optional[str], fmt: Union[FrequencyFormat, str]) -> str:
    """Map a frequency string in the named convention to a band name ('' if none)."""
    return frequency_to_band_mhz(parse_frequency(text, fmt))


def frequency_to_band_from_cat(freq_khz: Optional[str]) -> str:
    """Map a CAT kHz string (9-digit) to a band name."""
    return frequency_to_band_mhz(parse_cat_khz_to_mhz(freq_khz))


def frequency_to_band_from_mhz(freq_mhz_str: Optional[str]) -> str:
    """Map a user MHz string to a band name."""
    return frequency_to_band_mhz(parse_user_mhz(freq_mhz_str))


def frequency_to_band_from_dotted_mhz(freq_str: Optional[str]) -> str:
    """Map a dotted MHz string (e.g. "7.200.000") to a band name."""
    return frequency_to_band_mhz(_parse_dotted_mhz(freq_str))
