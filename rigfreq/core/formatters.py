"""Digit-grouped display strings for frequencies."""
import logging
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from rigfreq.core.parsers import (
    DIGITS_RE,
    clean_text,
    digits_to_float,
    parse_cat_khz_to_mhz,
    parse_dotted_khz_to_mhz,
    parse_raw_khz_to_mhz,
)

logger = logging.getLogger(__name__)

_ZERO_GROUP_RE = re.compile(r"\.0+$")
_SINGLE_ZERO_RE = re.compile(r"\.0$")

# Wide enough for any finite float written out to six decimals
_FIXED_CONTEXT = Context(prec=400)


def _to_fixed(mhz: float, places: int) -> str:
    """Render with a fixed number of decimals, rounding exact halves upwards.

    Decimal(float) is exact, so 14.0625 really is a tie and becomes "14.063".
    """
    quantum = Decimal(1).scaleb(-places)
    return f"{Decimal(mhz).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT):f}"


def _group_digits(digits: str) -> str:
    """Split a digit string into dot separated groups of three from the right."""
    parts = []
    while len(digits) > 3:
        parts.insert(0, digits[-3:])
        digits = digits[:-3]
    if digits:
        parts.insert(0, digits)
    return ".".join(parts)


def _trim_zero_group(dotted: str) -> str:
    # A trailing all-zero group becomes ".0", which is then dropped
    return _SINGLE_ZERO_RE.sub("", _ZERO_GROUP_RE.sub(".0", dotted))


def group_mhz_digits(mhz: float) -> str:
    """Render a frequency in MHz as MHz.kHz.Hz digit groups.

    7.101234 -> "7.101.234", 14.32 -> "14.320.000"

    Args:
        mhz: Frequency in MHz

    Returns:
        str: Dotted frequency string
    """
    int_part, frac_part = _to_fixed(mhz, 6).split(".")
    base = int_part + frac_part

    hz_group = base[-3:]
    khz_group = base[-6:-3]
    mhz_group = base[:-6]

    parts = [mhz_group] if mhz_group else []
    parts.extend([khz_group, hz_group])
    return ".".join(parts)


def format_short_mhz(mhz: float) -> str:
    """Render a frequency in MHz with three decimals, dropping them for whole MHz.

    14.32 -> "14.320", 10.1 -> "10.100", 7.0 -> "7"
    """
    return _trim_zero_group(_to_fixed(mhz, 3))


def format_cat_khz_to_dotted_mhz(freq_khz: Optional[str]) -> str:
    """Format a CAT frequency string as dotted MHz for display.

    "014320000" -> "14.320.000". Returns an empty string on invalid input.
    """
    mhz = parse_cat_khz_to_mhz(freq_khz)
    if mhz is None:
        return ""
    return group_mhz_digits(mhz)


def format_dotted_khz_to_dotted_mhz(freq_str: Optional[str]) -> str:
    """Normalise a dotted kHz string (e.g. "7.101.000") to dotted MHz.

    Returns an empty string on invalid input.
    """
    mhz = parse_dotted_khz_to_mhz(freq_str)
    if mhz is None:
        return ""
    return group_mhz_digits(mhz)


def dotted_khz_to_short_mhz(freq_str: Optional[str]) -> str:
    """Convert a dotted kHz string into a short MHz string.

    Three decimals, as usual for HF: "14.320.000" -> "14.320". Whole MHz
    values lose their decimals entirely: "7.000.000" -> "7".
    Returns an empty string on invalid input.
    """
    mhz = parse_dotted_khz_to_mhz(freq_str)
    if mhz is None:
        return ""
    return format_short_mhz(mhz)


def raw_khz_string_to_dotted_mhz(freq_str: Optional[str]) -> str:
    """Convert a plain kHz string from the database into dotted MHz.

    "14320" -> "14.320". Returns an empty string when the value is missing
    or invalid.
    """
    mhz = parse_raw_khz_to_mhz(freq_str)
    if mhz is None:
        return ""
    return _trim_zero_group(group_mhz_digits(mhz))


def parse_database_freq_to_dotted_khz(freq: Optional[str]) -> str:
    """Group a 7-8 digit plain database frequency into dotted thousands.

    No unit conversion is done: "7101000" -> "7.101.000".

    Args:
        freq: Plain digit string

    Returns:
        str: Dotted string, or an empty string if the value is invalid
    """
    trimmed = clean_text(freq)
    if not DIGITS_RE.fullmatch(trimmed) or not 7 <= len(trimmed) <= 8:
        logger.debug(f"Rejected database frequency {freq!r}")
        return ""

    value = digits_to_float(trimmed)
    if value is None or value <= 0:
        logger.debug(f"Rejected database frequency {freq!r}: not a positive value")
        return ""

    return _group_digits(trimmed)
