"""Frequency extraction from N1MM+ RadioInfo broadcasts.

N1MM+ logger broadcasts the state of each radio as a small XML document:

    <RadioInfo>
        <RadioNr>1</RadioNr>
        <Freq>1415000</Freq>
        <TXFreq>1415000</TXFreq>
        <Mode>USB</Mode>
    </RadioInfo>

Frequencies are integers in units of 10 Hz. This module only decodes the
payload; receiving it from the network is left to the application.
"""
import logging
from typing import Any, Dict, Optional, Union

import xmltodict

from rigfreq.core.parsers import parse_n1mm_freq_to_mhz

logger = logging.getLogger(__name__)

RADIO_INFO_KEY = "RadioInfo"
RADIO_NR_KEY = "RadioNr"
FREQ_KEY = "Freq"
TX_FREQ_KEY = "TXFreq"


def parse_radio_info(payload: Union[str, bytes, None]) -> Optional[Dict[str, Any]]:
    """Parse a RadioInfo payload into a dictionary.

    Args:
        payload: XML document as text or as raw UTF-8 datagram bytes

    Returns:
        Optional[Dict]: Contents of the RadioInfo element, or None if the
        payload is not a valid RadioInfo document
    """
    if not payload:
        return None

    try:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")
        document = xmltodict.parse(payload)
    except UnicodeDecodeError as e:
        logger.error(f"Decode error (invalid UTF-8) in N1MM payload: {e}")
        return None
    except xmltodict.expat.ExpatError as e:
        logger.error(f"XML parsing error in N1MM payload: {e}")
        return None

    radio_info = document.get(RADIO_INFO_KEY) if isinstance(document, dict) else None
    if not isinstance(radio_info, dict):
        logger.warning("N1MM payload is not a RadioInfo document")
        return None

    return dict(radio_info)


def radio_info_to_mhz(
    payload: Union[str, bytes, None],
    radio_nr: Optional[str] = None,
    tx: bool = False
) -> Optional[float]:
    """Extract the frequency in MHz from a RadioInfo payload.

    Args:
        payload: XML document as text or bytes
        radio_nr: Only accept broadcasts for this radio number (e.g. "1")
        tx: Use the transmit frequency instead of the receive frequency

    Returns:
        Optional[float]: Frequency in MHz, or None if the payload is invalid,
        is for another radio, or carries no usable frequency
    """
    radio_info = parse_radio_info(payload)
    if radio_info is None:
        return None

    if radio_nr is not None and radio_info.get(RADIO_NR_KEY) != str(radio_nr):
        logger.debug(f"Ignoring RadioInfo for radio {radio_info.get(RADIO_NR_KEY)!r}")
        return None

    key = TX_FREQ_KEY if tx else FREQ_KEY
    freq = radio_info.get(key)
    if freq is None:
        logger.warning(f"RadioInfo payload has no {key} element")
        return None

    return parse_n1mm_freq_to_mhz(freq)
