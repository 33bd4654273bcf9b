"""Tests for N1MM+ RadioInfo payload decoding."""

import unittest

from rigfreq.protocols.n1mm import parse_radio_info, radio_info_to_mhz
from rigfreq.utils.band_helpers import frequency_to_band_mhz

RADIO_INFO_XML = """<?xml version="1.0" encoding="utf-8"?>
<RadioInfo>
    <RadioNr>1</RadioNr>
    <Freq>1415000</Freq>
    <TXFreq>1415500</TXFreq>
    <Mode>USB</Mode>
    <OpCall>W9KKN</OpCall>
</RadioInfo>"""


class TestParseRadioInfo(unittest.TestCase):
    """Test cases for parse_radio_info."""

    def test_parse_text(self):
        """Test parsing a RadioInfo document from text."""
        result = parse_radio_info(RADIO_INFO_XML)

        self.assertIsNotNone(result)
        self.assertEqual(result["RadioNr"], "1")
        self.assertEqual(result["Freq"], "1415000")
        self.assertEqual(result["Mode"], "USB")

    def test_parse_bytes(self):
        """Test parsing a RadioInfo datagram as bytes."""
        result = parse_radio_info(RADIO_INFO_XML.encode("utf-8"))
        self.assertEqual(result["TXFreq"], "1415500")

    def test_invalid_xml(self):
        """Test that malformed XML gives None."""
        self.assertIsNone(parse_radio_info("<RadioInfo><Freq>1415000</RadioInfo>"))
        self.assertIsNone(parse_radio_info("not xml at all"))

    def test_invalid_utf8(self):
        """Test that undecodable bytes give None."""
        self.assertIsNone(parse_radio_info(b"\xff\xfe<RadioInfo/>"))

    def test_empty_and_other_documents(self):
        """Test that empty payloads and other documents give None."""
        self.assertIsNone(parse_radio_info(None))
        self.assertIsNone(parse_radio_info(""))
        self.assertIsNone(parse_radio_info("<contactinfo><call>W9KKN</call></contactinfo>"))
        self.assertIsNone(parse_radio_info("<RadioInfo/>"))


class TestRadioInfoToMHz(unittest.TestCase):
    """Test cases for radio_info_to_mhz."""

    def test_rx_frequency(self):
        """Test extracting the receive frequency."""
        mhz = radio_info_to_mhz(RADIO_INFO_XML)
        self.assertAlmostEqual(mhz, 14.15, delta=1e-9)
        self.assertEqual(frequency_to_band_mhz(mhz), "20m")

    def test_tx_frequency(self):
        """Test extracting the transmit frequency."""
        self.assertAlmostEqual(radio_info_to_mhz(RADIO_INFO_XML, tx=True), 14.155, delta=1e-9)

    def test_radio_number_filter(self):
        """Test that broadcasts for other radios are ignored."""
        self.assertIsNotNone(radio_info_to_mhz(RADIO_INFO_XML, radio_nr="1"))
        self.assertIsNotNone(radio_info_to_mhz(RADIO_INFO_XML, radio_nr=1))
        self.assertIsNone(radio_info_to_mhz(RADIO_INFO_XML, radio_nr="2"))

    def test_missing_or_bad_frequency(self):
        """Test payloads without a usable frequency."""
        self.assertIsNone(radio_info_to_mhz("<RadioInfo><RadioNr>1</RadioNr></RadioInfo>"))
        self.assertIsNone(radio_info_to_mhz("<RadioInfo><Freq>abc</Freq></RadioInfo>"))
        self.assertIsNone(radio_info_to_mhz("<RadioInfo><Freq>0</Freq></RadioInfo>"))
        self.assertIsNone(radio_info_to_mhz("garbage"))


if __name__ == '__main__':
    unittest.main()
