"""Unit tests for the NMEA parser entry point."""

import logging
from unittest.mock import MagicMock

import pytest

from navparse import (
    SENTENCE_TYPES,
    FixQuality,
    GGAEvent,
    GSAEvent,
    NMEAHandler,
    NMEAParser,
    RMCEvent,
    SentenceType,
    Talker,
)
from navparse.nmea.symbols import Status
from tests.helpers import corrupt_checksum, make_sentence

GGA_EXAMPLE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
RMC_EXAMPLE = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
RMC_VOID = "$GPRMC,123519,V,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*7D"
GSV_EXAMPLE = "$GPGSV,3,1,11,29,83,295,,25,66,112,15.9,28,52,266,14.1,31,35,305,,1*69"
GSA_EXAMPLE = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"
VTG_EXAMPLE = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25"
GGA_BAD_QUALITY = "$GPGGA,123519,4807.038,N,01131.000,E,9,08,0.9,545.4,M,46.9,M,,*4F"


def _call_names(handler: MagicMock) -> list[str]:
    return [name for name, _, _ in handler.method_calls]


class TestSentenceTypes:
    """Tests for the dispatch table."""

    def test_eight_recognized_codes(self):
        assert set(SENTENCE_TYPES) == {
            "GPRMC", "GNRMC", "GPGGA", "GNGGA",
            "GPGSV", "GNGSV", "GPGSA", "GNGSA",
        }

    def test_talker_variant(self):
        assert SENTENCE_TYPES["GNGSA"] == (SentenceType.GSA, Talker.GN)
        assert SENTENCE_TYPES["GPRMC"] == (SentenceType.RMC, Talker.GP)


class TestNMEAParser:
    """Tests for NMEAParser.parse."""

    def test_handler_required(self):
        with pytest.raises(TypeError):
            NMEAParser(None)

    def test_gga_example(self, parser, recorder):
        parser.parse(GGA_EXAMPLE)

        assert recorder.outcomes == ["on_gga"]
        (event,) = recorder.events
        assert isinstance(event, GGAEvent)
        assert event.time == 45319000
        assert event.latitude == pytest.approx(48.1173, rel=1e-4)
        assert event.longitude == pytest.approx(11.5167, rel=1e-4)
        assert event.altitude == pytest.approx(498.5)
        assert event.quality is FixQuality.GPS
        assert event.satellites == 8
        assert event.hdop == pytest.approx(0.9)
        assert event.talker is Talker.GP

    def test_rmc_example(self, parser, recorder):
        parser.parse(RMC_EXAMPLE)

        (event,) = recorder.events
        assert isinstance(event, RMCEvent)
        assert event.status is Status.VALID
        assert event.speed == pytest.approx(11.524, abs=1e-3)
        assert event.course == pytest.approx(84.4)
        assert event.date == 764380800000

    def test_rmc_void_example(self, parser, recorder):
        parser.parse(RMC_VOID)

        (event,) = recorder.events
        assert event.status is Status.VOID
        assert event.time == 45319000
        assert event.latitude is None
        assert event.longitude is None
        assert event.speed is None
        assert event.course is None
        assert event.date is None

    def test_gsv_emits_one_event_per_satellite(self, parser, recorder):
        parser.parse(GSV_EXAMPLE)

        assert recorder.outcomes == ["on_gsv"] * 4
        assert [event.index for event in recorder.events] == [0, 1, 2, 3]

    def test_gsv_without_satellites_is_unrecognized(self, parser, recorder):
        sentence = make_sentence("GPGSV,1,1,00")
        parser.parse(sentence)

        assert recorder.calls == [
            ("on_start", None),
            ("on_unrecognized", sentence),
            ("on_finished", None),
        ]

    def test_gsv_with_malformed_first_prn_is_unrecognized(self, parser, recorder):
        sentence = make_sentence("GPGSV,3,1,11,2,83,295,,25,66,112,15.9")
        parser.parse(sentence)

        assert recorder.outcomes == ["on_unrecognized"]
        assert recorder.events == []

    def test_gsa_example(self, parser, recorder):
        parser.parse(GSA_EXAMPLE)

        (event,) = recorder.events
        assert isinstance(event, GSAEvent)
        assert event.prns == {4, 5, 9, 12, 24}

    def test_gn_variants(self, parser, recorder):
        parser.parse_lines(
            [
                make_sentence("GNRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W"),
                make_sentence("GNGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"),
                make_sentence("GNGSV,1,1,01,29,83,295,40"),
                make_sentence("GNGSA,A,3,01,02,03,,,,,,,,,,2.0,1.0,1.7,1.2,1"),
            ]
        )

        assert [type(event).__name__ for event in recorder.events] == [
            "RMCEvent", "GGAEvent", "GSVEvent", "GSAEvent",
        ]
        assert all(event.is_gn for event in recorder.events)
        assert recorder.events[3].system_id == 1

    def test_bad_checksum(self, parser, recorder):
        parser.parse(GGA_EXAMPLE[:-2] + "46")

        assert recorder.calls == [
            ("on_start", None),
            ("on_bad_checksum", (0x46, 0x47)),
            ("on_finished", None),
        ]

    def test_altered_payload_keeps_old_checksum(self, parser, recorder):
        parser.parse(RMC_EXAMPLE.replace("022.4", "022.5"))

        assert recorder.outcomes == ["on_bad_checksum"]
        assert recorder.events == []

    def test_lowercase_checksum(self, parser, recorder):
        parser.parse(RMC_EXAMPLE[:-2] + "6a")
        assert recorder.outcomes == ["on_rmc"]

    def test_unknown_sentence_code(self, parser, recorder):
        parser.parse(VTG_EXAMPLE)
        assert recorder.calls[1] == ("on_unrecognized", VTG_EXAMPLE)

    def test_unsupported_talker(self, parser, recorder):
        parser.parse(make_sentence("GLGSV,1,1,01,65,83,295,40"))
        assert recorder.outcomes == ["on_unrecognized"]

    def test_grammar_mismatch(self, parser, recorder):
        parser.parse(make_sentence("GPGGA,123519,4807.038,N"))
        assert recorder.outcomes == ["on_unrecognized"]

    def test_envelope_mismatch(self, parser, recorder):
        parser.parse("garbage line\r\n")
        assert recorder.calls[1] == ("on_unrecognized", "garbageline")

    def test_truncated_line(self, parser, recorder):
        parser.parse(GGA_EXAMPLE[:-1])
        assert recorder.outcomes == ["on_unrecognized"]

    def test_field_decode_failure(self, parser, recorder):
        parser.parse(GGA_BAD_QUALITY)

        assert recorder.outcomes == ["on_exception"]
        assert isinstance(recorder.calls[1][1], ValueError)

    def test_field_decode_failure_is_logged(self, parser, caplog):
        with caplog.at_level(logging.WARNING, logger="navparse.nmea_parser"):
            parser.parse(GGA_BAD_QUALITY)
        assert "Failed to decode" in caplog.text

    def test_whitespace_anywhere_is_ignored(self, parser, recorder):
        parser.parse(" $GPGGA,123519,4807.038,N,\t01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n")
        assert recorder.outcomes == ["on_gga"]

    def test_parsing_is_idempotent(self, parser, recorder):
        parser.parse(RMC_EXAMPLE)
        parser.parse(RMC_EXAMPLE)

        first, second = recorder.events
        assert first == second

    def test_failures_do_not_affect_next_line(self, parser, recorder):
        parser.parse_lines([GGA_BAD_QUALITY, "junk", GGA_EXAMPLE[:-2] + "00", GGA_EXAMPLE])

        assert recorder.outcomes == [
            "on_exception", "on_unrecognized", "on_bad_checksum", "on_gga",
        ]

    def test_corrupted_checksum_digit(self, parser, recorder):
        parser.parse(corrupt_checksum(GSA_EXAMPLE))
        assert recorder.outcomes == ["on_bad_checksum"]


class TestHandlerCallbacks:
    """Tests for the callback protocol with a mock handler."""

    def test_bracketing_on_success(self):
        handler = MagicMock(spec=NMEAHandler)
        NMEAParser(handler).parse(GGA_EXAMPLE)
        assert _call_names(handler) == ["on_start", "on_gga", "on_finished"]

    def test_bracketing_on_failure(self):
        handler = MagicMock(spec=NMEAHandler)
        NMEAParser(handler).parse("")
        handler.on_unrecognized.assert_called_once_with("")
        assert _call_names(handler) == ["on_start", "on_unrecognized", "on_finished"]

    def test_exception_in_callback_is_reported(self):
        handler = MagicMock(spec=NMEAHandler)
        error = RuntimeError("storage full")
        handler.on_rmc.side_effect = error

        NMEAParser(handler).parse(RMC_EXAMPLE)

        handler.on_exception.assert_called_once_with(error)
        assert _call_names(handler)[-1] == "on_finished"

    def test_base_handler_ignores_everything(self):
        parser = NMEAParser(NMEAHandler())
        for line in (GGA_EXAMPLE, RMC_VOID, GSV_EXAMPLE, GSA_EXAMPLE, VTG_EXAMPLE, "x"):
            parser.parse(line)
