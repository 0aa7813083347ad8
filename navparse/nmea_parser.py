"""NMEA 0183 parser for RMC, GGA, GSV and GSA sentences.

``NMEAParser`` turns one received line into callbacks on an ``NMEAHandler``:

1. Whitespace anywhere in the line is removed.
2. The line must fit the ``$TTTTT,<payload>*HH`` envelope.
3. The XOR checksum must match the transmitted one.
4. The five-letter code selects the sentence grammar and talker variant.
5. The payload is matched and decoded into a typed event.

All state of a call lives on the call stack, so a parser can be shared
between threads without locking.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from navparse.nmea.checksum import calculate_checksum, split_envelope, strip_whitespace
from navparse.nmea.gga import decode_gga
from navparse.nmea.gsa import decode_gsa
from navparse.nmea.gsv import decode_gsv
from navparse.nmea.handler import NMEAHandler
from navparse.nmea.rmc import decode_rmc
from navparse.nmea.symbols import Talker

logger = logging.getLogger(__name__)


class SentenceType(Enum):
    RMC = "RMC"
    GGA = "GGA"
    GSV = "GSV"
    GSA = "GSA"


# Recognized sentence codes and the talker variant each one carries
SENTENCE_TYPES: dict[str, tuple[SentenceType, Talker]] = {
    f"{talker.value}{sentence_type.value}": (sentence_type, talker)
    for sentence_type in SentenceType
    for talker in Talker
}


class NMEAParser:
    """Decode NMEA sentences into handler callbacks.

    Every call to ``parse`` invokes ``handler.on_start()`` first and
    ``handler.on_finished()`` last. In between exactly one outcome is
    reported: the decoded event(s), ``on_bad_checksum``,
    ``on_unrecognized`` or ``on_exception``. ``parse`` never raises.

    Args:
        handler: Consumer of the decoded events.

    Raises:
        TypeError: If ``handler`` is None.

    Example:
        >>> recorder = EventRecorder()
        >>> parser = NMEAParser(recorder)
        >>> parser.parse("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> round(recorder.events[0].altitude, 1)
        498.5
    """

    def __init__(self, handler: NMEAHandler) -> None:
        if handler is None:
            raise TypeError("NMEAParser requires a handler.")
        self._handler = handler

    @property
    def handler(self) -> NMEAHandler:
        return self._handler

    def parse(self, line: str) -> None:
        """Decode one line and report the outcome to the handler."""
        handler = self._handler
        handler.on_start()
        try:
            self._parse(strip_whitespace(line))
        except Exception as error:
            logger.warning("Failed to decode NMEA sentence %r: %s", line, error)
            handler.on_exception(error)
        finally:
            handler.on_finished()

    def parse_lines(self, lines: Iterable[str]) -> None:
        """Decode each line of an iterable, e.g. an open text file."""
        for line in lines:
            self.parse(line)

    def _parse(self, sentence: str) -> None:
        handler = self._handler

        raw = split_envelope(sentence)
        if raw is None:
            logger.debug("Unrecognized line: %r", sentence)
            handler.on_unrecognized(sentence)
            return

        actual = calculate_checksum(raw.body)
        if actual != raw.checksum:
            logger.debug(
                "Bad checksum in %s: expected %02X, calculated %02X",
                raw.code,
                raw.checksum,
                actual,
            )
            handler.on_bad_checksum(raw.checksum, actual)
            return

        if not self._dispatch(raw.code, raw.payload):
            logger.debug("Unrecognized %s sentence: %r", raw.code, sentence)
            handler.on_unrecognized(sentence)

    def _dispatch(self, code: str, payload: str) -> bool:
        """Decode the payload and deliver the event; False if unrecognized."""
        entry = SENTENCE_TYPES.get(code)
        if entry is None:
            return False

        sentence_type, talker = entry
        handler = self._handler

        if sentence_type is SentenceType.RMC:
            rmc = decode_rmc(payload, talker)
            if rmc is None:
                return False
            handler.on_rmc(rmc)
        elif sentence_type is SentenceType.GGA:
            gga = decode_gga(payload, talker)
            if gga is None:
                return False
            handler.on_gga(gga)
        elif sentence_type is SentenceType.GSV:
            satellites = decode_gsv(payload, talker)
            if satellites is None:
                return False
            for satellite in satellites:
                handler.on_gsv(satellite)
        elif sentence_type is SentenceType.GSA:
            gsa = decode_gsa(payload, talker)
            if gsa is None:
                return False
            handler.on_gsa(gsa)
        return True
