"""Result consumer interface for ``NMEAParser``.

The parser reports every line through exactly one outcome callback
(``on_rmc``/``on_gga``/``on_gsa``, one ``on_gsv`` per satellite,
``on_bad_checksum``, ``on_unrecognized`` or ``on_exception``), always
bracketed by ``on_start`` and ``on_finished``.
"""

from typing import Any

from navparse.nmea.types import GGAEvent, GSAEvent, GSVEvent, NMEAEvent, RMCEvent


class NMEAHandler:
    """Base consumer with no-op callbacks; override the ones you need.

    Example:
        >>> class Printer(NMEAHandler):
        ...     def on_gga(self, event):
        ...         print(event.latitude, event.longitude)
        >>> NMEAParser(Printer()).parse(line)
    """

    def on_start(self) -> None:
        pass

    def on_finished(self) -> None:
        pass

    def on_rmc(self, event: RMCEvent) -> None:
        pass

    def on_gga(self, event: GGAEvent) -> None:
        pass

    def on_gsv(self, event: GSVEvent) -> None:
        pass

    def on_gsa(self, event: GSAEvent) -> None:
        pass

    def on_bad_checksum(self, expected: int, actual: int) -> None:
        """Called when the transmitted checksum differs from the computed one.

        Args:
            expected: Checksum carried by the sentence after ``*``.
            actual: XOR of the bytes between ``$`` and ``*``.
        """

    def on_unrecognized(self, line: str) -> None:
        """Called with the whitespace-stripped line when it cannot be decoded."""

    def on_exception(self, error: Exception) -> None:
        """Called when a field fails to decode after the checksum passed."""


class EventRecorder(NMEAHandler):
    """Handler that records every callback in order.

    ``calls`` holds ``(callback_name, argument)`` pairs, including the
    bracketing ``on_start``/``on_finished`` calls (with a None argument).
    ``events`` holds only the decoded sentence events.

    Example:
        >>> recorder = EventRecorder()
        >>> NMEAParser(recorder).parse("$GPGGA,...*47")
        >>> recorder.events
        [GGAEvent(...)]
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    @property
    def events(self) -> list[NMEAEvent]:
        return [
            argument
            for name, argument in self.calls
            if name in ("on_rmc", "on_gga", "on_gsv", "on_gsa")
        ]

    @property
    def outcomes(self) -> list[str]:
        """Callback names between the bracketing calls."""
        return [
            name for name, _ in self.calls if name not in ("on_start", "on_finished")
        ]

    def on_start(self) -> None:
        self.calls.append(("on_start", None))

    def on_finished(self) -> None:
        self.calls.append(("on_finished", None))

    def on_rmc(self, event: RMCEvent) -> None:
        self.calls.append(("on_rmc", event))

    def on_gga(self, event: GGAEvent) -> None:
        self.calls.append(("on_gga", event))

    def on_gsv(self, event: GSVEvent) -> None:
        self.calls.append(("on_gsv", event))

    def on_gsa(self, event: GSAEvent) -> None:
        self.calls.append(("on_gsa", event))

    def on_bad_checksum(self, expected: int, actual: int) -> None:
        self.calls.append(("on_bad_checksum", (expected, actual)))

    def on_unrecognized(self, line: str) -> None:
        self.calls.append(("on_unrecognized", line))

    def on_exception(self, error: Exception) -> None:
        self.calls.append(("on_exception", error))
