"""NMEA envelope and checksum validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
     ^^^^^ ^                                                       ^^
     code  payload                                           checksum (0x47)
"""

import re
from dataclasses import dataclass

# Whitespace may appear anywhere in a received line and is ignored
_WHITESPACE = str.maketrans("", "", " \t\r\n")

_ENVELOPE = re.compile(r"^\$([A-Z]{5}),(.*)\*([0-9a-fA-F]{2})$")


@dataclass(frozen=True)
class RawSentence:
    """A line that fits the ``$TTTTT,<payload>*HH`` envelope.

    Attributes:
        code: Talker and sentence type, e.g. ``"GPRMC"``.
        payload: Comma-separated fields after the code.
        checksum: Checksum transmitted after ``*``.
    """

    code: str
    payload: str
    checksum: int

    @property
    def body(self) -> str:
        """The characters the checksum covers: code, comma and payload."""
        return f"{self.code},{self.payload}"


def strip_whitespace(line: str) -> str:
    """Remove spaces, tabs, CR and LF anywhere in the line."""
    return line.translate(_WHITESPACE)


def split_envelope(sentence: str) -> RawSentence | None:
    """Split a whitespace-free sentence into code, payload and checksum.

    Returns:
        A RawSentence, or None if the line does not fit the envelope:
        - Missing '$' start delimiter or '*' checksum delimiter
        - Code is not five uppercase letters followed by a comma
        - Checksum is not exactly two hex digits at the end of the line

    Example:
        >>> split_envelope("$GPGSA,A,3,,,*1C")
        RawSentence(code='GPGSA', payload='A,3,,,', checksum=28)
    """
    match = _ENVELOPE.match(sentence)
    if match is None:
        return None
    code, payload, checksum = match.groups()
    return RawSentence(code=code, payload=payload, checksum=int(checksum, 16))


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for byte in content.encode("ascii", errors="replace"):
        result ^= byte
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  Whitespace anywhere in the line is ignored.

    Returns:
        True if the checksum is valid, False if the sentence does not fit the
        envelope or the calculated checksum differs from the provided one.

    Example:
        >>> validate_checksum("$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        True
    """
    raw = split_envelope(strip_whitespace(sentence))
    if raw is None:
        return False
    return calculate_checksum(raw.body) == raw.checksum
