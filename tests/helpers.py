"""Sentence builders shared by the test modules."""

from navparse.nmea.checksum import calculate_checksum


def make_sentence(body: str) -> str:
    """Wrap ``body`` (code and payload) in ``$...*HH`` with a valid checksum."""
    return f"${body}*{calculate_checksum(body):02X}"


def corrupt_checksum(sentence: str) -> str:
    """Return the sentence with its last checksum digit changed."""
    last = sentence[-1]
    return sentence[:-1] + ("0" if last != "0" else "1")
