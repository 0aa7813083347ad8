"""NMEA field grammar and decoding utilities.

NMEA fields are positional and comma-separated; most of them may be empty
(consecutive commas indicate missing data). A sentence type is described by a
``Grammar``: an ordered list of ``Token`` objects, one per field position.
Matching a payload against a grammar checks every field's shape and, for
symbol tokens, membership in a closed set. A successful match yields a
``FieldCursor`` that converts the fields in order into typed values, returning
None for empty fields so callers can distinguish "no data" from "zero value".

Example:
    >>> grammar = Grammar("XYZ", [float_token("speed"), one_of("status", Status)])
    >>> cursor = grammar.match("022.4,A")
    >>> cursor.next_float(), cursor.next_symbol(Status)
    (22.4, <Status.VALID: 'A'>)
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import TypeVar

from navparse.nmea.symbols import LatitudeHemisphere, LongitudeHemisphere, symbols

E = TypeVar("E", bound=Enum)

# 1 knot = 1852 m / 3600 s
KNOTS_TO_METERS_PER_SECOND = 0.514444

_FLOAT = r"\d*\.?\d+"
_SIGNED_FLOAT = r"-?\d*\.?\d+"

LATITUDE_DEGREE_DIGITS = 2
LONGITUDE_DEGREE_DIGITS = 3


# --- token primitives ---------------------------------------------------------


@dataclass(frozen=True)
class Token:
    """One positional field of a sentence grammar.

    Attributes:
        name: Field name, used in error messages.
        pattern: Regular expression the whole field must match.
        optional: Whether an empty (or, at the end of a line, missing)
            field is accepted.
        allowed: Closed symbol set; when given, the field must be one of
            these values instead of matching ``pattern``.
    """

    name: str
    pattern: re.Pattern[str] | None = None
    optional: bool = True
    allowed: frozenset[str] | None = None

    def accepts(self, value: str) -> bool:
        if not value:
            return self.optional
        if self.allowed is not None:
            return value in self.allowed
        return self.pattern is not None and self.pattern.fullmatch(value) is not None


def optional(name: str, pattern: str) -> Token:
    return Token(name, re.compile(pattern))


def required(name: str, pattern: str) -> Token:
    return Token(name, re.compile(pattern), optional=False)


def float_token(name: str, *, is_optional: bool = True) -> Token:
    return Token(name, re.compile(_FLOAT), optional=is_optional)


def signed_float_token(name: str, *, is_optional: bool = True) -> Token:
    return Token(name, re.compile(_SIGNED_FLOAT), optional=is_optional)


def int_token(name: str, *, is_optional: bool = True) -> Token:
    return Token(name, re.compile(r"\d+"), optional=is_optional)


def digits(name: str, width: int, *, is_optional: bool = True) -> Token:
    """Exactly ``width`` decimal digits, e.g. ``digits("prn", 2)`` for ``"07"``."""
    return Token(name, re.compile(rf"\d{{{width}}}"), optional=is_optional)


def one_of(name: str, enum: type[Enum], *, is_optional: bool = True) -> Token:
    """A field restricted to the wire values of a symbol set."""
    return Token(name, optional=is_optional, allowed=symbols(enum))


def literal(name: str, value: str, *, is_optional: bool = True) -> Token:
    return Token(name, optional=is_optional, allowed=frozenset({value}))


def time_token(name: str = "time") -> Token:
    """UTC time of day, HHMMSS with an optional sub-second fraction."""
    return optional(name, r"\d{6}(?:\.\d*)?")


def coordinate_token(name: str, degree_digits: int) -> Token:
    """Degrees (2 or 3 digits) followed by optional MM.mmmm minutes."""
    return optional(name, rf"\d{{{degree_digits}}}(?:\d{{2}}(?:\.\d+)?)?")


# --- grammar ------------------------------------------------------------------


class FieldCursor:
    """Sequential, typed access to the fields of one matched sentence.

    The cursor is created per match and never shared, so decoding needs no
    locking. Reading past the last matched field yields empty values.
    """

    def __init__(self, grammar: str, values: list[str]) -> None:
        self._grammar = grammar
        self._values = values
        self._index = 0

    def skip(self, count: int = 1) -> None:
        self._index += count

    def next_string(self) -> str | None:
        value = self._values[self._index] if self._index < len(self._values) else ""
        self._index += 1
        return value or None

    def next_int(self) -> int | None:
        value = self.next_string()
        return int(value) if value is not None else None

    def next_float(self, default: float | None = None) -> float | None:
        value = self.next_string()
        return float(value) if value is not None else default

    def next_symbol(self, enum: type[E]) -> E | None:
        """Decode a letter field into its enum member."""
        value = self.next_string()
        return enum(value) if value is not None else None

    def next_indexed(self, enum: type[E]) -> E | None:
        """Decode a digit field into the enum member with that value.

        Raises:
            ValueError: If the digit has no member (e.g. fix quality 9).
        """
        value = self.next_int()
        return enum(value) if value is not None else None

    def __repr__(self) -> str:
        return f"FieldCursor(grammar={self._grammar!r}, index={self._index})"


class Grammar:
    """Ordered field layout of one sentence type.

    Args:
        name: Sentence name, e.g. ``"RMC"``.
        tokens: One token per comma-separated field of the payload.
        min_fields: Number of fields a line must contain; the remaining
            trailing tokens may be missing entirely. Defaults to all tokens.
    """

    def __init__(
        self,
        name: str,
        tokens: Iterable[Token],
        min_fields: int | None = None,
    ) -> None:
        self.name = name
        self.tokens = tuple(tokens)
        self.min_fields = len(self.tokens) if min_fields is None else min_fields

    def _missing_required(self, count: int) -> bool:
        return any(not token.optional for token in self.tokens[count:])

    def match(self, payload: str) -> FieldCursor | None:
        """Match the whole payload, returning None on any mismatch."""
        fields = payload.split(",")
        if not self.min_fields <= len(fields) <= len(self.tokens):
            return None
        for token, value in zip(self.tokens, fields):
            if not token.accepts(value):
                return None
        if self._missing_required(len(fields)):
            return None
        return FieldCursor(self.name, fields)

    def scan(self, payload: str) -> FieldCursor | None:
        """Match the longest acceptable prefix of the payload.

        Fields beyond the grammar are ignored, and matching stops at the first
        field that does not fit its token. Only the required tokens have to
        be present for the scan to succeed.
        """
        matched: list[str] = []
        for token, value in zip(self.tokens, payload.split(",")):
            if not token.accepts(value):
                break
            matched.append(value)
        if self._missing_required(len(matched)):
            return None
        return FieldCursor(self.name, matched)

    def __repr__(self) -> str:
        return f"Grammar({self.name!r}, {len(self.tokens)} fields)"


# --- conversions --------------------------------------------------------------


def to_decimal_degrees(degrees: int, minutes: float) -> float:
    """Convert degrees and decimal minutes to decimal degrees.

    Example:
        >>> to_decimal_degrees(48, 7.038)  # 48° 07.038'
        48.1173
    """
    return degrees + minutes / 60.0


def parse_coordinate(value: str | None, degree_digits: int) -> float | None:
    """Convert a DDMM.mmmm / DDDMM.mmmm field to unsigned decimal degrees.

    Returns None when the field is empty or carries degrees only.
    """
    if value is None:
        return None
    minutes = value[degree_digits:]
    if not minutes:
        return None
    return to_decimal_degrees(int(value[:degree_digits]), float(minutes))


def signed_coordinate(
    magnitude: float | None,
    hemisphere: LatitudeHemisphere | LongitudeHemisphere | None,
) -> float | None:
    """Apply the hemisphere sign: South and West are negative.

    Both parts are needed; a coordinate without its hemisphere letter (or the
    other way round) is reported as None rather than guessed.
    """
    if magnitude is None or hemisphere is None:
        return None
    if hemisphere in (LatitudeHemisphere.SOUTH, LongitudeHemisphere.WEST):
        return -magnitude
    return magnitude


def parse_time_of_day(value: str | None) -> int | None:
    """Convert HHMMSS[.sss] to milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        ValueError: If hours, minutes or seconds are out of range.

    Example:
        >>> parse_time_of_day("123519.5")
        45319500
    """
    if value is None:
        return None
    clock, _, fraction = value.partition(".")
    hours, minutes, seconds = int(clock[0:2]), int(clock[2:4]), int(clock[4:6])
    # 60 is a leap second
    if hours > 23 or minutes > 59 or seconds > 60:
        raise ValueError(f"Invalid time of day: {value!r}")
    milliseconds = ((hours * 60 + minutes) * 60 + seconds) * 1000
    if fraction:
        milliseconds += round(float("0." + fraction) * 1000)
    return milliseconds


def parse_date(value: str | None) -> int | None:
    """Convert DDMMYY to epoch milliseconds at 00:00 UTC of that day.

    Two-digit years follow ``strptime``: 69-99 are 19xx, 00-68 are 20xx.

    Raises:
        ValueError: If the day or month is out of range.
    """
    if value is None:
        return None
    day = datetime.strptime(value, "%d%m%y").replace(tzinfo=timezone.utc)
    return int(day.timestamp()) * 1000


def knots_to_meters_per_second(knots: float | None) -> float | None:
    if knots is None:
        return None
    return knots * KNOTS_TO_METERS_PER_SECOND
