"""GSA sentence grammars and decoder.

GSA (GNSS DOP and Active Satellites) reports the satellites used in the
navigation solution and the dilution of precision of the fix.

GSA Sentence Format (legacy layout):
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                        |   |   |
           | | |                        |   |   +-- VDOP
           | | |                        |   +-- HDOP
           | | |                        +-- PDOP
           | | +-- 12 PRN slots, empty when unused
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)

Some multi-constellation receivers use an extended layout that appends one
more dilution value and a single-digit GNSS system id after the VDOP. The
legacy layout is tried first.
"""

from navparse.nmea.fields import (
    FieldCursor,
    Grammar,
    Token,
    digits,
    float_token,
    one_of,
)
from navparse.nmea.symbols import FixType, SelectionMode, Talker
from navparse.nmea.types import GSAEvent

PRN_SLOTS = 12


def _common_tokens() -> list[Token]:
    return [
        one_of("mode", SelectionMode, is_optional=False),
        digits("fix-type", 1, is_optional=False),
        *(digits(f"prn-{slot}", 2) for slot in range(PRN_SLOTS)),
        float_token("pdop"),
        float_token("hdop"),
        float_token("vdop"),
    ]


GSA = Grammar("GSA", _common_tokens())

GSA_EXTENDED = Grammar(
    "GSA",
    [
        *_common_tokens(),
        float_token("extra-dop"),
        digits("system-id", 1),
    ],
)


def _build_gsa_event(
    cursor: FieldCursor,
    talker: Talker,
    *,
    extended: bool,
) -> GSAEvent:
    mode = cursor.next_symbol(SelectionMode)
    fix_type = cursor.next_indexed(FixType)

    prns: set[int] = set()
    for _ in range(PRN_SLOTS):
        prn = cursor.next_int()
        if prn is not None:
            prns.add(prn)

    pdop = cursor.next_float()
    hdop = cursor.next_float()
    vdop = cursor.next_float()

    system_id = None
    if extended:
        cursor.skip()  # extra dilution value
        system_id = cursor.next_int()

    return GSAEvent(
        talker=talker,
        mode=mode,
        fix_type=fix_type,
        prns=frozenset(prns),
        pdop=pdop,
        hdop=hdop,
        vdop=vdop,
        system_id=system_id,
    )


def decode_gsa(payload: str, talker: Talker) -> GSAEvent | None:
    """Decode the payload of a GSA sentence in either layout.

    Returns:
        GSAEvent, or None if the payload fits neither GSA layout.

    Raises:
        ValueError: If the fix type digit is above 3.
    """
    cursor = GSA.match(payload)
    if cursor is not None:
        return _build_gsa_event(cursor, talker, extended=False)

    cursor = GSA_EXTENDED.match(payload)
    if cursor is not None:
        return _build_gsa_event(cursor, talker, extended=True)

    return None
