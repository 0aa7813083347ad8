"""GSV sentence grammar and decoder.

GSV (Satellites in View) lists up to four satellites per sentence; a receiver
sends a group of sentences to cover every satellite in view.

GSV Sentence Format:
    |  Field  | Meaning
    |---------|------------------------------------------------------------
    |       1 | Total number of sentences of this type in this cycle
    |       2 | Sentence number (1-based)
    |       3 | Total number of satellites in view
    |       4 | Satellite PRN number                                    (*)
    |       5 | Elevation, in degrees, 90 maximum                       (*)
    |       6 | Azimuth, degrees from true north, 000 through 359       (*)
    |       7 | SNR, 00 through 99 dB (empty when not tracking)         (*)
    |    8-11 | Second satellite, same format as fields 4 through 7
    |   12-15 | Third satellite, same format as fields 4 through 7
    |   16-19 | Fourth satellite, same format as fields 4 through 7
    (*) = one satellite

Example group:
          main    |     sv #1   |       sv #2     |      sv #3      |    sv #4
    $GPGSV,3,1,11,| 29,83,295,, | 25,66,112,15.9, | 28,52,266,14.1, | 31,35,305,,1*69
    $GPGSV,3,3,11,| 18,18,191,, | 26,18,299,,     | 05,13,105,,1*51

The last sentence of a group carries fewer than four satellites, and NMEA 4.1
receivers append a signal id, so GSV payloads are scanned: fields that do not
fit the layout end the match instead of rejecting the sentence.
"""

from navparse.nmea.fields import (
    FieldCursor,
    Grammar,
    Token,
    digits,
    float_token,
    int_token,
)
from navparse.nmea.symbols import Talker
from navparse.nmea.types import GSVEvent

SATELLITES_PER_SENTENCE = 4


def _satellite_tokens(offset: int) -> list[Token]:
    return [
        digits(f"prn-{offset}", 2),
        digits(f"elevation-{offset}", 2),
        digits(f"azimuth-{offset}", 3),
        float_token(f"snr-{offset}"),
    ]


GSV = Grammar(
    "GSV",
    [
        int_token("sentences", is_optional=False),
        int_token("sentence-index", is_optional=False),
        digits("satellites-in-view", 2, is_optional=False),
        *(
            token
            for offset in range(SATELLITES_PER_SENTENCE)
            for token in _satellite_tokens(offset)
        ),
    ],
)


def satellite_index(sentence_index: int, offset: int) -> int:
    """Zero-based slot of a satellite within its sentence group.

    Example:
        >>> satellite_index(3, 1)  # second satellite of the third sentence
        9
    """
    return (sentence_index - 1) * SATELLITES_PER_SENTENCE + offset


def _build_gsv_events(cursor: FieldCursor, talker: Talker) -> list[GSVEvent]:
    cursor.skip()  # number of sentences
    sentence_index = cursor.next_int()
    satellites_in_view = cursor.next_int()

    events = []
    for offset in range(SATELLITES_PER_SENTENCE):
        prn = cursor.next_int()
        elevation = cursor.next_float()
        azimuth = cursor.next_float()
        snr = cursor.next_float(default=0.0)
        if prn is None:
            continue
        events.append(
            GSVEvent(
                talker=talker,
                satellites_in_view=satellites_in_view,
                index=(
                    satellite_index(sentence_index, offset)
                    if sentence_index is not None
                    else None
                ),
                prn=prn,
                elevation=elevation,
                azimuth=azimuth,
                snr=snr,
            )
        )
    return events


def decode_gsv(payload: str, talker: Talker) -> list[GSVEvent] | None:
    """Decode the payload of a GSV sentence into one event per satellite.

    Returns:
        The satellites present in the line, or None if the leading sentence
        count, sentence index and satellites-in-view fields do not fit the
        GSV grammar or no satellite could be decoded.
    """
    cursor = GSV.scan(payload)
    if cursor is None:
        return None
    return _build_gsv_events(cursor, talker) or None
