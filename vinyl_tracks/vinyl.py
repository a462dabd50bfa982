"""Vinyl-style track position labels ("A1", "B05", "2B", "7") to track numbers.

Sides are folded into a single sequence with a fixed number of slots per
side: ``A1`` is 1, ``B1`` is 21, ``C1`` is 41. A side holding 20 or more
tracks collides with the next side (``A21`` == ``B1``); the slot count is
kept as is so existing orderings stay stable.
"""

from __future__ import annotations

import re
import string
from typing import Optional, Sequence, Tuple

from .models import LabelForm, TrackLabelParse

SLOTS_PER_SIDE = 20
MAX_TRACK_NUMBER = 2**31 - 1

# Explicit ASCII classes: str.isdigit()/isalpha() accept other scripts.
SIDE_PREFIX_PATTERN = re.compile(r"(?P<side>[A-Z])(?P<num>[0-9]+)")
SIDE_SUFFIX_PATTERN = re.compile(r"(?P<num>[0-9]+)(?P<side>[A-Z])")
NUMERIC_PATTERN = re.compile(r"(?P<num>[0-9]+)")

RULES: Tuple[Tuple[LabelForm, re.Pattern[str]], ...] = (
    (LabelForm.SIDE_PREFIX, SIDE_PREFIX_PATTERN),
    (LabelForm.SIDE_SUFFIX, SIDE_SUFFIX_PATTERN),
    (LabelForm.NUMERIC, NUMERIC_PATTERN),
)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_MAX_DIGITS = len(str(MAX_TRACK_NUMBER))


def parse_track_label(label: object) -> TrackLabelParse:
    """Parse a track position label.

    Accepts ``<letter><digits>``, ``<digits><letter>`` and plain digits, in
    that order of precedence. Anything else, including ``None`` and
    non-string values, comes back unparseable with a ``reason``. Never raises.
    """
    if not isinstance(label, str):
        return TrackLabelParse(label=label, reason="not a string")
    text = label.strip()
    if not text:
        return TrackLabelParse(label=label, reason="empty")
    return _evaluate(label, text.translate(_ASCII_UPPER), RULES)


def vinyl_track_number(label: object) -> Optional[int]:
    return parse_track_label(label).track_number


def side_ordinal(letter: str) -> int:
    return ord(letter.translate(_ASCII_UPPER)) - ord("A")


def _evaluate(
    label: object,
    text: str,
    rules: Sequence[Tuple[LabelForm, re.Pattern[str]]],
) -> TrackLabelParse:
    for form, pattern in rules:
        match = pattern.fullmatch(text)
        if not match:
            continue
        position = _parse_digits(match.group("num"))
        if position is None:
            return TrackLabelParse(label=label, form=form, reason="out of range")
        if form is LabelForm.NUMERIC:
            number = position
        else:
            number = side_ordinal(match.group("side")) * SLOTS_PER_SIDE + position
        if number > MAX_TRACK_NUMBER:
            return TrackLabelParse(label=label, form=form, reason="out of range")
        return TrackLabelParse(label=label, track_number=number, form=form)
    return TrackLabelParse(label=label, reason="unrecognized format")


def _parse_digits(digits: str) -> Optional[int]:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return None
    value = int(significant or "0")
    if value > MAX_TRACK_NUMBER:
        return None
    return value
