# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Number and layout conventions shared by the transform engine and parser.

Values reaching the engine may be numbers or raw strings lifted out of a CSS
transform ("15px", "85deg", "0.3"). Nothing here raises: input that does not
parse falls back to a default chosen by the kind of field it feeds.
"""
import enum
from math import isfinite, pi
import numbers
import re
from typing import Optional

from absl import logging


# Leading decimal number, same prefix rules as a CSS <number>; trailing
# text (units, junk) is ignored.
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Checked in order; "grad" must be tried before "rad".
_ANGLE_UNITS = (
    ("grad", pi / 200),
    ("turn", 2 * pi),
    ("rad", 1.0),
    ("deg", pi / 180),
)
_DEG_TO_RAD = pi / 180


class MatrixOrder(str, enum.Enum):
    """Layouts a 2D affine matrix can be read from or written to.

    CSS:  [a, b, c, d, tx, ty], the argument order of CSS matrix()
    2D:   [[a, c, tx], [b, d, ty], [0, 0, 1]]
    flat: [a, c, tx, b, d, ty, 0, 0, 1], the 2D rows concatenated
    """

    CSS = "CSS"
    TWO_D = "2D"
    FLAT = "flat"

    @classmethod
    def coerce(cls, order) -> "MatrixOrder":
        try:
            return cls(order)
        except ValueError:
            logging.debug("Unrecognized matrix order %r, using flat", order)
            return cls.FLAT


def parse_number(value) -> Optional[float]:
    """Return value as a finite float, or None if it isn't one.

    Strings are read up to the end of their leading number, so "12.5px"
    gives 12.5 and "px12" gives None. Other numbers (Fraction, Decimal,
    numpy scalars) go through float(); ints too large for a float are None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Number):
        try:
            value = float(value)
        except (OverflowError, TypeError, ValueError):
            return None
        return value if isfinite(value) else None
    if not isinstance(value, str):
        return None
    match = _NUMBER_RE.match(value)
    if match is None:
        return None
    number = float(match.group(1))
    return number if isfinite(number) else None


def _number_or(value, default: float) -> float:
    number = parse_number(value)
    return default if number is None else number


def coerce_offset(value) -> float:
    """Coerce an additive field (translation, matrix entry); defaults to 0."""
    if isinstance(value, str):
        value = value.strip()
        if value.endswith("px"):
            value = value[:-2]
    return _number_or(value, 0.0)


def coerce_factor(value) -> float:
    """Coerce a multiplicative field (scale factor); defaults to 1."""
    return _number_or(value, 1.0)


def coerce_angle(value) -> float:
    """Return an angle in radians.

    Bare numbers are degrees. Strings may end in deg, rad, grad or turn;
    a string without a known unit is degrees. Unparsable angles are 0.
    """
    if isinstance(value, str):
        text = value.strip()
        for unit, to_radians in _ANGLE_UNITS:
            if text.endswith(unit):
                return _number_or(text[: -len(unit)], 0.0) * to_radians
        return _number_or(text, 0.0) * _DEG_TO_RAD
    return _number_or(value, 0.0) * _DEG_TO_RAD


def ntos(n: float) -> str:
    # strip superflous .0 decimals; from 1e21 up str() already uses an exponent
    if isinstance(n, float) and n.is_integer() and abs(n) < 1e21:
        return str(int(n))
    return str(n)
