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

"""Collapse a sequence of 2D affine operations into a single matrix.

Operations compose the way successive functions in a CSS transform do: each
new one acts in the coordinate space produced by those before it, so the
accumulated matrix A becomes A x B for each new elementary matrix B.
"""
from math import cos, sin, tan
from typing import List, NamedTuple, Tuple, Union
from unifiedtransform.geometric_types import (
    Point,
    DEFAULT_ALMOST_EQUAL_TOLERANCE,
    almost_equal,
)
from unifiedtransform.transform_meta import (
    MatrixOrder,
    coerce_angle,
    coerce_factor,
    coerce_offset,
    ntos,
)
from unifiedtransform.transform_parser import apply_transform


ROTATION_TOLERANCE = 1e-8


# 2D affine transform.
#
# View as vector of 6 values or matrix:
#
# a   c   tx
# b   d   ty
class Affine2D(NamedTuple):
    a: float
    b: float
    c: float
    d: float
    tx: float
    ty: float

    @staticmethod
    def identity():
        return Affine2D._identity

    @staticmethod
    def product(first: "Affine2D", second: "Affine2D") -> "Affine2D":
        """Returns the product of first x second.

        Order matters; meant to make that a bit more explicit.
        """
        return Affine2D(
            first.a * second.a + first.b * second.c,
            first.a * second.b + first.b * second.d,
            first.c * second.a + first.d * second.c,
            first.c * second.b + first.d * second.d,
            second.a * first.tx + second.c * first.ty + second.tx,
            second.b * first.tx + second.d * first.ty + second.ty,
        )

    def map_point(self, pt: Tuple[float, float]) -> Point:
        """Return Point (x, y) multiplied by Affine2D."""
        x, y = pt
        return Point(
            self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty
        )

    def round(self, digits: int) -> "Affine2D":
        return Affine2D(*(round(v, digits) for v in self))

    def almost_equals(
        self, other: "Affine2D", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ):
        return all(almost_equal(v1, v2, tolerance) for v1, v2 in zip(self, other))


Affine2D._identity = Affine2D(1, 0, 0, 1, 0, 0)


def is_rotation_matrix(affine: Affine2D, tolerance=ROTATION_TOLERANCE) -> bool:
    """True if affine is a pure rotation: det 1, R^T R = I and no translation."""
    a, b, c, d, x, y = affine
    return all(
        abs(v) <= tolerance
        for v in (
            a * x + b * y,
            a * d - b * c - 1,
            x * x + y * y,
            a * a + b * b - 1,
            a * c + b * d,
            c * c + d * d - 1,
            c * x + d * y,
        )
    )


def _item(values, index):
    try:
        return values[index]
    except (IndexError, KeyError, TypeError):
        return None


def _read_matrix(values, order: MatrixOrder) -> Tuple:
    """Pull the raw (a, b, c, d, tx, ty) entries out of values laid out as order.

    Entries that aren't there come back as None.
    """
    if order is MatrixOrder.CSS:
        return tuple(_item(values, i) for i in range(6))
    if order is MatrixOrder.TWO_D:
        row0, row1 = _item(values, 0), _item(values, 1)
        return (
            _item(row0, 0),
            _item(row1, 0),
            _item(row0, 1),
            _item(row1, 1),
            _item(row0, 2),
            _item(row1, 2),
        )
    a, c, tx, b, d, ty = (_item(values, i) for i in range(6))
    return (a, b, c, d, tx, ty)


class UnifiedTransform:
    """Accumulates translate, scale, rotate, skew and matrix operations.

    The current state lives in `matrix` and is replaced, never mutated, by
    each operation; a reference taken earlier keeps describing the earlier
    state. Every operation returns the transform so calls can be chained:

        UnifiedTransform().translate("15px", "400px").scale(0.3).rotate("85deg")

    Nothing here raises on bad input. Unparsable arguments fall back to 0
    for offsets and angles and to 1 for scale factors.
    """

    def __init__(self):
        self.matrix = Affine2D.identity()

    def __repr__(self):
        return f"{type(self).__name__}({self.tostring()})"

    @classmethod
    def fromstring(cls, raw_transform: str) -> "UnifiedTransform":
        return cls().transform(raw_transform)

    def apply_matrix(
        self, values, order: Union[MatrixOrder, str] = MatrixOrder.CSS
    ) -> "UnifiedTransform":
        """Compose the matrix given by values, laid out as order, onto self."""
        entries = _read_matrix(values, MatrixOrder.coerce(order))
        affine = Affine2D(*(coerce_offset(v) for v in entries))
        self.matrix = Affine2D.product(affine, self.matrix)
        return self

    # https://www.w3.org/TR/css-transforms-1/#funcdef-transform-translate
    def translate(self, tx, ty=0) -> "UnifiedTransform":
        return self.apply_matrix((1, 0, 0, 1, coerce_offset(tx), coerce_offset(ty)))

    # https://www.w3.org/TR/css-transforms-1/#funcdef-transform-scale
    def scale(self, sx, sy=None) -> "UnifiedTransform":
        if sy is None:
            sy = sx
        return self.apply_matrix((coerce_factor(sx), 0, 0, coerce_factor(sy), 0, 0))

    # https://www.w3.org/TR/css-transforms-1/#funcdef-transform-rotate
    # Bare numbers are degrees; strings may carry deg, rad, grad or turn.
    # Given a centre, rotation is about that point instead of the origin.
    def rotate(self, angle, x=None, y=None) -> "UnifiedTransform":
        angle = coerce_angle(angle)
        rotation = (cos(angle), sin(angle), -sin(angle), cos(angle), 0, 0)
        if x is None:
            return self.apply_matrix(rotation)
        cx, cy = coerce_offset(x), coerce_offset(y)
        return self.translate(cx, cy).apply_matrix(rotation).translate(-cx, -cy)

    # https://www.w3.org/TR/css-transforms-1/#funcdef-transform-skewx
    def skew_x(self, angle) -> "UnifiedTransform":
        return self.apply_matrix((1, 0, tan(coerce_angle(angle)), 1, 0, 0))

    # https://www.w3.org/TR/css-transforms-1/#funcdef-transform-skewy
    def skew_y(self, angle) -> "UnifiedTransform":
        return self.apply_matrix((1, tan(coerce_angle(angle)), 0, 1, 0, 0))

    def transform(self, raw_transform: str) -> "UnifiedTransform":
        """Apply each function of a CSS transform string, left to right."""
        return apply_transform(self, raw_transform)

    def evaluate(self, x, y) -> Point:
        """Return the point (x, y) mapped through the current matrix."""
        return self.matrix.map_point((coerce_offset(x), coerce_offset(y)))

    def to_matrix(
        self, order: Union[MatrixOrder, str] = MatrixOrder.FLAT
    ) -> Union[List[float], List[List[float]]]:
        a, b, c, d, tx, ty = self.matrix
        order = MatrixOrder.coerce(order)
        if order is MatrixOrder.CSS:
            return [a, b, c, d, tx, ty]
        if order is MatrixOrder.TWO_D:
            return [[a, c, tx], [b, d, ty], [0, 0, 1]]
        return [a, c, tx, b, d, ty, 0, 0, 1]

    def tostring(self) -> str:
        # Always matrix(); a pure rotation could be written as rotate() but
        # recovering the angle from acos(a) loses its sign.
        return f'matrix({", ".join(ntos(v) for v in self.matrix)})'
