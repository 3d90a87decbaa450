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

"""Collapse CSS transform strings into a single matrix.

Usage:
unifiedtransform "translate(15px, 400px) scale(0.3)" "rotate(85deg)"
<matrix(a, b, c, d, tx, ty) dumped to stdout>

unifiedtransform --order=2D "rotate(90)"
unifiedtransform --point=1,0 --point=0,1 "rotate(90)"
<transform strings read from stdin when none are given>
"""
from absl import app
from absl import flags
from absl import logging
from math import isfinite
import sys
from typing import List, Sequence, Tuple
from unifiedtransform.transform import UnifiedTransform
from unifiedtransform.transform_meta import MatrixOrder, ntos


FLAGS = flags.FLAGS


flags.DEFINE_enum(
    "order",
    "string",
    ["string"] + [o.value for o in MatrixOrder],
    "Output a matrix() string or the matrix in the given layout",
)
flags.DEFINE_multi_string(
    "point", [], "Map x,y through the transform instead of printing it"
)


def _parse_point(raw: str) -> Tuple[float, float]:
    try:
        x, y = (float(v) for v in raw.split(","))
    except ValueError:
        raise app.UsageError(f"--point expects x,y; got {raw!r}")
    if not (isfinite(x) and isfinite(y)):
        raise app.UsageError(f"--point expects finite x,y; got {raw!r}")
    return x, y


def _format_row(values: Sequence[float]) -> str:
    return ", ".join(ntos(v) for v in values)


def render(
    transforms: Sequence[str], order: str = "string", points: Sequence[str] = ()
) -> List[str]:
    """Return the output lines for transforms composed left to right."""
    transform = UnifiedTransform()
    for raw_transform in transforms:
        transform.transform(raw_transform)
    logging.debug("Composed %d transform(s) into %s", len(transforms), transform)

    if points:
        return [_format_row(transform.evaluate(*_parse_point(p))) for p in points]
    if order == "string":
        return [transform.tostring()]
    matrix = transform.to_matrix(order)
    if MatrixOrder.coerce(order) is MatrixOrder.TWO_D:
        return [_format_row(row) for row in matrix]
    return [_format_row(matrix)]


def _run(argv):
    transforms = argv[1:]
    if not transforms:
        transforms = [sys.stdin.read()]

    for line in render(transforms, FLAGS.order, FLAGS.point):
        print(line)


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
