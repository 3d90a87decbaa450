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

"""Helpers for https://www.w3.org/TR/css-transforms-1/#transform-functions.

Splits a transform string into its functions and feeds them, in order, to a
UnifiedTransform. Only the 2D functions are recognized; everything else in
the string is skipped.
"""
import re
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, NamedTuple, Tuple

from absl import logging

if TYPE_CHECKING:
    from unifiedtransform.transform import UnifiedTransform


_FUNCTION_RE = re.compile(
    r"(matrix|translate|translateX|translateY|scale|rotate|skewX|skewY)"
    r"\s*\(([^)]+)\)"
)
_ARG_SEPARATOR_RE = re.compile(r"[\s,]+")


_Apply = Callable[["UnifiedTransform", Tuple[str, ...]], "UnifiedTransform"]


# function name => {number of args => call}
# Argument counts not listed for a function make that call a no-op.
_DISPATCH: Mapping[str, Mapping[int, _Apply]] = {
    "matrix": {6: lambda t, args: t.apply_matrix(args)},
    "translate": {
        1: lambda t, args: t.translate(args[0], 0),
        2: lambda t, args: t.translate(args[0], args[1]),
    },
    "translateX": {1: lambda t, args: t.translate(args[0], 0)},
    "translateY": {1: lambda t, args: t.translate(0, args[0])},
    "scale": {
        1: lambda t, args: t.scale(args[0]),
        2: lambda t, args: t.scale(args[0], args[1]),
    },
    "rotate": {
        1: lambda t, args: t.rotate(args[0]),
        3: lambda t, args: t.rotate(args[0], args[1], args[2]),
    },
    "skewX": {1: lambda t, args: t.skew_x(args[0])},
    "skewY": {1: lambda t, args: t.skew_y(args[0])},
}


class Operation(NamedTuple):
    name: str
    args: Tuple[str, ...]


def iter_operations(raw_transform: str) -> Iterator[Operation]:
    if not isinstance(raw_transform, str):
        return
    # two stages: find each function call, then split its args
    for match in _FUNCTION_RE.finditer(raw_transform):
        args = _ARG_SEPARATOR_RE.split(match.group(2).strip())
        yield Operation(match.group(1), tuple(args))


def apply_operation(transform: "UnifiedTransform", op: Operation) -> bool:
    """Compose op onto transform.

    Returns False, leaving transform untouched, if op has an argument count
    its function doesn't accept.
    """
    apply = _DISPATCH.get(op.name, {}).get(len(op.args))
    if apply is None:
        logging.debug("Skipping %s with %d args: %r", op.name, len(op.args), op.args)
        return False
    apply(transform, op.args)
    return True


def apply_transform(
    transform: "UnifiedTransform", raw_transform: str
) -> "UnifiedTransform":
    for op in iter_operations(raw_transform):
        apply_operation(transform, op)
    return transform
