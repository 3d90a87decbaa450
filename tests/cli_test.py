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

from absl import app
import pytest
from unifiedtransform.cli import render


@pytest.mark.parametrize(
    "transforms, order, expected",
    [
        ([], "string", ["matrix(1, 0, 0, 1, 0, 0)"]),
        (["translate(10px) scale(2)"], "string", ["matrix(2, 0, 0, 2, 10, 0)"]),
        (["translate(10px)", "scale(2)"], "string", ["matrix(2, 0, 0, 2, 10, 0)"]),
        (["translate(10px) scale(2)"], "CSS", ["2, 0, 0, 2, 10, 0"]),
        (["translate(10px) scale(2)"], "flat", ["2, 0, 10, 0, 2, 0, 0, 0, 1"]),
        (
            ["translate(10px) scale(2)"],
            "2D",
            ["2, 0, 10", "0, 2, 0", "0, 0, 1"],
        ),
    ],
)
def test_render(transforms, order, expected):
    assert render(transforms, order) == expected


def test_render_points():
    assert render(["translate(10px, 0)", "scale(2)"], points=["1,0", "0, -1"]) == [
        "12, 0",
        "10, -2",
    ]


@pytest.mark.parametrize(
    "point", ["1", "1,2,3", "a,b", "", "nan,1", "1,inf", "-inf,-inf"]
)
def test_render_bad_point(point):
    with pytest.raises(app.UsageError):
        render(["scale(2)"], points=[point])


def test_render_unknown_order_is_flat():
    assert render(["translate(10px) scale(2)"], "rows") == [
        "2, 0, 10, 0, 2, 0, 0, 0, 1"
    ]
