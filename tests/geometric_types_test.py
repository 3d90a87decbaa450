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

from unifiedtransform.geometric_types import Point, almost_equal


def test_almost_equal():
    assert almost_equal(1, 1 + 1e-10)
    assert not almost_equal(1, 1 + 1e-8)
    assert almost_equal(1, 1.05, tolerance=0.1)


class TestPoint:
    def test_defaults(self):
        assert Point() == Point(0, 0)

    def test_round(self):
        assert Point(1.2345, -6.789).round(2) == Point(1.23, -6.79)

    def test_almost_equals(self):
        assert Point(5, 5).almost_equals(Point(5 + 1e-12, 5 - 1e-12))
        assert not Point(5, 5).almost_equals(Point(5, 5.001))
        assert Point(5, 5).almost_equals(Point(5, 5.001), tolerance=0.01)
