# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from types import SimpleNamespace

import pytest

from segment_intersection.exceptions import ZeroDirectionError
from segment_intersection.line_segment import LineSegment
from segment_intersection.projection import get_parameter
from segment_intersection.vector import Vector

SEGMENT = LineSegment([0, 0, 0], [4, 0, 0])


@pytest.mark.parametrize("point, expected", [
    (Vector(0, 0, 0), 0.0),
    (Vector(4, 0, 0), 1.0),
    (Vector(2, 5, 0), 0.5),
    (Vector(8, 0, -3), 2.0),
    (Vector(-4, 1, 1), -1.0),
])
def test_parameter_on_line(point, expected):
    assert get_parameter(point, SEGMENT) == pytest.approx(expected)


def test_parameter_of_projected_point_is_closest():
    segment = LineSegment([1, 1, 1], [3, 2, 3])
    point = Vector(0, 5, -2)

    t = get_parameter(point, segment)
    foot = segment.point_at(t)

    assert (point - foot).dot(segment.direction) == pytest.approx(0.0, abs=1e-12)


def test_parameter_depends_on_orientation():
    point = Vector(1, 0, 0)
    assert get_parameter(point, SEGMENT) == pytest.approx(0.25)
    assert get_parameter(point, SEGMENT.reversed()) == pytest.approx(0.75)


def test_zero_direction_rejected():
    synthetic = SimpleNamespace(start=Vector(1, 1, 1), end=Vector(1, 1, 1))

    with pytest.raises(ZeroDirectionError):
        get_parameter(Vector(0, 0, 0), synthetic)


def test_zero_direction_uses_given_tolerance():
    short = LineSegment([0, 0, 0], [1e-4, 0, 0])

    with pytest.raises(ZeroDirectionError):
        get_parameter(Vector(0, 0, 0), short, eps=1e-6)
