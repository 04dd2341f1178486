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

import copy
import math
import pickle

import numpy as np
import pytest

from segment_intersection.vector import EPS, Vector


def test_default_tolerance():
    assert EPS == 1e-12


def test_arithmetic():
    a = Vector(1, 2, 3)
    b = Vector(4, 5, 6)

    assert (a + b).tolist() == [5.0, 7.0, 9.0]
    assert (b - a).tolist() == [3.0, 3.0, 3.0]
    assert (-a).tolist() == [-1.0, -2.0, -3.0]
    assert (a * 2).tolist() == [2.0, 4.0, 6.0]
    assert (2 * a).tolist() == [2.0, 4.0, 6.0]
    assert (b / 2).tolist() == [2.0, 2.5, 3.0]


def test_scalar_from_numpy():
    assert (Vector(1, 1, 1) * np.float64(0.5)).tolist() == [0.5, 0.5, 0.5]


def test_multiply_by_vector_is_unsupported():
    with pytest.raises(TypeError):
        Vector(1, 0, 0) * Vector(0, 1, 0)


def test_division_by_zero_follows_float_semantics():
    result = Vector(1, 0, -1) / 0.0

    assert math.isinf(result.x) and result.x > 0
    assert math.isnan(result.y)
    assert math.isinf(result.z) and result.z < 0


def test_dot_cross_length():
    assert Vector(1, 2, 3).dot(Vector(4, -5, 6)) == 12.0
    assert Vector(1, 0, 0).cross(Vector(0, 1, 0)).tolist() == [0.0, 0.0, 1.0]
    assert Vector(0, 1, 0).cross(Vector(1, 0, 0)).tolist() == [0.0, 0.0, -1.0]
    assert Vector(3, 4, 0).length() == 5.0


def test_is_zero():
    assert Vector(0, 0, 0).is_zero()
    assert Vector(1e-13, 0, 0).is_zero()
    assert not Vector(1e-11, 0, 0).is_zero()
    assert Vector(1e-7, 0, 0).is_zero(eps=1e-6)


def test_tolerant_equality():
    assert Vector(1, 2, 3) == Vector(1 + 1e-13, 2 - 1e-13, 3)
    assert Vector(1, 2, 3) != Vector(1 + 1e-11, 2, 3)
    assert Vector(1, 2, 3).is_close(Vector(1.001, 2, 3), eps=0.01)
    assert not Vector(1, 2, 3).is_close(Vector(1.1, 2, 3), eps=0.01)


def test_equality_with_other_types():
    assert Vector(1, 2, 3) != (1, 2, 3)
    assert not Vector(1, 2, 3) == [1, 2, 3]


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Vector(1, 2, 3))


@pytest.mark.parametrize("index, expected", [(0, 1.0), (1, 2.0), (2, 3.0)])
def test_index_access(index, expected):
    assert Vector(1, 2, 3)[index] == expected


@pytest.mark.parametrize("index", [-1, 3, 10, 1.0, True, 'x'])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vector(1, 2, 3)[index]


def test_components_and_iteration():
    v = Vector(1, 2, 3)

    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert len(v) == 3


def test_immutable():
    v = Vector(1, 2, 3)

    with pytest.raises(AttributeError):
        v.x = 5
    with pytest.raises(AttributeError):
        v._data = np.zeros(3)

    arr = v.to_array()
    arr[0] = 100.0
    assert v.x == 1.0


@pytest.mark.parametrize("components", [
    (math.nan, 0, 0),
    (0, math.inf, 0),
    (0, 0, -math.inf),
])
def test_rejects_non_finite(components):
    with pytest.raises(ValueError):
        Vector(*components)


def test_from_iterable():
    assert Vector.from_iterable([1, 2, 3]) == Vector(1, 2, 3)
    assert Vector.from_iterable(np.array([1.0, 2.0, 3.0])) == Vector(1, 2, 3)

    v = Vector(1, 2, 3)
    assert Vector.from_iterable(v) is v

    with pytest.raises(ValueError):
        Vector.from_iterable([1, 2])
    with pytest.raises(ValueError):
        Vector.from_iterable([[1, 2, 3]])


def test_copy_and_pickle():
    v = Vector(1.5, -2.0, 3.25)

    assert copy.deepcopy(v) == v
    assert pickle.loads(pickle.dumps(v)) == v


def test_copy_and_pickle_keep_non_finite_components():
    v = Vector(1, 0, -1) / 0.0

    for clone in (copy.deepcopy(v), pickle.loads(pickle.dumps(v))):
        assert clone.x == math.inf
        assert math.isnan(clone.y)
        assert clone.z == -math.inf


def test_repr():
    assert repr(Vector(1, 2, 3)) == "Vector(1.0, 2.0, 3.0)"
