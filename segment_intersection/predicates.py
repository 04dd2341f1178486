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

"""Geometric predicates on vectors - pure functions, no state."""

from .vector import EPS


def dot(a, b):
    """Return a.x*b.x + a.y*b.y + a.z*b.z."""
    return a.dot(b)


def cross(a, b):
    """Return the 3D cross product a x b."""
    return a.cross(b)


def collinear(a, b, eps=EPS):
    """
    Check whether two direction vectors are parallel or anti-parallel.

    Args:
        a: First direction vector
        b: Second direction vector
        eps: Length below which the cross product counts as zero

    Returns
    -------
    bool
        True if cross(a, b) is the zero vector within eps

    """
    return cross(a, b).is_zero(eps)


def coplanar(a, b, c, eps=EPS):
    """
    Check whether three vectors lie in one plane.

    Uses the scalar triple product dot(cross(a, b), c), which is the signed
    volume of the parallelepiped spanned by a, b and c.

    Returns
    -------
    bool
        True if |dot(cross(a, b), c)| < eps

    """
    return abs(dot(cross(a, b), c)) < eps
