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

"""Parametric projection of a point onto a segment's supporting line."""

from .exceptions import ZeroDirectionError
from .predicates import dot
from .vector import EPS


def get_parameter(point, segment, eps=EPS):
    """
    Project a point onto the infinite line through a segment.

    Args:
        point : Vector
            Point to project
        segment : LineSegment
            Any object with `start` and `end` vectors
        eps : float, optional
            Threshold below which dot(D, D) counts as zero

    Returns
    -------
    float
        Parameter t such that start + t * (end - start) is the closest
        point on the line to `point`

    Raises
    ------
    ZeroDirectionError
        If the segment direction has (near) zero length

    """
    line_dir = segment.end - segment.start
    dot_dir = dot(line_dir, line_dir)

    if abs(dot_dir) < eps:
        raise ZeroDirectionError("Cannot project onto a zero-length direction vector")

    return dot(point - segment.start, line_dir) / dot_dir
