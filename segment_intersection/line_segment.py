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

"""LineSegment - Immutable geometry primitive for 3D line segments."""

from .exceptions import DegenerateSegmentError
from .vector import EPS, Vector


class LineSegment:
    """
    Represent a 3D line segment defined by start and end points.

    The segment is validated non-degenerate at construction and never
    changes afterwards.
    """

    __slots__ = ('_start', '_end')

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point, Vector or [x, y, z]
            end: End point, Vector or [x, y, z]

        Raises
        ------
        ValueError
            If points are not 3D
        DegenerateSegmentError
            If start and end coincide within EPS

        """
        start = Vector.from_iterable(start)
        end = Vector.from_iterable(end)

        if (end - start).is_zero(EPS):
            raise DegenerateSegmentError(
                f"Cannot create segment: start {start.tolist()} and end {end.tolist()} coincide"
            )

        object.__setattr__(self, '_start', start)
        object.__setattr__(self, '_end', end)

    def __setattr__(self, name, value):
        raise AttributeError("LineSegment is immutable")

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def direction(self):
        """Direction vector end - start (not normalized)."""
        return self._end - self._start

    def length(self):
        """Calculate segment length."""
        return self.direction.length()

    def midpoint(self):
        """Calculate midpoint of the segment."""
        return (self._start + self._end) / 2.0

    def point_at(self, t):
        """
        Get point along the supporting line at parameter t.

        Args:
            t: Parameter value (0 = start, 1 = end)

        Returns
        -------
        Vector
            Point start + t * direction

        """
        return self._start + self.direction * t

    def reversed(self):
        """Return the same segment traversed from end to start."""
        return LineSegment(self._end, self._start)

    def transformed(self, rotation=None, translation=None):
        """
        Apply a rigid motion to both endpoints.

        Args:
            rotation: scipy.spatial.transform.Rotation applied first (optional)
            translation: Offset [x, y, z] added after rotation (optional)

        Returns
        -------
        LineSegment
            New segment with transformed endpoints

        """
        points = [self._start.to_array(), self._end.to_array()]
        if rotation is not None:
            points = [rotation.apply(p) for p in points]
        if translation is not None:
            offset = Vector.from_iterable(translation).to_array()
            points = [p + offset for p in points]
        return LineSegment(points[0], points[1])

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    __hash__ = None

    def __reduce__(self):
        return (LineSegment, (self._start, self._end))

    def __repr__(self):
        """Return string representation of line segment."""
        return f"LineSegment(start={self._start.tolist()}, end={self._end.tolist()})"
