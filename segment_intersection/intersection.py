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

"""Segment/segment intersection classifier - handles every configuration of two 3D segments."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .collinear import CollinearRelation, classify_collinear
from .predicates import collinear, coplanar, cross, dot
from .vector import EPS, Vector

logger = logging.getLogger(__name__)


class IntersectionType(enum.Enum):
    """Classification of a pair of segments."""

    INTERSECTION = 0
    NONCOPLANAR = 1
    PARALLEL = 2
    COLLINEARNOOVERLAP = 3
    OVERLAPPING = 4
    NOINTERSECTION = 5


_COLLINEAR_TO_TYPE = {
    CollinearRelation.PARALLEL: IntersectionType.PARALLEL,
    CollinearRelation.ON_ONE_LINE: IntersectionType.COLLINEARNOOVERLAP,
    CollinearRelation.OVERLAP: IntersectionType.OVERLAPPING,
    CollinearRelation.TOUCH: IntersectionType.INTERSECTION,
}


@dataclass(frozen=True)
class IntersectionResult:
    """
    Tagged result of intersect().

    Attributes:
        type: One of the six IntersectionType variants
        point: The single shared point, present only for INTERSECTION
    """

    type: IntersectionType
    point: Optional[Vector] = None

    def __post_init__(self):
        if (self.type is IntersectionType.INTERSECTION) != (self.point is not None):
            raise ValueError(f"A point must be given exactly for INTERSECTION, got {self.type.name}")

    @property
    def is_intersection(self):
        return self.type is IntersectionType.INTERSECTION

    def to_dict(self):
        """Convert result to a JSON-friendly dictionary."""
        return {
            'type': self.type.name,
            'point': self.point.tolist() if self.point is not None else None,
        }


def _snap_to_bounds(t, eps):
    if abs(t) < eps:
        return 0.0
    if abs(t - 1.0) < eps:
        return 1.0
    return t


def intersect(segment1, segment2, eps=EPS):
    """
    Classify two segments and find their single common point if any.

    Args:
        segment1 : LineSegment
            First segment
        segment2 : LineSegment
            Second segment
        eps : float, optional
            Tolerance used by every comparison (default 1e-12)

    Returns
    -------
    IntersectionResult
        Classification tag and, for INTERSECTION, the point

    """
    v1 = segment1.direction
    v2 = segment2.direction
    connection = segment2.start - segment1.start

    if not coplanar(v1, v2, connection, eps):
        logger.debug("Segments are not coplanar")
        return IntersectionResult(IntersectionType.NONCOPLANAR)

    if collinear(v1, v2, eps):
        relation, point = classify_collinear(segment1, segment2, eps)
        logger.debug("Parallel directions, collinear relation: %s", relation.name)
        return IntersectionResult(_COLLINEAR_TO_TYPE[relation], point)

    # Crossing v1 and v2 into S1.start + t1*v1 = S2.start + t2*v2 eliminates
    # one unknown each: t1 (v1 x v2) = c x v2 and t2 (v1 x v2) = c x v1.
    normal = cross(v1, v2)
    normal_sq = dot(normal, normal)
    t1 = dot(cross(connection, v2), normal) / normal_sq
    t2 = dot(cross(connection, v1), normal) / normal_sq

    t1 = _snap_to_bounds(t1, eps)
    t2 = _snap_to_bounds(t2, eps)

    logger.debug("Line parameters t1=%.17g, t2=%.17g", t1, t2)

    if 0.0 <= t1 <= 1.0 and 0.0 <= t2 <= 1.0:
        return IntersectionResult(IntersectionType.INTERSECTION, segment1.start + v1 * t1)

    return IntersectionResult(IntersectionType.NOINTERSECTION)
