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

"""Overlap classification for segments with parallel directions."""

import enum
import logging
from typing import NamedTuple, Optional

from .predicates import cross
from .projection import get_parameter
from .vector import EPS, Vector

logger = logging.getLogger(__name__)


class CollinearRelation(enum.Enum):
    """How two segments with parallel directions relate to each other."""

    PARALLEL = 'parallel'
    ON_ONE_LINE = 'on_one_line'
    TOUCH = 'touch'
    OVERLAP = 'overlap'


class CollinearOverlap(NamedTuple):
    relation: CollinearRelation
    point: Optional[Vector] = None


def classify_collinear(segment1, segment2, eps=EPS):
    """
    Classify two segments whose direction vectors are already parallel.

    The shorter segment is projected onto the parametric line of the longer
    one and the resulting parameter interval is clipped against [0, 1], so
    the result does not depend on argument order.

    Args:
        segment1 : LineSegment
            First segment
        segment2 : LineSegment
            Segment parallel to segment1
        eps : float, optional
            Tolerance for the shared-line test and the overlap length

    Returns
    -------
    CollinearOverlap
        Relation and, for TOUCH only, the touching point

    """
    base, other = _order_by_length(segment1, segment2)

    v1 = base.direction
    v3 = base.start - other.start

    if not cross(v1, v3).is_zero(eps):
        logger.debug("Parallel directions on distinct lines")
        return CollinearOverlap(CollinearRelation.PARALLEL)

    # Valid segments are at least EPS long, so dot(D, D) >= EPS**2.
    guard = min(eps, EPS) ** 2
    t_start = get_parameter(other.start, base, guard)
    t_end = get_parameter(other.end, base, guard)

    t_min = min(t_start, t_end)
    t_max = max(t_start, t_end)

    overlay_start = max(0.0, t_min)
    overlay_end = min(1.0, t_max)
    overlay_length = overlay_end - overlay_start

    logger.debug(
        "Shared line: overlay [%.17g, %.17g], length %.3g",
        overlay_start, overlay_end, overlay_length,
    )

    if overlay_length > eps:
        return CollinearOverlap(CollinearRelation.OVERLAP)

    if abs(overlay_length) < eps:
        t = min(1.0, max(0.0, (overlay_start + overlay_end) / 2.0))
        return CollinearOverlap(CollinearRelation.TOUCH, _touch_point(base, other, t, eps))

    return CollinearOverlap(CollinearRelation.ON_ONE_LINE)


def _order_by_length(segment1, segment2):
    """Return (longer, shorter); ties are broken by coordinates, never by argument order."""
    def key(segment):
        return (segment.length(), segment.start.tolist(), segment.end.tolist())

    if key(segment2) > key(segment1):
        return segment2, segment1
    return segment1, segment2


def _touch_point(base, other, t, eps):
    """Prefer an endpoint shared by both segments, else the point at t on base."""
    for endpoint in (base.end, base.start):
        if endpoint.is_close(other.start, eps) or endpoint.is_close(other.end, eps):
            return endpoint
    return base.point_at(t)
