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

"""Classification of intersections between 3D line segments."""

from .collinear import CollinearOverlap, CollinearRelation, classify_collinear
from .exceptions import DegenerateSegmentError, GeometryError, JobFileError, ZeroDirectionError
from .intersection import IntersectionResult, IntersectionType, intersect
from .line_segment import LineSegment
from .predicates import collinear, coplanar, cross, dot
from .projection import get_parameter
from .vector import EPS, Vector

__version__ = '0.1.0'

__all__ = [
    'EPS',
    'CollinearOverlap',
    'CollinearRelation',
    'DegenerateSegmentError',
    'GeometryError',
    'IntersectionResult',
    'IntersectionType',
    'JobFileError',
    'LineSegment',
    'Vector',
    'ZeroDirectionError',
    'classify_collinear',
    'collinear',
    'coplanar',
    'cross',
    'dot',
    'get_parameter',
    'intersect',
]
