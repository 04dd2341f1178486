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

"""Errors raised for invalid geometric input."""


class GeometryError(Exception):
    """Base class for all errors raised by segment_intersection."""


class DegenerateSegmentError(GeometryError, ValueError):
    """Segment start and end coincide (zero-length segment)."""


class ZeroDirectionError(GeometryError, ValueError):
    """Projection onto a line with a zero-length direction vector."""


class JobFileError(GeometryError, ValueError):
    """Job file is structurally invalid."""
