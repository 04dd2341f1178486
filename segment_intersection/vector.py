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

"""Vector - Immutable 3D point/direction with tolerance-based equality."""

import numbers

import numpy as np

EPS = 1e-12


class Vector:
    """
    Represent a point or direction in 3D space.

    Components are stored in a read-only float64 array. Instances are never
    mutated; every operation returns a new Vector.
    """

    __slots__ = ('_data',)

    def __init__(self, x, y, z):
        """
        Initialize vector from three components.

        Args:
            x: X component
            y: Y component
            z: Z component

        Raises
        ------
        ValueError
            If any component is not finite

        """
        data = np.array([x, y, z], dtype=float)
        if not np.all(np.isfinite(data)):
            raise ValueError(f"Vector components must be finite, got {data.tolist()}")
        data.flags.writeable = False
        object.__setattr__(self, '_data', data)

    @classmethod
    def from_iterable(cls, values):
        """
        Build a vector from any 3-element sequence (list, tuple, np.ndarray).

        Raises
        ------
        ValueError
            If values does not hold exactly three components

        """
        if isinstance(values, cls):
            return values
        data = np.asarray(values, dtype=float)
        if data.shape != (3,):
            raise ValueError(f"Vector needs exactly 3 components [x, y, z], got shape {data.shape}")
        return cls(*data)

    @classmethod
    def _from_array(cls, data):
        # Arithmetic results skip the finiteness check so that division by
        # zero keeps IEEE semantics instead of raising.
        vec = cls.__new__(cls)
        data = np.array(data, dtype=float)
        data.flags.writeable = False
        object.__setattr__(vec, '_data', data)
        return vec

    def __setattr__(self, name, value):
        raise AttributeError("Vector is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector is immutable")

    @property
    def x(self):
        return float(self._data[0])

    @property
    def y(self):
        return float(self._data[1])

    @property
    def z(self):
        return float(self._data[2])

    def __getitem__(self, index):
        """Return component 0, 1 or 2; any other index raises IndexError."""
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)) or not 0 <= index <= 2:
            raise IndexError(f"Vector index out of range: {index!r}")
        return float(self._data[index])

    def __len__(self):
        return 3

    def __iter__(self):
        return iter(self.tolist())

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._from_array(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._from_array(self._data - other._data)

    def __neg__(self):
        return Vector._from_array(-self._data)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector._from_array(self._data * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector._from_array(self._data / float(scalar))

    def dot(self, other):
        """Calculate dot product with another vector."""
        return float(np.dot(self._data, other._data))

    def cross(self, other):
        """Calculate cross product with another vector."""
        return Vector._from_array(np.cross(self._data, other._data))

    def length(self):
        """Calculate Euclidean length."""
        return float(np.linalg.norm(self._data))

    def is_zero(self, eps=EPS):
        """Check whether the vector length is below eps."""
        return self.length() < eps

    def is_close(self, other, eps=EPS):
        """
        Compare component-wise within a tolerance.

        Args:
            other: Vector to compare against
            eps: Maximum (exclusive) difference allowed per component

        Returns
        -------
        bool
            True if every component differs by less than eps

        """
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_close(other)

    # Tolerant equality is not transitive, so vectors cannot be hashed.
    __hash__ = None

    def to_array(self):
        """Return a writable copy of the components as np.ndarray."""
        return self._data.copy()

    def tolist(self):
        return self._data.tolist()

    def __reduce__(self):
        return (_rebuild, (self.tolist(),))

    def __repr__(self):
        """Return string representation of vector."""
        return f"Vector({self.x!r}, {self.y!r}, {self.z!r})"


def _rebuild(components):
    # Unpickling must accept the non-finite results of division by zero.
    return Vector._from_array(components)
