"""Fixed-length numeric vector."""

import numpy as np

from .errors import check_length


class NumericVector:
    """
    Ordered, fixed-length sequence of real numbers.

    Construction always copies its source, so two vectors never share storage.
    Elements can be read and written by index but the length never changes.
    """

    def __init__(self, data=()):
        """
        Args:
            data: Iterable of numbers, numpy array, or another NumericVector
        """
        if isinstance(data, (str, bytes)):
            raise ValueError(f"NumericVector requires numbers, got {type(data).__name__}")
        if isinstance(data, NumericVector):
            data = data._data
        elif not isinstance(data, np.ndarray):
            data = list(data)

        values = np.array(data, dtype=np.float64)
        if values.ndim != 1:
            raise ValueError(f"NumericVector requires 1-D data, got shape {values.shape}")

        self._data = values

    @classmethod
    def zeros(cls, length):
        """Create a zero-filled vector of the given length."""
        if length < 0:
            raise ValueError(f"Vector length must be non-negative, got {length}")
        return cls(np.zeros(length, dtype=np.float64))

    def length(self):
        return self._data.shape[0]

    def __len__(self):
        return self.length()

    def element(self, i):
        return float(self._data[i])

    def __getitem__(self, i):
        if isinstance(i, slice):
            return NumericVector(self._data[i])
        return self.element(i)

    def __setitem__(self, i, value):
        self._data[i] = value

    def __iter__(self):
        return (float(x) for x in self._data)

    def add(self, other):
        """Elementwise sum. Both vectors must have the same length."""
        other = _as_array(other)
        check_length('add', self.length(), len(other))
        return NumericVector(self._data + other)

    def __add__(self, other):
        return self.add(other)

    def dot(self, other):
        """Sum of elementwise products. Both vectors must have the same length."""
        other = _as_array(other)
        check_length('dot', self.length(), len(other))
        return float(np.dot(self._data, other))

    def __matmul__(self, other):
        return self.dot(other)

    def display(self):
        """Render as '(v0, v1, ..., vn-1)'."""
        return '(' + ', '.join(f"{x:g}" for x in self._data) + ')'

    def __str__(self):
        return self.display()

    def __repr__(self):
        return f"NumericVector({self.tolist()})"

    def __eq__(self, other):
        if not isinstance(other, NumericVector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable, so unhashable
    __hash__ = None

    def copy(self):
        return NumericVector(self)

    def tolist(self):
        return self._data.tolist()

    def to_numpy(self):
        return self._data.copy()


def _as_array(other):
    if isinstance(other, NumericVector):
        return other._data
    # Same 1-D checks as construction
    return NumericVector(other)._data
