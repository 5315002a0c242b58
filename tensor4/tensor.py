# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Dense rank-4 tensor with elementwise arithmetic and NumPy compatibility.
"""

from __future__ import annotations

import importlib
import logging
import operator
from collections.abc import Sequence
from functools import reduce as _fold
from numbers import Integral, Real
from threading import RLock
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Optional, Tuple, Union

from .base import TensorBase, generate as _generate
from .exceptions import (
    DivisionByZeroError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    UnsupportedOperandTypeError,
)
from .number import Number
from .operand import Scalar, TensorOperand, WrappedScalar, classify, is_real_scalar

logger = logging.getLogger(__name__)

np: Any | None = None
_HAS_NUMPY = False
_TENSOR_TO_NP_DTYPE: Dict[str, Any] = {}
_NUMPY_ARRAY: Tuple[type, ...] = ()


def _initialize_numpy_bindings(np_module: Any) -> None:
    """Populate cached NumPy metadata after importing the module."""

    global np, _HAS_NUMPY, _TENSOR_TO_NP_DTYPE, _NUMPY_ARRAY

    np = np_module
    _HAS_NUMPY = True
    _TENSOR_TO_NP_DTYPE = {
        "float32": np_module.dtype(np_module.float32),
        "float64": np_module.dtype(np_module.float64),
        "int32": np_module.dtype(np_module.int32),
        "int64": np_module.dtype(np_module.int64),
    }
    _NUMPY_ARRAY = (np_module.ndarray,)


def _attempt_enable_numpy() -> bool:
    """Import NumPy lazily and cache metadata if it becomes available."""

    if _HAS_NUMPY:
        return True

    try:
        np_module = importlib.import_module("numpy")
    except ModuleNotFoundError:
        return False

    _initialize_numpy_bindings(np_module)
    return True


def _ensure_numpy_available(message: str) -> None:
    """Ensure NumPy is importable, raising ``ModuleNotFoundError`` otherwise."""

    if _attempt_enable_numpy():
        return
    raise ModuleNotFoundError(message)


_attempt_enable_numpy()

# Supported dtype names irrespective of NumPy availability
_SUPPORTED_DTYPES = {"float32", "float64", "int32", "int64"}

_DEFAULT_DTYPE = "float64"
_DTYPE_LOCK = RLock()


def _validate_dtype(dtype: str) -> str:
    if dtype not in _SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported dtype '{dtype}'")
    return dtype


# Global default dtype management


def set_default_dtype(dtype: str) -> None:
    """Set the global default data type for NumPy conversion and tensor factories."""

    global _DEFAULT_DTYPE

    with _DTYPE_LOCK:
        _DEFAULT_DTYPE = _validate_dtype(dtype)
    logger.debug("default dtype set to %s", dtype)


def get_default_dtype() -> str:
    """Get the current global default data type."""

    with _DTYPE_LOCK:
        return _DEFAULT_DTYPE


def _cast(value: Real, dtype: str) -> Real:
    """Coerce ``value`` to the Python number type matching ``dtype``."""
    if dtype.startswith("int"):
        return int(value)
    return float(value)


_AXES = ("length", "width", "depth", "depth2")
_RANK = len(_AXES)

Storage = List[List[List[List[Real]]]]


def _check_value(value: Any) -> Real:
    if not is_real_scalar(value):
        raise TypeError(
            f"Tensor4 values must be real numbers, got '{type(value).__name__}'"
        )
    return value


def _is_nested(node: Any) -> bool:
    if _NUMPY_ARRAY and isinstance(node, _NUMPY_ARRAY):
        return True
    return isinstance(node, Sequence) and not isinstance(node, str)


def _check(node: Any, level: int, extents: List[Optional[int]]) -> None:
    """Check that ``node`` is rectangular rank-4 data without modifying it.

    ``extents`` records the size seen first at every level.
    """
    if level == _RANK:
        if _is_nested(node):
            raise ShapeMismatchError(f"expected rank-{_RANK} data, found more levels")
        _check_value(node)
        return

    if not _is_nested(node):
        raise ShapeMismatchError(
            f"expected rank-{_RANK} data, found '{type(node).__name__}' "
            f"along axis '{_AXES[level]}'"
        )

    expected = extents[level]
    if expected is None:
        extents[level] = len(node)
    elif expected != len(node):
        raise ShapeMismatchError(
            f"jagged data along axis '{_AXES[level]}': expected {expected} "
            f"entries, found {len(node)}"
        )

    for child in node:
        _check(child, level + 1, extents)


def _adopt(node: Any, level: int = 0) -> Any:
    """Return checked rank-4 data as nested lists.

    Lists are kept as they are; any other sequence is materialised into a new
    list.
    """
    if level == _RANK:
        return node
    if _NUMPY_ARRAY and isinstance(node, _NUMPY_ARRAY):
        return node.tolist()
    if not isinstance(node, list):
        node = list(node)
    for i, child in enumerate(node):
        node[i] = _adopt(child, level + 1)
    return node


class Tensor4(TensorBase):
    """
    A dense tensor with four axes: ``length`` (rows), ``width`` (columns),
    ``depth`` and ``depth2``.

    Values are stored as four nested lists, outermost axis first. Public
    coordinates are 1-based and inclusive. Arithmetic never mutates its
    operands; :meth:`set_item` is the only in-place operation, so a tensor
    shared between threads must be guarded by the caller.
    """

    rank: ClassVar[int] = _RANK

    # Tensor4 keeps its own operators when combined with NumPy operands.
    __array_priority__ = 1000

    @classmethod
    def _wrap_storage(cls, storage: Storage) -> "Tensor4":
        """Instantiate a ``Tensor4`` around already validated ``storage``."""

        instance = cls.__new__(cls)
        instance._data = storage
        return instance

    def __init__(self, data: Any):
        """
        Initialize a tensor.

        Nested lists are adopted as the tensor's storage without copying, so
        the caller hands over ownership and must not keep mutating them.
        Tuples and other sequences are copied into new lists.
        The data is fully validated before anything is adopted, so a rejected
        input is left untouched.

        Args:
            data: Rectangular rank-4 nested data, a 4-d NumPy array or another
                ``Tensor4`` (copied).

        Examples:
            >>> t1 = Tensor4([[[[1, 2]]]])
            >>> t2 = Tensor4(np.zeros((2, 2, 2, 2)))
        """
        if isinstance(data, Tensor4):
            # Copy constructor
            data = data.data
        elif _NUMPY_ARRAY and isinstance(data, _NUMPY_ARRAY):
            if data.ndim != _RANK:
                raise ShapeMismatchError(
                    f"expected a {_RANK}-dimensional array, got {data.ndim} dimension(s)"
                )
            data = data.tolist()

        _check(data, 0, [None] * _RANK)
        self._data: Storage = _adopt(data)

    @classmethod
    def generate(
        cls,
        length: int,
        width: int,
        depth: int,
        depth2: int,
        generator: Callable[[int], Real],
    ) -> "Tensor4":
        """Create a tensor whose values come from ``generator``.

        ``generator`` is called once per cell with a running index starting
        at ``0``; ``length`` varies slowest and ``depth2`` fastest.
        Every size must be at least 1.

        Examples:
            >>> Tensor4.generate(1, 1, 1, 2, lambda i: i).to_list()
            [0, 1]
        """
        shape = dict(zip(_AXES, (length, width, depth, depth2)))
        for name, size in shape.items():
            if isinstance(size, Integral) and not isinstance(size, bool) and size < 1:
                raise ValueError(f"size of axis '{name}' must be positive, got {size}")
        return _generate(shape, generator).to_tensor4()

    @classmethod
    def full(
        cls,
        length: int,
        width: int,
        depth: int,
        depth2: int,
        fill_value: Real,
        dtype: Optional[str] = None,
    ) -> "Tensor4":
        """Create a tensor filled with ``fill_value``."""
        value = _cast(fill_value, _validate_dtype(dtype or get_default_dtype()))
        return cls.generate(length, width, depth, depth2, lambda _: value)

    @classmethod
    def zeros(
        cls,
        length: int,
        width: int,
        depth: int,
        depth2: int,
        dtype: Optional[str] = None,
    ) -> "Tensor4":
        """Create a tensor filled with zeros."""
        return cls.full(length, width, depth, depth2, 0, dtype=dtype)

    @classmethod
    def from_numpy(cls, array: "np.ndarray") -> "Tensor4":
        """Create a tensor from a 4-dimensional NumPy array (values are copied)."""
        _ensure_numpy_available(
            "NumPy is required to construct tensors from NumPy arrays."
        )
        if not isinstance(array, _NUMPY_ARRAY):
            raise TypeError(f"from_numpy expects a numpy.ndarray, got '{type(array).__name__}'")
        logger.debug("building Tensor4 from array of shape %s", array.shape)
        return cls(array)

    # Shape introspection
    def _extent(self, level: int) -> int:
        node: Any = self._data
        for _ in range(level):
            if not node:
                return 0
            node = node[0]
        return len(node)

    def _sizes(self) -> Tuple[int, int, int, int]:
        return (self._extent(0), self._extent(1), self._extent(2), self._extent(3))

    @property
    def length(self) -> int:
        """Number of rows."""
        return self._extent(0)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._extent(1)

    @property
    def depth(self) -> int:
        """Size of the third axis."""
        return self._extent(2)

    @property
    def depth2(self) -> int:
        """Size of the fourth axis."""
        return self._extent(3)

    @property
    def items_count(self) -> int:
        """Total number of elements."""
        count = 1
        for size in self._sizes():
            count *= size
        return count

    @property
    def shape(self) -> Dict[str, int]:
        """Axis sizes keyed by axis name, outermost first."""
        return dict(zip(_AXES, self._sizes()))

    @property
    def data(self) -> Storage:
        """Deep copy of the nested values."""
        return [[[list(tube) for tube in column] for column in row] for row in self._data]

    # Indexed access
    def _offsets(self, coordinates: Tuple[int, int, int, int]) -> Tuple[int, ...]:
        offsets = []
        for axis, index, size in zip(_AXES, coordinates, self._sizes()):
            if isinstance(index, bool) or not isinstance(index, Integral):
                raise TypeError(f"{axis} index must be an integer, got '{type(index).__name__}'")
            if not 1 <= index <= size:
                raise IndexOutOfRangeError(axis, index, size)
            offsets.append(int(index) - 1)
        return tuple(offsets)

    def item_at(self, length: int, width: int, depth: int, depth2: int) -> Real:
        """Return the value at the given 1-based position.

        - ``length`` -> row
        - ``width`` -> column
        - ``depth`` -> third axis
        - ``depth2`` -> fourth axis
        """
        l, w, d, dd = self._offsets((length, width, depth, depth2))
        return self._data[l][w][d][dd]

    def set_item(self, length: int, width: int, depth: int, depth2: int, value: Real) -> Real:
        """Store ``value`` at the given 1-based position and return it."""
        if not is_real_scalar(value):
            raise TypeError(
                f"Tensor4 values must be real numbers, got '{type(value).__name__}'"
            )
        l, w, d, dd = self._offsets((length, width, depth, depth2))
        self._data[l][w][d][dd] = value
        return value

    # Functional traversal
    def _iter_values(self) -> Iterator[Real]:
        for row in self._data:
            for column in row:
                for tube in column:
                    yield from tube

    def to_list(self) -> List[Real]:
        """Flatten the values into a list, ``length`` slowest and ``depth2`` fastest."""
        return list(self._iter_values())

    def map(self, f: Callable[[Real], Real]) -> "Tensor4":
        """Return a new tensor with ``f`` applied to every value."""
        return self._wrap_storage(
            [
                [[[_check_value(f(v)) for v in tube] for tube in column] for column in row]
                for row in self._data
            ]
        )

    def reduce(self, f: Callable[[Real, Real], Real]) -> Real:
        """Fold ``f`` left to right over the flattened values."""
        values = self.to_list()
        if not values:
            raise ValueError("reduce of an empty Tensor4 with no initial value")
        return _fold(f, values)

    def any(self, f: Callable[[Real], bool]) -> bool:
        """Test if any value satisfies ``f``."""
        return any(f(v) for v in self._iter_values())

    def every(self, f: Callable[[Real], bool]) -> bool:
        """Test if all values satisfy ``f``."""
        return all(f(v) for v in self._iter_values())

    # Tensor operations
    def copy(self) -> "Tensor4":
        """Create an independent copy of the tensor."""
        return self._wrap_storage(self.data)

    def clone(self) -> "Tensor4":
        """Alias for :meth:`copy`."""
        return self.copy()

    def _require_same_shape(self, other: "Tensor4", symbol: str) -> None:
        if self._sizes() != other._sizes():
            raise ShapeMismatchError(
                f"operands could not be combined with '{symbol}': "
                f"shapes {self.shape} and {other.shape}"
            )

    def _combine(self, other: "Tensor4", op: Callable[[Real, Real], Real]) -> "Tensor4":
        """Copy ``self`` and fold the values of ``other`` into the copy elementwise."""
        result = self.copy()
        for row, other_row in zip(result._data, other._data):
            for column, other_column in zip(row, other_row):
                for tube, other_tube in zip(column, other_column):
                    for i, value in enumerate(other_tube):
                        tube[i] = op(tube[i], value)
        return result

    # Arithmetic operations
    def __neg__(self) -> "Tensor4":
        """Unary negation returning a Tensor4."""
        return self.map(operator.neg)

    def __add__(self, other: "Tensor4") -> "Tensor4":
        if not isinstance(other, Tensor4):
            raise UnsupportedOperandTypeError("+", other)
        self._require_same_shape(other, "+")
        return self._combine(other, operator.add)

    def __sub__(self, other: "Tensor4") -> "Tensor4":
        if not isinstance(other, Tensor4):
            raise UnsupportedOperandTypeError("-", other)
        self._require_same_shape(other, "-")
        return self + -other

    def __mul__(self, other: Union["Tensor4", Number, float, int]) -> "Tensor4":
        operand = classify("*", other)
        if isinstance(operand, TensorOperand):
            self._require_same_shape(operand.tensor, "*")
            return self._combine(operand.tensor, operator.mul)
        if isinstance(operand, (Scalar, WrappedScalar)):
            factor = operand.value
            return self.map(lambda v: v * factor)
        raise UnsupportedOperandTypeError("*", other)

    def __rmul__(self, other: Union[Number, float, int]) -> "Tensor4":
        return self.__mul__(other)

    def __truediv__(self, other: Union[Number, float, int]) -> "Tensor4":
        operand = classify("/", other)
        if not isinstance(operand, (Scalar, WrappedScalar)):
            raise UnsupportedOperandTypeError("/", other)
        if operand.value == 0:
            raise DivisionByZeroError()
        return self * (1 / operand.value)

    # Structural equality
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor4):
            return NotImplemented
        return self._sizes() == other._sizes() and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._sizes(), tuple(self._iter_values())))

    # Data conversion methods
    def numpy(self, dtype: Optional[str] = None) -> "np.ndarray":
        """Convert to a new NumPy array using ``dtype`` or the default dtype."""
        _ensure_numpy_available(
            "NumPy is required to materialize Tensor4 data as a NumPy array."
        )
        target = _validate_dtype(dtype or get_default_dtype())
        array = np.array(self._data, dtype=_TENSOR_TO_NP_DTYPE[target])
        # Empty axes collapse the nesting, so restore the full rank.
        return array.reshape(self._sizes())

    def __array__(self, dtype: Optional["np.dtype"] = None, copy: Optional[bool] = None) -> "np.ndarray":
        """Support NumPy's array protocol for seamless interoperability."""
        _ensure_numpy_available(
            "NumPy is required to expose Tensor4 data through the array protocol."
        )
        if copy is False:
            raise ValueError("Tensor4 storage is not an array; a copy is always made")
        array = self.numpy()
        if dtype is not None:
            return array.astype(dtype, copy=False)
        return array

    # String representations
    def __repr__(self) -> str:
        return f"Tensor4({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)

    def __len__(self) -> int:
        return self.length


# Export all public symbols
__all__ = [
    "Tensor4",
    "set_default_dtype",
    "get_default_dtype",
]
