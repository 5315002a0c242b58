# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Capabilities shared by every fixed-rank tensor and the shape-driven generation
machinery used to build them.
"""

from __future__ import annotations

import copy
import itertools
import logging
from abc import ABC, abstractmethod
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, List, Mapping

from .exceptions import ShapeMismatchError

if TYPE_CHECKING:  # pragma: no cover
    from .tensor import Tensor4

logger = logging.getLogger(__name__)


def _flatten(data: Any, depth: int) -> List[Real]:
    """Flatten ``depth`` levels of nested lists in nesting order."""
    if depth == 0:
        return [data]
    if depth == 1:
        return list(data)
    values: List[Real] = []
    for child in data:
        values.extend(_flatten(child, depth - 1))
    return values


class GenericTensor:
    """Nested data of arbitrary rank produced by :meth:`TensorBase.generate`.

    The container is a transient result: convert it to a fixed-rank tensor with
    :meth:`to_tensor4`.
    """

    def __init__(self, shape: Mapping[str, int], data: Any):
        self._shape = dict(shape)
        self._data = data

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def shape(self) -> Dict[str, int]:
        return dict(self._shape)

    @property
    def data(self) -> Any:
        return copy.deepcopy(self._data)

    def to_list(self) -> List[Real]:
        return _flatten(self._data, self.rank)

    def to_tensor4(self) -> "Tensor4":
        """Convert the generated data into a :class:`~tensor4.tensor.Tensor4`."""
        from .tensor import Tensor4

        if self.rank != 4:
            raise ShapeMismatchError(
                f"cannot convert a rank-{self.rank} result to Tensor4"
            )
        return Tensor4(self.data)

    def __repr__(self) -> str:
        return f"GenericTensor(shape={self._shape!r}, data={self._data!r})"


class TensorBase(ABC):
    """Operations every fixed-rank tensor implements."""

    rank: ClassVar[int]

    @property
    @abstractmethod
    def shape(self) -> Dict[str, int]:
        """Ordered mapping from axis name to axis size."""

    @property
    @abstractmethod
    def items_count(self) -> int:
        """Total number of stored values."""

    @property
    @abstractmethod
    def data(self) -> Any:
        """Independent deep copy of the nested storage."""

    @abstractmethod
    def map(self, f: Callable[[Real], Real]) -> "TensorBase":
        ...

    @abstractmethod
    def reduce(self, f: Callable[[Real, Real], Real]) -> Real:
        ...

    @abstractmethod
    def any(self, f: Callable[[Real], bool]) -> bool:
        ...

    @abstractmethod
    def every(self, f: Callable[[Real], bool]) -> bool:
        ...

    @abstractmethod
    def to_list(self) -> List[Real]:
        ...

    @abstractmethod
    def copy(self) -> "TensorBase":
        ...


def generate(shape: Mapping[str, int], generator: Callable[[int], Real]) -> GenericTensor:
    """Build nested data of the given ``shape`` from ``generator``.

    ``generator`` receives a sequential index starting at ``0`` and is called
    exactly once per cell. Cells are visited in the order of the ``shape``
    mapping with the first axis varying slowest.

    Args:
        shape: Ordered mapping of axis names to non-negative sizes.
        generator: Callable mapping the running index to a cell value.

    Examples:
        >>> generate({"rows": 2, "columns": 2}, lambda i: i).data
        [[0, 1], [2, 3]]
    """
    if not shape:
        raise ValueError("generate requires at least one axis")

    sizes = []
    for name, size in shape.items():
        if isinstance(size, bool) or not isinstance(size, Integral):
            raise TypeError(f"size of axis '{name}' must be an integer")
        if size < 0:
            raise ValueError(f"size of axis '{name}' must be non-negative, got {size}")
        sizes.append(int(size))

    counter = itertools.count()
    last = len(sizes) - 1

    def build(level: int) -> List[Any]:
        if level == last:
            return [generator(next(counter)) for _ in range(sizes[level])]
        return [build(level + 1) for _ in range(sizes[level])]

    data = build(0)
    logger.debug("generated %d value(s) for shape %s", next(counter), dict(shape))
    return GenericTensor(shape, data)


__all__ = ["TensorBase", "GenericTensor", "generate"]
