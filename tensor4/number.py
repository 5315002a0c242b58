# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Scalar wrapper usable as an arithmetic operand for tensors."""

from __future__ import annotations

from numbers import Real


class Number:
    """Immutable wrapper around a single real value.

    Tensors accept a ``Number`` wherever a plain scalar multiplier or divisor
    is allowed; the wrapped value is read through :attr:`data`.

    Examples:
        >>> Number(2).data
        2
    """

    __slots__ = ("_data",)

    def __init__(self, data: Real):
        if isinstance(data, Number):
            data = data.data
        if isinstance(data, bool) or not isinstance(data, Real):
            raise TypeError(
                f"Number expects a real value, got '{type(data).__name__}'"
            )
        self._data = data

    @property
    def data(self) -> Real:
        """The wrapped numeric value."""
        return self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __float__(self) -> float:
        return float(self._data)

    def __int__(self) -> int:
        return int(self._data)

    def __bool__(self) -> bool:
        return self._data != 0

    def __repr__(self) -> str:
        return f"Number({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)


__all__ = ["Number"]
