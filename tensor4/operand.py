# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Classification of right-hand operands for tensor multiplication and division."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Union

from .exceptions import UnsupportedOperandTypeError
from .number import Number

if TYPE_CHECKING:  # pragma: no cover
    from .tensor import Tensor4


@dataclass(frozen=True)
class Scalar:
    """A plain real number."""

    value: Real


@dataclass(frozen=True)
class TensorOperand:
    """Another rank-4 tensor, combined elementwise."""

    tensor: "Tensor4"


@dataclass(frozen=True)
class WrappedScalar:
    """A :class:`~tensor4.number.Number` wrapping a real value."""

    number: Number

    @property
    def value(self) -> Real:
        return self.number.data


Operand = Union[Scalar, TensorOperand, WrappedScalar]


def is_real_scalar(value: object) -> bool:
    """Return ``True`` for real numbers, NumPy real scalars included, but not ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def classify(operator: str, other: object) -> Operand:
    """Wrap ``other`` in the matching operand variant.

    Raises:
        UnsupportedOperandTypeError: ``other`` is neither a real scalar, a
            ``Tensor4`` nor a ``Number``.
    """
    from .tensor import Tensor4

    if is_real_scalar(other):
        return Scalar(other)
    if isinstance(other, Tensor4):
        return TensorOperand(other)
    if isinstance(other, Number):
        return WrappedScalar(other)
    raise UnsupportedOperandTypeError(operator, other)


__all__ = [
    "Scalar",
    "TensorOperand",
    "WrappedScalar",
    "Operand",
    "classify",
    "is_real_scalar",
]
