# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Error kinds raised by tensor4.

Every error also derives from the closest builtin exception so callers can
catch either the specific class or the builtin one.
"""


class Tensor4Error(Exception):
    """Base class for all tensor4 errors."""


class IndexOutOfRangeError(Tensor4Error, IndexError):
    """A coordinate falls outside the inclusive range ``[1, axis_size]``."""

    def __init__(self, axis: str, index: int, size: int):
        self.axis = axis
        self.index = index
        self.size = size
        super().__init__(
            f"{axis} index {index} is out of range; expected a value in [1, {size}]"
        )


class DivisionByZeroError(Tensor4Error, ZeroDivisionError):
    """A scalar or wrapped-scalar divisor equals zero."""

    def __init__(self, message: str = "division of a tensor by zero"):
        super().__init__(message)


class UnsupportedOperandTypeError(Tensor4Error, TypeError):
    """The right-hand operand of an arithmetic operator has an unsupported kind."""

    def __init__(self, operator: str, operand: object):
        self.operator = operator
        self.operand_type = type(operand)
        super().__init__(
            f"unsupported operand type for {operator}: "
            f"'Tensor4' and '{type(operand).__name__}'"
        )


class ShapeMismatchError(Tensor4Error, ValueError):
    """Operand shapes differ, or nested data is not a rectangular rank-4 structure."""


__all__ = [
    "Tensor4Error",
    "IndexOutOfRangeError",
    "DivisionByZeroError",
    "UnsupportedOperandTypeError",
    "ShapeMismatchError",
]
