# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import logging

from . import base, exceptions, operand
from .base import GenericTensor, TensorBase
from .exceptions import (
    DivisionByZeroError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    Tensor4Error,
    UnsupportedOperandTypeError,
)
from .number import Number
from .tensor import Tensor4, get_default_dtype, set_default_dtype

__version__ = "0.1.0"
__version_tuple__ = (0, 1, 0)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Tensor factories map directly to the Tensor4 class methods.
tensor4 = Tensor4
generate = Tensor4.generate
zeros = Tensor4.zeros
full = Tensor4.full
from_numpy = Tensor4.from_numpy

__all__ = [
    "Tensor4",
    "TensorBase",
    "GenericTensor",
    "Number",
    "tensor4",
    "generate",
    "zeros",
    "full",
    "from_numpy",
    "base",
    "exceptions",
    "operand",
    "Tensor4Error",
    "IndexOutOfRangeError",
    "DivisionByZeroError",
    "UnsupportedOperandTypeError",
    "ShapeMismatchError",
    "set_default_dtype",
    "get_default_dtype",
]
