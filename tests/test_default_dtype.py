# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import tensor4 as t4


def test_default_dtype_is_float64():
    assert t4.get_default_dtype() == "float64"


@pytest.mark.parametrize("dtype", ["float32", "float64", "int32", "int64"])
def test_set_default_dtype_applies_to_numpy(dtype, sequential):
    t4.set_default_dtype(dtype)
    assert t4.get_default_dtype() == dtype
    assert sequential.numpy().dtype == np.dtype(dtype)


def test_invalid_default_dtype():
    with pytest.raises(ValueError):
        t4.set_default_dtype("bool")
    assert t4.get_default_dtype() == "float64"
