# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import tensor4 as t4
from tensor4 import ShapeMismatchError, Tensor4


def test_numpy_uses_default_dtype(sequential):
    arr = sequential.numpy()
    assert isinstance(arr, np.ndarray)
    assert arr.dtype == np.float64
    assert arr.shape == (2, 3, 2, 2)
    np.testing.assert_array_equal(arr.ravel(), np.arange(24, dtype=np.float64))


def test_numpy_explicit_dtype(sequential):
    arr = sequential.numpy(dtype="int32")
    assert arr.dtype == np.int32
    with pytest.raises(ValueError):
        sequential.numpy(dtype="complex64")


def test_numpy_matches_item_at(mixed):
    arr = mixed.numpy()
    for l in range(mixed.length):
        for w in range(mixed.width):
            for d in range(mixed.depth):
                for dd in range(mixed.depth2):
                    assert arr[l, w, d, dd] == mixed.item_at(l + 1, w + 1, d + 1, dd + 1)


def test_np_asarray_uses_array_protocol(sequential):
    arr = np.asarray(sequential, dtype=np.float32)
    assert arr.dtype == np.float32
    assert arr.shape == (2, 3, 2, 2)


def test_numpy_of_empty_tensor_keeps_rank():
    t = Tensor4([[], []])
    assert t.numpy().shape == (2, 0, 0, 0)


def test_array_protocol_refuses_zero_copy(sequential):
    with pytest.raises(ValueError):
        sequential.__array__(copy=False)
    if np.lib.NumpyVersion(np.__version__) >= "2.0.0":
        with pytest.raises(ValueError):
            np.asarray(sequential, copy=False)
    assert sequential.__array__(copy=True).shape == (2, 3, 2, 2)


def test_from_numpy_copies_values():
    arr = np.arange(16, dtype=np.int64).reshape(2, 2, 2, 2)
    t = t4.from_numpy(arr)
    assert t.to_list() == list(range(16))
    assert all(type(v) is int for v in t.to_list())
    arr[0, 0, 0, 0] = 100
    assert t.item_at(1, 1, 1, 1) == 0


def test_constructor_accepts_arrays():
    t = Tensor4(np.ones((1, 2, 3, 4)))
    assert t.shape == {"length": 1, "width": 2, "depth": 3, "depth2": 4}
    assert t.reduce(lambda a, b: a + b) == 24.0


def test_from_numpy_requires_four_dimensions():
    with pytest.raises(ShapeMismatchError):
        t4.from_numpy(np.zeros((2, 2)))
    with pytest.raises(TypeError):
        t4.from_numpy([[[[1]]]])


def test_numpy_scalars_are_plain_scalars(sequential):
    doubled = sequential * np.float64(2.0)
    assert doubled.to_list() == [v * 2.0 for v in range(24)]
    halved = sequential / np.int64(2)
    assert halved.to_list() == [v * 0.5 for v in range(24)]
