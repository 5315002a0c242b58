# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import operator

import pytest

from tensor4 import Tensor4


def test_map_returns_new_tensor(sequential):
    squared = sequential.map(lambda v: v * v)
    assert squared.shape == sequential.shape
    assert squared.to_list() == [v * v for v in range(24)]
    assert sequential.to_list() == list(range(24))


def test_map_rejects_non_numeric_results(sequential):
    with pytest.raises(TypeError):
        sequential.map(str)


def test_map_keeps_subclass(sequential):
    class Scaled(Tensor4):
        pass

    scaled = Scaled(sequential.data)
    result = scaled.map(lambda v: v + 1)
    assert type(result) is Scaled
    assert result.to_list() == list(range(1, 25))
    assert type(-scaled) is Scaled


def test_reduce_folds_left_to_right(sequential):
    assert sequential.reduce(operator.add) == sum(sequential.to_list())
    assert Tensor4([[[[1, 2, 3]]]]).reduce(lambda a, b: a * 10 + b) == 123
    order = []
    sequential.reduce(lambda a, b: order.append(b) or b)
    assert order == list(range(1, 24))


def test_reduce_single_value():
    assert Tensor4([[[[5]]]]).reduce(operator.add) == 5


def test_reduce_empty_tensor_fails():
    with pytest.raises(ValueError):
        Tensor4([]).reduce(operator.add)


def test_every_and_any(mixed, sequential):
    assert sequential.every(lambda v: v >= 0)
    assert not mixed.every(lambda v: v >= 0)
    assert any(v < 0 for v in mixed.to_list())
    assert mixed.any(lambda v: v < 0)
    assert not sequential.any(lambda v: v < 0)


def test_any_short_circuits(sequential):
    seen = []

    def predicate(v):
        seen.append(v)
        return v == 3

    assert sequential.any(predicate)
    assert seen == [0, 1, 2, 3]


def test_empty_tensor_traversal():
    empty = Tensor4([])
    assert empty.every(lambda v: False)
    assert not empty.any(lambda v: True)
    assert empty.to_list() == []
    assert empty.map(lambda v: v + 1) == empty


def test_to_list_nesting_order():
    t = Tensor4([[[[1, 2], [3, 4]], [[5, 6], [7, 8]]]])
    assert t.to_list() == [1, 2, 3, 4, 5, 6, 7, 8]
