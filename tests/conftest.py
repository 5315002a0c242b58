# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import tensor4 as t4  # noqa: E402


@pytest.fixture
def sequential():
    """A 2x3x2x2 tensor holding 0..23 in nesting order."""
    return t4.Tensor4.generate(2, 3, 2, 2, lambda i: i)


@pytest.fixture
def mixed():
    """A 2x3x2x2 tensor holding values of both signs."""
    return t4.Tensor4.generate(2, 3, 2, 2, lambda i: (i % 5) - 2)


@pytest.fixture(autouse=True)
def _restore_default_dtype():
    previous = t4.get_default_dtype()
    yield
    t4.set_default_dtype(previous)
