# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Basic usage example for tensor4.

The script builds two tensors, combines them with the elementwise operators
and summarises the result with the functional helpers.
"""

from __future__ import annotations

import tensor4 as t4


def run(verbose: bool = True):
    """Run the example.

    Parameters
    ----------
    verbose:
        If ``True``, prints the intermediate tensors.

    Returns
    -------
    tuple[float, bool, dict[str, int]]
        Sum of the combined tensor, whether every value is non-negative and
        its shape.
    """

    a = t4.generate(2, 3, 2, 2, lambda i: i)
    b = t4.full(2, 3, 2, 2, 0.5)

    combined = (a + b) * t4.Number(2) - a / 4
    total = combined.reduce(lambda x, y: x + y)
    non_negative = combined.every(lambda v: v >= 0)

    if verbose:
        print(f"a: {a}")
        print(f"shape: {combined.shape}")
        print(f"first value: {combined.item_at(1, 1, 1, 1)}")
        print(f"sum: {total:.2f}")

    return total, non_negative, combined.shape


if __name__ == "__main__":
    run()
