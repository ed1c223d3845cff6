# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Public scan iterators, one per coordinate width.

The engines work on Python ints; these wrappers only check that the grid fits
the chosen unsigned type and hand the drained points out as numpy arrays of
that type.
"""

import itertools
import operator

import numpy as np

from zhang_hilbert.arb import ArbHilbertScanCore
from zhang_hilbert.core import HilbertScanCore


class _HilbertScan:
    dtype = None
    engine = None

    def __init__(self, width, height):
        limit = np.iinfo(self.dtype).max
        sizes = []
        for name, value in (("width", width), ("height", height)):
            try:
                value = operator.index(value)
            except TypeError:
                raise ValueError(f"{name} must be an integer, got {value!r}") from None
            if value < 0 or value > limit:
                raise ValueError(
                    f"{name} {value} is out of range for {type(self).__name__} (0..{limit})"
                )
            sizes.append(value)
        self.width, self.height = sizes
        self._inner = self.engine(self.width, self.height)

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._inner)

    def __len__(self):
        return len(self._inner)

    def to_array(self):
        """Drain the remaining points into an ``(n, 2)`` array of ``dtype``."""
        n = len(self)
        flat = np.fromiter(
            itertools.chain.from_iterable(self), dtype=self.dtype, count=2 * n
        )
        return flat.reshape(n, 2)


class HilbertScan32(_HilbertScan):
    dtype = np.uint32
    engine = HilbertScanCore


class HilbertScan64(_HilbertScan):
    dtype = np.uint64
    engine = HilbertScanCore


class ArbHilbertScan32(_HilbertScan):
    dtype = np.uint32
    engine = ArbHilbertScanCore


class ArbHilbertScan64(_HilbertScan):
    dtype = np.uint64
    engine = ArbHilbertScanCore
