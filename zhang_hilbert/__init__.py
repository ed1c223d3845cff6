# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Pseudo-Hilbert scans of arbitrarily-sized rectangles, after "A Pseudo-Hilbert
Scan for Arbitrarily-Sized Arrays" by Zhang, et al.

Differences from the paper:

* ``division`` splits ``n = 3 * 2**k`` the other way round (see
  ``zhang_hilbert.division``).
* The last child of every block leaves on its parent's exit corner, and a
  whole scan ends on a corner that only depends on the grid's shape, so
  scans can be tiled (see ``zhang_hilbert.curve_types``).
* Blocks that have to be crossed diagonally are cut in two instead of into
  quadrants.
* ``ArbHilbertScan*`` cut extreme rectangles into near-square tiles first.
"""

from zhang_hilbert.arb import ArbHilbertScanCore, Tile, plan_tiles
from zhang_hilbert.core import Frame, HilbertScanCore
from zhang_hilbert.curve_types import CurveType, Transform, decompose, exit_point
from zhang_hilbert.division import division, reference_division
from zhang_hilbert.scan import (
    ArbHilbertScan32,
    ArbHilbertScan64,
    HilbertScan32,
    HilbertScan64,
)

__all__ = [
    "ArbHilbertScan32",
    "ArbHilbertScan64",
    "ArbHilbertScanCore",
    "CurveType",
    "Frame",
    "HilbertScan32",
    "HilbertScan64",
    "HilbertScanCore",
    "Tile",
    "Transform",
    "decompose",
    "division",
    "exit_point",
    "plan_tiles",
    "reference_division",
]
