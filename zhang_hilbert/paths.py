# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Scan orders as numpy permutations, for reordering flattened grids
(e.g. a ``h * w`` patch sequence) along the pseudo-Hilbert curve.

A path holds the row-major flat index ``y * width + x`` of every cell in visit
order; its inverse permutation is the visit index of every cell.
"""

import numpy as np

from zhang_hilbert.arb import ArbHilbertScanCore
from zhang_hilbert.core import HilbertScanCore


def scan_points(width, height, arb=True):
    engine = ArbHilbertScanCore if arb else HilbertScanCore
    points = np.array(list(engine(width, height)), dtype=np.int64)
    return points.reshape(-1, 2)


def hilbert_path(width, height, arb=True):
    points = scan_points(width, height, arb=arb)
    return points[:, 1] * width + points[:, 0]


def reverse_permut_np(permutation):
    permutation = np.asarray(permutation)
    reverse = np.empty_like(permutation)
    reverse[permutation] = np.arange(len(permutation), dtype=permutation.dtype)
    return reverse


def order_index(width, height, arb=True):
    """
    The ``(height, width)`` grid of visit indices, i.e. the map from a cell
    back to its position along the curve.
    """
    return reverse_permut_np(hilbert_path(width, height, arb=arb)).reshape(height, width)


def hilbert_paths(width, height, arb=True):
    """
    Flipped variants of the scan, as flat paths over the same grid. Square
    grids also get the transposed variants (8 in total, 4 otherwise).
    """
    res = order_index(width, height, arb=arb)
    variants = [res, np.fliplr(res), np.flipud(res), np.rot90(res, 2)]
    if width == height:
        variants += [np.transpose(_) for _ in variants]
    # visit index grid -> path
    return [reverse_permut_np(_.flatten()) for _ in variants]


def paths_to_torch(paths, device="cpu"):
    """Turn paths into ``(paths, reverse_paths)`` lists of long tensors."""
    import torch

    paths_rev = [reverse_permut_np(_) for _ in paths]
    paths = [torch.from_numpy(np.ascontiguousarray(_)).long().to(device) for _ in paths]
    paths_rev = [torch.from_numpy(_).long().to(device) for _ in paths_rev]
    assert len(paths) == len(paths_rev), f"{len(paths)} != {len(paths_rev)}"
    return paths, paths_rev
