# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Aspect ratio-bounded tiling.

``HilbertScanCore`` accepts any rectangle, but the further the proportions are
from square the more lopsided its splits get. ``ArbHilbertScanCore`` first
cuts the rectangle along its major side into near-square tiles and scans them
one after another with a fresh core each.

Every tile but the last has an even length along the major side. Such a scan
leaves at local ``(length - 1, 0)``, right next to where the following tile
starts, so the tiles join into one continuous scan.
"""

import logging
from typing import List, NamedTuple

from zhang_hilbert.core import HilbertScanCore
from zhang_hilbert.curve_types import exit_point, translate, transpose
from zhang_hilbert.division import division_count


class Tile(NamedTuple):
    index: int
    x: int
    y: int
    width: int
    height: int
    # the major side is y: the tile is scanned as (height, width) and swapped back
    transposed: bool

    @property
    def local_size(self):
        if self.transposed:
            return self.height, self.width
        return self.width, self.height

    @property
    def transform(self):
        if self.transposed:
            return transpose(self.x, self.y)
        return translate(self.x, self.y)


def split_major(major, minor):
    """Cut the major side into tile lengths, all but the last one even."""
    lengths = []
    remaining = major
    while remaining:
        count = division_count(remaining, minor)
        if count == 1:
            length = remaining
        else:
            length = remaining // count
            if length % 2:
                # the next tile must start right beside this one's exit
                length += 1
        lengths.append(length)
        remaining -= length
    return lengths


def plan_tiles(width, height) -> List[Tile]:
    """The ordered tiles covering a ``width x height`` grid."""
    if width == 0 or height == 0:
        return []
    transposed = height > width
    major, minor = (height, width) if transposed else (width, height)

    tiles = []
    pos = 0
    for index, length in enumerate(split_major(major, minor)):
        if transposed:
            tiles.append(Tile(index, 0, pos, minor, length, True))
        else:
            tiles.append(Tile(index, pos, 0, length, minor, False))
        pos += length
    logging.debug(f"{width}x{height} tiled into {[t.local_size for t in tiles]}")
    return tiles


class ArbHilbertScanCore:
    """
    A pseudo-Hilbert scan that stays close to square for rectangles with
    extreme proportions. Same contract as ``HilbertScanCore``.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.tiles = plan_tiles(width, height)
        self._remaining = sum(t.width * t.height for t in self.tiles)
        self._next_tile = 0
        self._inner = None
        self._enter_next_tile()

    def _enter_next_tile(self):
        if self._next_tile == len(self.tiles):
            self._inner = None
            return
        tile = self.tiles[self._next_tile]
        assert tile.index == len(self.tiles) - 1 or tile.local_size[0] % 2 == 0, tile
        self._inner = HilbertScanCore(*tile.local_size, transform=tile.transform)
        self._next_tile += 1

    @property
    def current_tile(self):
        if self._inner is None:
            return None
        return self.tiles[self._next_tile - 1]

    @property
    def remaining(self):
        return self._remaining

    def __len__(self):
        return self._remaining

    def __iter__(self):
        return self

    def __next__(self):
        while self._inner is not None:
            try:
                point = next(self._inner)
            except StopIteration:
                self._enter_next_tile()
                continue
            self._remaining -= 1
            return point
        raise StopIteration


def tile_exit_point(tile: Tile):
    """Where the scan of ``tile`` ends, in grid coordinates."""
    return tile.transform.apply(*exit_point(*tile.local_size))
