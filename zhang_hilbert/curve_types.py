# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Curve types and the decomposition table of the pseudo-Hilbert scan.

A block is scanned from one of its corners (the entry) to another (the exit).
The pair of corners is the block's ``CurveType``. Four of them are the curve
types of Zhang's paper, given by two tables:

* ``CURVE_ADDRESS_TABLE[t]`` holds the four quadrant addresses of a type ``t``
  block in visiting order, two bits each, lowest first. Bit 1 of an address
  is x (0: left, 1: right), bit 0 is y (0: bottom, 1: top).
* ``CURVE_INDUCTION_TABLE[t][i]`` is the curve type the paper gives the i-th
  visited quadrant.

Walking a type backwards gives four more, and the diagonal pairs make the
last four. A side is split into ``division(n)``: the remainder on the low
side and the power-of-two part on the high side. Odd widths therefore only
show up in the left column of blocks and odd heights in the bottom row.

Blocks whose shorter side is below 4 are scanned with a basic pattern, a
zigzag whose lines run along one axis. Larger blocks are split into
quadrants. The first one is entered on the parent's entry corner. Every next
one is entered next to where the previous one left, and the last one leaves
on the parent's exit corner. Exits are chosen on the side facing the next
quadrant, the tabled type first, so that every child can actually be
scanned. This is how the 6x7 scan comes out::

    ,---, ,---,
    '-, '-' ,-'
    ,-' ,-, '-,
    '-, | '---'
    ,-' '-----,
    '-, ,-----'
    --' '------

Not every corner pair can be routed through quadrants: a block with an odd
side sometimes has to be crossed diagonally, and no quadrant order does that.
Those blocks are cut in two along one axis instead (``Split.HALVES_X`` and
``Split.HALVES_Y``).
"""

from enum import Enum, IntEnum
from functools import lru_cache
from typing import List, NamedTuple, Optional

from zhang_hilbert.division import division

CURVE_ADDRESS_TABLE = [0b10_11_01_00, 0b01_11_10_00, 0b01_00_10_11, 0b10_00_01_11]
CURVE_INDUCTION_TABLE = [[1, 0, 0, 3], [0, 1, 1, 2], [3, 2, 2, 1], [2, 3, 3, 0]]


class Corner(IntEnum):
    """Block corners, addressed like the quadrants of the tables."""

    BL = 0b00
    TL = 0b01
    BR = 0b10
    TR = 0b11

    @property
    def x(self):
        return self >> 1

    @property
    def y(self):
        return self & 1

    def bit(self, axis):
        return self.y if axis else self.x

    def flip(self, axis):
        return Corner(self ^ (0b01 if axis else 0b10))

    def point(self, width, height):
        return ((width - 1) * self.x, (height - 1) * self.y)


class CurveType(Enum):
    # (entry, exit)
    TYPE_0 = (Corner.BL, Corner.BR)
    TYPE_1 = (Corner.BL, Corner.TL)
    TYPE_2 = (Corner.TR, Corner.TL)
    TYPE_3 = (Corner.TR, Corner.BR)
    TYPE_0_REV = (Corner.BR, Corner.BL)
    TYPE_1_REV = (Corner.TL, Corner.BL)
    TYPE_2_REV = (Corner.TL, Corner.TR)
    TYPE_3_REV = (Corner.BR, Corner.TR)
    DIAGONAL_BL = (Corner.BL, Corner.TR)
    DIAGONAL_TR = (Corner.TR, Corner.BL)
    DIAGONAL_TL = (Corner.TL, Corner.BR)
    DIAGONAL_BR = (Corner.BR, Corner.TL)

    @classmethod
    def between(cls, entry, leave):
        if entry == leave:
            return None
        return cls((Corner(entry), Corner(leave)))

    @property
    def entry(self):
        return self.value[0]

    @property
    def exit(self):
        return self.value[1]

    @property
    def is_diagonal(self):
        return self.entry ^ self.exit == 0b11

    @property
    def reversed(self):
        return CurveType((self.exit, self.entry))


TABLE_TYPES = [CurveType.TYPE_0, CurveType.TYPE_1, CurveType.TYPE_2, CurveType.TYPE_3]


class ParityClass(Enum):
    EE = (0, 0)
    EO = (0, 1)
    OE = (1, 0)
    OO = (1, 1)


class Split(Enum):
    POINT = "point"
    BASIC = "basic"
    QUAD = "quad"
    HALVES_X = "halves_x"
    HALVES_Y = "halves_y"


class Transform(NamedTuple):
    """
    ``x = dx + a * u + b * v`` and ``y = dy + c * u + d * v``, where
    ``[[a, b], [c, d]]`` is a signed permutation matrix (axis swap and flips).
    """

    a: int = 1
    b: int = 0
    c: int = 0
    d: int = 1
    dx: int = 0
    dy: int = 0

    def apply(self, u, v):
        return (
            self.dx + self.a * u + self.b * v,
            self.dy + self.c * u + self.d * v,
        )

    def compose(self, inner):
        """Return the transform applying ``inner`` first, then ``self``."""
        a, b, c, d, dx, dy = self
        return Transform(
            a * inner.a + b * inner.c,
            a * inner.b + b * inner.d,
            c * inner.a + d * inner.c,
            c * inner.b + d * inner.d,
            dx + a * inner.dx + b * inner.dy,
            dy + c * inner.dx + d * inner.dy,
        )


IDENTITY = Transform()


def translate(dx, dy):
    return Transform(1, 0, 0, 1, dx, dy)


def transpose(dx=0, dy=0):
    return Transform(0, 1, 1, 0, dx, dy)


class Block(NamedTuple):
    width: int
    height: int
    curve_type: CurveType
    # places the block inside its parent
    transform: Transform


class BasicPattern(NamedTuple):
    """
    A zigzag of ``lines`` lines of ``length`` cells. Cell ``k`` sits at
    ``(k // length, k % length)`` in pattern space, with every odd line walked
    backwards, and ``transform`` maps pattern space onto the block.
    """

    lines: int
    length: int
    transform: Transform

    @property
    def cells(self):
        return self.lines * self.length

    def point(self, k):
        line, pos = divmod(k, self.length)
        if line & 1:
            pos = self.length - 1 - pos
        return self.transform.apply(line, pos)


def parity_class(width, height):
    return ParityClass((width & 1, height & 1))


def quad_sequence(curve_type):
    """
    Quadrant addresses of ``curve_type`` in visiting order, each with the
    curve type the induction table gives it.

    >>> [(q.name, t.name) for q, t in quad_sequence(CurveType.TYPE_0)]
    [('BL', 'TYPE_1'), ('TL', 'TYPE_0'), ('TR', 'TYPE_0'), ('BR', 'TYPE_3')]
    """
    if curve_type.is_diagonal:
        raise ValueError(f"{curve_type.name} has no quadrant order")
    backwards = curve_type not in TABLE_TYPES
    t = TABLE_TYPES.index(curve_type.reversed if backwards else curve_type)
    sequence = [
        (
            Corner((CURVE_ADDRESS_TABLE[t] >> (2 * i)) & 0b11),
            TABLE_TYPES[CURVE_INDUCTION_TABLE[t][i]],
        )
        for i in range(4)
    ]
    if backwards:
        sequence = [(quadrant, child.reversed) for quadrant, child in reversed(sequence)]
    return sequence


def _zigzag_end(width, height, entry, axis):
    # lines step along ``axis``; an odd number of them ends on the far side
    end = entry.flip(axis)
    if (width, height)[axis] & 1:
        end = end.flip(1 - axis)
    return end.point(width, height)


def _zigzag(width, height, entry, axis):
    dx, dy = entry.point(width, height)
    sx = -1 if entry.x else 1
    sy = -1 if entry.y else 1
    if axis == 0:
        return BasicPattern(width, height, Transform(sx, 0, 0, sy, dx, dy))
    return BasicPattern(height, width, Transform(0, sx, sy, 0, dx, dy))


def basic_pattern(width, height, curve_type):
    """The zigzag scanning a leaf block with ``curve_type``, or ``None``."""
    target = curve_type.exit.point(width, height)
    # lines along the shorter side first
    axes = (0, 1) if width >= height else (1, 0)
    for axis in axes:
        if _zigzag_end(width, height, curve_type.entry, axis) == target:
            return _zigzag(width, height, curve_type.entry, axis)
    return None


def _parts(n):
    """Low and high part of a side, the power of two on the high side."""
    n1, n2 = division(n)
    return n2, n1


def _route(parts, entry, leave):
    """
    Give consecutive parts their curve types. ``parts`` holds
    ``(width, height, transform, axis, toward, preferred)``, where ``axis`` is
    the axis crossed into the next part, ``toward`` the bit of the side facing
    it and ``preferred`` the exit tried first. The last part leaves on ``leave``.
    """
    (width, height, transform, axis, toward, preferred), rest = parts[0], parts[1:]
    if not rest:
        curve_type = CurveType.between(entry, leave)
        if curve_type is None or _plan(width, height, curve_type) is None:
            return None
        return [Block(width, height, curve_type, transform)]

    candidates = [c for c in Corner if c.bit(axis) == toward and c != entry]
    candidates.sort(key=lambda c: c != preferred)
    for corner in candidates:
        curve_type = CurveType.between(entry, corner)
        if _plan(width, height, curve_type) is None:
            continue
        tail = _route(rest, corner.flip(axis), leave)
        if tail is not None:
            return [Block(width, height, curve_type, transform)] + tail
    return None


def _quad(width, height, curve_type):
    wl, wr = _parts(width)
    hb, ht = _parts(height)
    sequence = quad_sequence(curve_type)
    parts = []
    for i, (quadrant, child) in enumerate(sequence):
        size = (wr if quadrant.x else wl, ht if quadrant.y else hb)
        transform = translate(wl * quadrant.x, hb * quadrant.y)
        if i == len(sequence) - 1:
            parts.append(size + (transform, None, None, None))
            continue
        following = sequence[i + 1][0]
        axis = 0 if quadrant ^ following == 0b10 else 1
        parts.append(size + (transform, axis, following.bit(axis), child.exit))
    return _route(parts, curve_type.entry, curve_type.exit)


def _halves(width, height, curve_type, axis):
    entry, leave = curve_type.value
    if entry.bit(axis) == leave.bit(axis):
        return None
    low, high = _parts((width, height)[axis])
    if axis == 0:
        halves = [(low, height, IDENTITY), (high, height, translate(low, 0))]
    else:
        halves = [(width, low, IDENTITY), (width, high, translate(0, low))]
    if entry.bit(axis):
        halves.reverse()
    first, second = halves
    parts = [
        first + (axis, 1 - entry.bit(axis), entry.flip(axis)),
        second + (None, None, None),
    ]
    return _route(parts, entry, leave)


@lru_cache(maxsize=65536)
def _plan(width, height, curve_type):
    if width == 1 and height == 1:
        return Split.POINT, ()
    if min(width, height) < 4:
        pattern = basic_pattern(width, height, curve_type)
        return None if pattern is None else (Split.BASIC, pattern)
    if not curve_type.is_diagonal:
        children = _quad(width, height, curve_type)
        if children is not None:
            return Split.QUAD, tuple(children)
    for axis in ((0, 1) if width >= height else (1, 0)):
        children = _halves(width, height, curve_type, axis)
        if children is not None:
            return (Split.HALVES_X, Split.HALVES_Y)[axis], tuple(children)
    return None


def is_feasible(width, height, curve_type):
    """Whether a block of this size can be scanned with ``curve_type``."""
    if width < 1 or height < 1:
        return False
    return _plan(width, height, curve_type) is not None


def plan(width, height, curve_type):
    """
    Return ``(split, children)`` for a block, where ``children`` is a tuple of
    ``Block``s for ``QUAD`` and ``HALVES_*``, a ``BasicPattern`` for ``BASIC``
    and empty for ``POINT``.
    """
    if not is_feasible(width, height, curve_type):
        raise ValueError(
            f"a {width}x{height} block can not be scanned as {curve_type.name}"
        )
    return _plan(width, height, curve_type)


def select_split(width, height, curve_type):
    return plan(width, height, curve_type)[0]


def decompose(width, height, curve_type) -> List[Block]:
    """Ordered children of a block, empty for the leaves."""
    split, children = plan(width, height, curve_type)
    if split in (Split.POINT, Split.BASIC):
        return []
    return list(children)


def root_curve_type(width, height) -> CurveType:
    # even widths end on the bottom edge, odd widths on the top
    return CurveType.TYPE_0 if width % 2 == 0 else CurveType.DIAGONAL_BL


def root_block(width, height) -> Block:
    return Block(width, height, root_curve_type(width, height), IDENTITY)


def exit_point(width, height) -> Optional[tuple]:
    """
    Last point of a ``width x height`` scan, ``None`` when it is empty.

    >>> exit_point(6, 7)
    (5, 0)
    >>> exit_point(7, 5)
    (6, 4)
    """
    if width < 1 or height < 1:
        return None
    return root_curve_type(width, height).exit.point(width, height)
