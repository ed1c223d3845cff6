# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
The iterator producing a pseudo-Hilbert scan.

The recursion of ``curve_types.plan`` is unrolled into an explicit stack of
``Frame``s, so every ``next`` call does a bounded amount of work and the
memory only grows with the recursion depth (logarithmic in the grid area),
never with the number of points. Leaf frames walk their basic pattern with
the cursor.
"""

from zhang_hilbert.curve_types import IDENTITY, Split, plan, root_curve_type


class Frame:
    """State of one recursion level."""

    __slots__ = ("width", "height", "curve_type", "transform", "split", "children", "cursor")

    def __init__(self, width, height, curve_type, transform):
        self.width = width
        self.height = height
        self.curve_type = curve_type
        # maps this block's local frame to the output coordinates
        self.transform = transform
        self.split = None
        self.children = None
        self.cursor = 0

    def __repr__(self):
        return (
            f"Frame({self.width}x{self.height}, {self.curve_type.name}, "
            f"cursor={self.cursor})"
        )


class HilbertScanCore:
    """
    Iterate over the cells of a ``width x height`` grid in pseudo-Hilbert
    order, yielding ``(x, y)`` tuples.

    The scan starts at ``(0, 0)``, ends at ``curve_types.exit_point`` and
    visits every cell exactly once, each cell being a unit step away from the
    previous one. A zero side gives an empty scan. ``transform`` maps the scan
    into another coordinate space; the tiled scan uses it to place each tile.
    ``curve_type`` scans the grid between other corners.
    """

    def __init__(self, width, height, transform=IDENTITY, curve_type=None):
        self.width = width
        self.height = height
        self._remaining = width * height if width > 0 and height > 0 else 0
        self._stack = []
        self.max_depth = 0
        if self._remaining:
            if curve_type is None:
                curve_type = root_curve_type(width, height)
            self._push(width, height, curve_type, transform)

    def _push(self, width, height, curve_type, transform):
        frame = Frame(width, height, curve_type, transform)
        frame.split, frame.children = plan(width, height, curve_type)
        self._stack.append(frame)
        if len(self._stack) > self.max_depth:
            self.max_depth = len(self._stack)

    @property
    def depth(self):
        return len(self._stack)

    @property
    def remaining(self):
        return self._remaining

    def __len__(self):
        return self._remaining

    def __iter__(self):
        return self

    def __next__(self):
        stack = self._stack
        while stack:
            frame = stack[-1]
            if frame.split is Split.POINT:
                stack.pop()
                self._remaining -= 1
                return frame.transform.apply(0, 0)

            if frame.split is Split.BASIC:
                pattern = frame.children
                if frame.cursor == pattern.cells:
                    stack.pop()
                    continue
                point = pattern.point(frame.cursor)
                frame.cursor += 1
                self._remaining -= 1
                return frame.transform.apply(*point)

            if frame.cursor == len(frame.children):
                stack.pop()
                continue

            child = frame.children[frame.cursor]
            frame.cursor += 1
            self._push(
                child.width,
                child.height,
                child.curve_type,
                frame.transform.compose(child.transform),
            )
        raise StopIteration
