# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Drawing scans for inspection: ASCII art and matplotlib figures.

The ASCII canvas is ``height`` rows of ``2 * width - 1`` characters with +y
pointing up, so a 6x7 scan prints as

    ,---, ,---,
    '-, '-' ,-'
    ...
"""

import numpy as np
from matplotlib.figure import Figure

POS_X, NEG_X, POS_Y, NEG_Y = "+x", "-x", "+y", "-y"


def render_ascii(points, width, height):
    """Return the lines of an ASCII drawing of ``points``."""
    if width == 0 or height == 0:
        return []
    # canvas rows run top to bottom: +y on the canvas is down
    grid = np.full((height, 2 * width - 1), " ", dtype="<U1")
    prev = None
    last_dir = None
    for x, y in points:
        x, y = 2 * x, height - 1 - y
        if prev is not None:
            ox, oy = prev
            if ox != x:
                assert oy == y, f"diagonal step {prev} -> {(x, y)}"
                step = 1 if x > ox else -1
                if last_dir == NEG_Y:
                    grid[oy, ox] = ","
                elif last_dir == POS_Y:
                    grid[oy, ox] = "'"
                else:
                    grid[oy, ox] = "-"
                last_dir = POS_X if step > 0 else NEG_X
                while ox != x:
                    ox += step
                    grid[oy, ox] = "-"
            elif oy != y:
                step = 1 if y > oy else -1
                if last_dir in (None, POS_Y, NEG_Y):
                    grid[oy, ox] = "|"
                else:
                    grid[oy, ox] = "," if step > 0 else "'"
                last_dir = POS_Y if step > 0 else NEG_Y
                while oy != y:
                    oy += step
                    grid[oy, ox] = "|"
        prev = (x, y)
    return ["".join(row) for row in grid]


def draw_curve(ax, points, **kwargs):
    points = np.asarray(points).reshape(-1, 2)
    ax.plot(points[:, 0], points[:, 1], kwargs.pop("fmt", ".-"), **kwargs)
    ax.set_aspect("equal")
    return ax


def save_curve_figure(points, width, height, path, title=None, scale=0.25):
    """Draw ``points`` into a png (or any format matplotlib infers from ``path``)."""
    fig = Figure(figsize=(max(width * scale, 2), max(height * scale, 2)))
    ax = fig.add_subplot(1, 1, 1)
    draw_curve(ax, points)
    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(-0.5, height - 0.5)
    if title is not None:
        ax.set_title(title)
    ax.axis("off")
    fig.savefig(path, bbox_inches="tight")
    return path
