import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib.figure import Figure

from zhang_hilbert.core import HilbertScanCore
from zhang_hilbert.render import draw_curve, render_ascii, save_curve_figure


def test_render_2x2():
    assert render_ascii(list(HilbertScanCore(2, 2)), 2, 2) == [",-,", "| |"]


def test_render_line():
    assert render_ascii(list(HilbertScanCore(4, 1)), 4, 1) == ["-------"]
    assert render_ascii(list(HilbertScanCore(1, 3)), 1, 3) == ["|", "|", "|"]


@pytest.mark.parametrize("width, height", [(6, 7), (16, 9), (3, 3)])
def test_render_shape(width, height):
    lines = render_ascii(list(HilbertScanCore(width, height)), width, height)
    assert len(lines) == height
    assert all(len(line) == 2 * width - 1 for line in lines)
    # every cell is drawn
    assert all(line[2 * x] != " " for line in lines for x in range(width))


def test_render_empty():
    assert render_ascii([], 0, 4) == []


def test_draw_curve():
    fig = Figure()
    ax = draw_curve(fig.add_subplot(1, 1, 1), list(HilbertScanCore(4, 4)))
    (line,) = ax.get_lines()
    assert list(line.get_xdata())[:4] == [0, 1, 1, 0]
    assert list(line.get_ydata())[:4] == [0, 0, 1, 1]


def test_save_curve_figure(tmp_path):
    path = tmp_path / "scan.png"
    out = save_curve_figure(list(HilbertScanCore(6, 7)), 6, 7, path, title="zhang")
    assert out == path
    assert path.exists() and path.stat().st_size > 0


def test_render_6x7():
    assert render_ascii(list(HilbertScanCore(6, 7)), 6, 7) == [
        ",---, ,---,",
        "'-, '-' ,-'",
        ",-' ,-, '-,",
        "'-, | '---'",
        ",-' '-----,",
        "'-, ,-----'",
        "--' '------",
    ]
