import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    deadline=None,
    max_examples=60,
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.too_slow],
)
settings.load_profile("default")


def assert_valid_scan(points, width, height):
    """Every cell exactly once, each step a unit step."""
    assert len(points) == width * height
    assert len(set(points)) == len(points), "a cell was visited twice"
    for x, y in points:
        assert 0 <= x < width and 0 <= y < height, f"{(x, y)} is outside {width}x{height}"
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        assert abs(x0 - x1) + abs(y0 - y1) == 1, f"{(x0, y0)} -> {(x1, y1)} is not a unit step"


@pytest.fixture
def check_scan():
    return assert_valid_scan
