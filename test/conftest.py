import pytest

from geopartition.geometry import Coordinate


@pytest.fixture
def square_box():
    return Coordinate(0.0, 0.0), Coordinate(4.0, 4.0)


@pytest.fixture
def offset_box():
    """A box away from the origin with non-integer extents."""
    return Coordinate(-3.0, 2.0), Coordinate(5.0, 7.5)
