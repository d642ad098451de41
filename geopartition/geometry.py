from typing import NamedTuple, Sequence, Tuple, Union


class Coordinate(NamedTuple):
    """A 2D point. For geographic boxes x is the longitude and y the latitude."""

    x: float
    y: float


# Two opposing corners, kept in the order the caller gave them
BoundingBox = Tuple[Coordinate, Coordinate]


def as_coordinate(value: Union[Coordinate, Sequence[float]]) -> Coordinate:
    x, y = value
    return Coordinate(float(x), float(y))
