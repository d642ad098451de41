from geopartition.geometry import BoundingBox, Coordinate
from geopartition.partitioners.errors import (
    InternalInconsistencyError,
    InvalidArgumentError,
    PartitionError,
    UnsupportedPartitionCountError,
)
from geopartition.partitioners.partitioner import Partitioner
from geopartition.partitioners.geo import (
    GeoPartitioner,
    find_partition,
    grid_shape,
    is_power_of_two,
    is_square_number,
    partition,
    partition_all,
)


def is_in_partition(point: Coordinate, partition: BoundingBox) -> bool:
    x, y = point
    (x1, y1), (x2, y2) = partition
    return min(x1, x2) <= x <= max(x1, x2) and min(y1, y2) <= y <= max(y1, y2)
