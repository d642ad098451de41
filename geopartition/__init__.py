"""Equal-area bounding box partitioning."""

from geopartition.geometry import BoundingBox, Coordinate
from geopartition.partitioners import (
    GeoPartitioner,
    InternalInconsistencyError,
    InvalidArgumentError,
    PartitionError,
    UnsupportedPartitionCountError,
    find_partition,
    partition,
    partition_all,
)

__version__ = "0.1.0"
__all__ = [
    "BoundingBox",
    "Coordinate",
    "GeoPartitioner",
    "InternalInconsistencyError",
    "InvalidArgumentError",
    "PartitionError",
    "UnsupportedPartitionCountError",
    "find_partition",
    "partition",
    "partition_all",
]
