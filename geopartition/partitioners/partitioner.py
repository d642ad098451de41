import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from geopartition.geometry import BoundingBox, Coordinate, as_coordinate
from geopartition.partitioners.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

PointLike = Union[Coordinate, Sequence[float]]


class Partitioner:
    def partition(self, corner1: PointLike, corner2: PointLike,
                  num_partitions: int, partition_index: int) -> BoundingBox:
        # Returns ((x1, y1), (x2, y2)) with the same corner orientation as the input box
        raise NotImplementedError

    def grid_shape(self, num_partitions: int, corner1: Optional[PointLike] = None,
                   corner2: Optional[PointLike] = None) -> Tuple[int, int]:
        raise NotImplementedError

    def partition_all(self, corner1: PointLike, corner2: PointLike, num_partitions: int) -> np.ndarray:
        """Every partition of the box in index order, as an array of shape (num_partitions, 2, 2)."""
        if num_partitions < 1:
            raise InvalidArgumentError(
                f"Number of partitions is less than 1. numPartitions: {num_partitions}",
                corner1=as_coordinate(corner1), corner2=as_coordinate(corner2),
                num_partitions=num_partitions)
        boxes = [self.partition(corner1, corner2, num_partitions, ix) for ix in range(num_partitions)]
        return np.array(boxes, dtype=float)

    def find_partition(self, point: PointLike, corner1: PointLike, corner2: PointLike,
                       num_partitions: int) -> Optional[int]:
        """Index of the partition containing ``point``, or None when it is outside all of them.

        Bounds are closed, so a point on an edge shared by two partitions
        belongs to the one with the lower index.
        """
        x, y = as_coordinate(point)
        boxes = self.partition_all(corner1, corner2, num_partitions)
        lower = boxes.min(axis=1)
        upper = boxes.max(axis=1)
        inside = (lower[:, 0] <= x) & (x <= upper[:, 0]) & (lower[:, 1] <= y) & (y <= upper[:, 1])
        hits = np.flatnonzero(inside)
        if hits.size == 0:
            logger.debug("Point %s is outside all %d partitions", (x, y), num_partitions)
            return None
        return int(hits[0])
