import logging
import math
from typing import Optional, Tuple

import numpy as np

from geopartition.geometry import BoundingBox, Coordinate, as_coordinate
from geopartition.partitioners.errors import (
    InternalInconsistencyError,
    InvalidArgumentError,
    PartitionError,
    UnsupportedPartitionCountError,
)
from geopartition.partitioners.partitioner import Partitioner, PointLike

logger = logging.getLogger(__name__)


def is_square_number(number: int) -> bool:
    return number > 0 and math.isqrt(number) ** 2 == number


def is_power_of_two(number: int) -> bool:
    return number > 0 and (number & -number) == number


class GeoPartitioner(Partitioner):
    """Splits a bounding box into equal sized partitions.

    Supported partition counts are 1, 2, square numbers (4, 9, 16, ...) and
    powers of two. The corners may be given as SW/NE or NW/SE; they are used
    as supplied, so a reversed axis produces partitions numbered in mirrored
    order.
    """

    def grid_shape(self, num_partitions: int, corner1: Optional[PointLike] = None,
                   corner2: Optional[PointLike] = None) -> Tuple[int, int]:
        """Number of (columns, rows) used for ``num_partitions``.

        For two partitions the split axis depends on the box. Without corners
        the split along x, (2, 1), is reported.
        """
        c1 = as_coordinate(corner1) if corner1 is not None else None
        c2 = as_coordinate(corner2) if corner2 is not None else None
        if num_partitions < 1:
            raise InvalidArgumentError(
                f"Number of partitions is less than 1. numPartitions: {num_partitions}",
                corner1=c1, corner2=c2, num_partitions=num_partitions)
        if num_partitions == 1:
            return 1, 1
        if num_partitions == 2:
            if c1 is not None and c2 is not None:
                (x1, y1), (x2, y2) = c1, c2
                if x2 - x1 < y2 - y1:
                    return 1, 2
            return 2, 1
        if is_square_number(num_partitions):
            split = self._square_split(num_partitions)
            return split, split
        if is_power_of_two(num_partitions):
            split_x, split_y, _ = self._power_of_two_split(num_partitions)
            return split_x, split_y
        raise UnsupportedPartitionCountError(
            f"Number of partitions is not supported: {num_partitions}",
            corner1=c1, corner2=c2, num_partitions=num_partitions)

    def partition(self, corner1: PointLike, corner2: PointLike,
                  num_partitions: int, partition_index: int) -> BoundingBox:
        c1 = as_coordinate(corner1)
        c2 = as_coordinate(corner2)
        context = dict(corner1=c1, corner2=c2, num_partitions=num_partitions, partition_index=partition_index)

        if num_partitions < 1:
            raise InvalidArgumentError(
                f"Number of partitions is less than 1. numPartitions: {num_partitions}", **context)
        if partition_index < 0:
            raise InvalidArgumentError(
                f"Partition index is less than 0. partitionIndex: {partition_index}", **context)
        if partition_index >= num_partitions:
            raise InvalidArgumentError(
                f"Partition index {partition_index} is not below the number of partitions {num_partitions}",
                **context)

        x1, y1 = c1
        x2, y2 = c2
        width = x2 - x1
        height = y2 - y1

        position_x, position_y = 0, 0

        if num_partitions == 1:
            split_x, split_y = 1, 1
        elif num_partitions == 2:
            # Split across the longer side so the shared edge is as short as possible
            if width >= height:
                split_x, split_y = 2, 1
                position_x = partition_index
            else:
                split_x, split_y = 1, 2
                position_y = partition_index
        elif is_square_number(num_partitions):
            split = self._square_split(num_partitions)
            if split * split != num_partitions:
                logger.warning(
                    "A %dx%d grid does not tile %d partitions; partitions %d and above fall outside the box",
                    split, split, num_partitions, split * split)
            split_x, split_y = split, split
            position_x = partition_index % split
            position_y = partition_index // split
        elif is_power_of_two(num_partitions):
            split_x, split_y, power = self._power_of_two_split(num_partitions)
            if split_x * split_y != num_partitions:
                raise InternalInconsistencyError(
                    "Power of two partition calculation went wrong. "
                    + PartitionError.diagnostics(c1, c2, num_partitions, partition_index)
                    + f"; splitX = {split_x} = 2 ^ {power}, splitY = {split_y} = 2 ^ {power - 1}"
                    + f", splitX * splitY = {split_x * split_y}",
                    **context)
            position_x = partition_index % split_x
            position_y = (partition_index - position_x) // split_x
        else:
            raise UnsupportedPartitionCountError(
                "Number of partitions is not supported. "
                + PartitionError.diagnostics(c1, c2, num_partitions, partition_index),
                **context)

        logger.debug("Partition %d/%d at grid position (%d, %d)",
                     partition_index, num_partitions, position_x, position_y)

        try:
            size_x, size_y = width / split_x, height / split_y
            return (
                Coordinate(x1 + position_x * size_x, y1 + position_y * size_y),
                Coordinate(x1 + (position_x + 1) * size_x, y1 + (position_y + 1) * size_y),
            )
        except OverflowError as err:
            # Splits or positions past the float range
            raise InvalidArgumentError(
                "Number of partitions is too large for float coordinates. "
                + PartitionError.diagnostics(c1, c2, num_partitions, partition_index),
                **context) from err

    @staticmethod
    def _square_split(num_partitions: int) -> int:
        # floor(log2(n)), not sqrt(n): only equal to the grid side for 4, 9 and 16
        return num_partitions.bit_length() - 1

    @staticmethod
    def _power_of_two_split(num_partitions: int) -> Tuple[int, int, int]:
        # split_x is the first power of two above sqrt(n), split_y the one below it.
        # E.g. 128: sqrt = 11.3, so 16 columns and 8 rows.
        # ceil(log2(sqrt(2**k))) in integers, so any int size works
        exponent = num_partitions.bit_length() - 1
        power = (exponent + 1) // 2
        return 2 ** power, 2 ** (power - 1), power


_default_partitioner = GeoPartitioner()


def partition(corner1: PointLike, corner2: PointLike, num_partitions: int, partition_index: int) -> BoundingBox:
    return _default_partitioner.partition(corner1, corner2, num_partitions, partition_index)


def partition_all(corner1: PointLike, corner2: PointLike, num_partitions: int) -> np.ndarray:
    return _default_partitioner.partition_all(corner1, corner2, num_partitions)


def find_partition(point: PointLike, corner1: PointLike, corner2: PointLike, num_partitions: int) -> Optional[int]:
    return _default_partitioner.find_partition(point, corner1, corner2, num_partitions)


def grid_shape(num_partitions: int, corner1: Optional[PointLike] = None,
               corner2: Optional[PointLike] = None) -> Tuple[int, int]:
    return _default_partitioner.grid_shape(num_partitions, corner1, corner2)
