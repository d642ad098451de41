from typing import Optional

from geopartition.geometry import Coordinate


class PartitionError(ValueError):
    """Base error for partition requests. Carries the inputs that caused it."""

    def __init__(
        self,
        message: str,
        corner1: Optional[Coordinate] = None,
        corner2: Optional[Coordinate] = None,
        num_partitions: Optional[int] = None,
        partition_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.corner1 = corner1
        self.corner2 = corner2
        self.num_partitions = num_partitions
        self.partition_index = partition_index

    @staticmethod
    def diagnostics(corner1, corner2, num_partitions, partition_index) -> str:
        return (
            f"Num partitions: {num_partitions}, partition index: {partition_index}, "
            f"C1: {tuple(corner1)}, C2: {tuple(corner2)}"
        )


class InvalidArgumentError(PartitionError):
    pass


class UnsupportedPartitionCountError(PartitionError):
    pass


class InternalInconsistencyError(PartitionError):
    pass
