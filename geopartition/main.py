import argparse
import logging
import sys

from geopartition.geometry import Coordinate
from geopartition.partitioners import GeoPartitioner, PartitionError
from geopartition.plot_utils import get_partition_plot


def setup_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def format_box(ix, box) -> str:
    (x1, y1), (x2, y2) = box
    return f"{ix}: ({x1}, {y1}) ({x2}, {y2})"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Split a bounding box into equal sized partitions')
    parser.add_argument("x1", type=float, help="x of the first corner")
    parser.add_argument("y1", type=float, help="y of the first corner")
    parser.add_argument("x2", type=float, help="x of the opposing corner")
    parser.add_argument("y2", type=float, help="y of the opposing corner")
    parser.add_argument("--n_partitions", type=int, help="Number of partitions", required=False, default=16)
    parser.add_argument("--index", type=int, help="Only print the partition with this index (--point and --plot still use all partitions)", required=False)
    parser.add_argument("--point", type=float, nargs=2, metavar=("X", "Y"),
                        help="Print the index of the partition containing this point", required=False)
    parser.add_argument("--plot", action="store_true", help="Show the partitions in a plot")
    parser.add_argument("--log-level", default="warning", help="Logging level (debug, info, warning, ...)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    corner1 = Coordinate(args.x1, args.y1)
    corner2 = Coordinate(args.x2, args.y2)
    partitioner = GeoPartitioner()

    try:
        if args.index is not None:
            box = partitioner.partition(corner1, corner2, args.n_partitions, args.index)
            print(format_box(args.index, box))
            boxes = partitioner.partition_all(corner1, corner2, args.n_partitions)
        else:
            boxes = partitioner.partition_all(corner1, corner2, args.n_partitions)
            columns, rows = partitioner.grid_shape(args.n_partitions, corner1, corner2)
            print(f'Created {args.n_partitions} partitions ({columns}x{rows} grid):')
            for ix, box in enumerate(boxes):
                print(format_box(ix, box))

        if args.point is not None:
            found = partitioner.find_partition(args.point, corner1, corner2, args.n_partitions)
            if found is None:
                print(f'Point {tuple(args.point)} is outside the box')
            else:
                print(f'Point {tuple(args.point)} is in partition {found}')
    except PartitionError as err:
        print(f'error: {err}', file=sys.stderr)
        return 2

    if args.plot:
        get_partition_plot(boxes).show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
