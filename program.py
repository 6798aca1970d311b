import argparse
import logging
import os
import sys

from geometry import CoordinateKind
from graham_scan import CollinearityPolicy, GrahamScan
from point_io import (
    DEMO_POINTS,
    DISTRIBUTIONS,
    PointFormatError,
    generate_random_points,
    read_points,
    write_points,
)

logger = logging.getLogger("graham_hull")


def configure_logger(name, log_dir=None, level=logging.INFO):
    """Configure a logger to print to console and, optionally, save to a file."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(stream_handler)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, f'{name}.log'))
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Convex hull of 2-D points with Graham's scan")
    parser.add_argument("input", nargs="?", help="file with a point count followed by 'x y' lines")
    parser.add_argument("-o", "--output", help="write the hull to this file instead of stdout")
    parser.add_argument("--float", action="store_true", help="read floating point coordinates")
    parser.add_argument("--keep-collinear", action="store_true",
                        help="keep points lying on hull edges")
    parser.add_argument("--random", type=int, metavar="N", help="use N generated points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--plot", action="store_true", help="show the hull with matplotlib")
    parser.add_argument("--log-dir", help="also write the log to this directory")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def load_points(args, kind: CoordinateKind):
    if args.random is not None:
        logger.info("Generating %d %s points", args.random, args.distribution)
        return generate_random_points(args.random, args.distribution, seed=args.seed, kind=kind)
    if args.input is None:
        logger.info("No input given, using the demo dataset")
        return list(DEMO_POINTS)
    with open(args.input, 'r', encoding='utf-8') as f:
        return read_points(f, kind)


def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    for name in ("graham_hull", "graham_scan", "point_io"):
        configure_logger(name, args.log_dir, level)

    kind = CoordinateKind.FLOAT if args.float else CoordinateKind.INTEGER
    policy = (
        CollinearityPolicy.KEEP_ALL_ON_EDGES if args.keep_collinear
        else CollinearityPolicy.KEEP_EXTREME_ONLY
    )

    try:
        points = load_points(args, kind)
    except (PointFormatError, OSError) as e:
        logger.error("Failed to load points: %s", e)
        return 1

    builder = GrahamScan(policy=policy, kind=kind)
    builder.set_points(points)
    builder.build()
    hull = builder.data()
    logger.info(
        "Convex hull of %d %s points has %d vertices (%s)",
        len(points), builder.kind.value, builder.size(), builder.policy.name,
    )

    try:
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                write_points(f, hull)
        else:
            write_points(sys.stdout, hull)
    except OSError as e:
        logger.error("Failed to write hull: %s", e)
        return 1

    if args.plot:
        import matplotlib.pyplot as plt
        from visualization import plot_hull

        plot_hull(points, hull)
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
