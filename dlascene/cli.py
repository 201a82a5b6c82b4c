"""dla-scene: export a finished DLA aggregate as povray / javascript / csv scenes."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from dlascene.aggregate.model import describe_aggregate
from dlascene.aggregate.parser import load_aggregate
from dlascene.config import settings
from dlascene.engine.config import SceneConfig
from dlascene.errors import SceneError
from dlascene.export import Exporter, get_registry
from dlascene.export.report import print_report


def build_parser() -> argparse.ArgumentParser:
    names = sorted({n for spec in get_registry().all() for n in (spec.id, *spec.aliases)})
    parser = argparse.ArgumentParser(
        prog="dla-scene",
        description="Save a 3D DLA aggregate as a scene ready to be rendered, using povray for example.",
    )
    parser.add_argument("input", help="CSV file with one x,y,z cell per line")
    parser.add_argument(
        "-s",
        "--scene-format",
        dest="scene_formats",
        action="append",
        metavar="FORMAT",
        help=f"Output format, repeatable ({', '.join(names)}). Default: {', '.join(settings.scene_formats)}",
    )
    parser.add_argument("-o", "--output", default=settings.output, help="Output base filename (default: %(default)s)")
    parser.add_argument(
        "--padding",
        type=int,
        default=settings.padding,
        help="Bounding box padding around the cells (default: %(default)s)",
    )
    parser.add_argument(
        "--gradients",
        type=int,
        default=settings.gradients,
        help="Color gradient groups for the povray scene (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.gradients < 1:
        parser.error("--gradients must be >= 1")
    if args.padding < 0:
        parser.error("--padding must be >= 0")

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    formats = args.scene_formats or settings.scene_formats
    exporter = Exporter(config=SceneConfig(gradients=args.gradients), observer=print_report)

    try:
        # Fail on unknown formats before reading the input
        exporter.registry.resolve(formats)

        start = time.perf_counter()
        aggregate = load_aggregate(args.input, padding=args.padding)
        print(describe_aggregate(aggregate, time.perf_counter() - start))

        exporter.run(aggregate, args.output, formats)
    except (SceneError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
