"""Command line entry point: ``python -m slime_sprite fire --grade epic``."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from slime_sprite.config import RenderConfig
from slime_sprite.renderer.sprite import SpriteRenderer
from slime_sprite.types import Element, Grade, Personality

logger = logging.getLogger("slime_sprite")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slime-sprite",
        description="Render a procedural slime sprite as SVG.",
    )
    parser.add_argument(
        "element",
        help=f"Element tag ({', '.join(e.value for e in Element)}). Unknown tags render as water.",
    )
    parser.add_argument(
        "--personality",
        default=Personality.GENTLE.value,
        help=f"Personality tag ({', '.join(p.value for p in Personality)}).",
    )
    parser.add_argument(
        "--grade",
        default=Grade.COMMON.value,
        help=f"Grade tag ({', '.join(g.value for g in Grade)}).",
    )
    parser.add_argument("--species", type=int, default=0, help="Species id.")
    parser.add_argument("--icon", action="store_true", help="Render the reduced icon.")
    parser.add_argument("--size", type=int, help="Output size override in pixels.")
    parser.add_argument(
        "--accessory",
        action="append",
        default=[],
        metavar="ID",
        help="Registered accessory overlay id; may be repeated.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write raw SVG instead of a data URI.",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write to a file instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RenderConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.size is not None and args.size <= 0:
        parser.error("--size must be positive")
    if args.raw:
        config = RenderConfig(config.full_size, config.icon_size, data_uri=False)

    renderer = SpriteRenderer(config)
    if args.icon:
        output = renderer.icon(
            args.element,
            grade=args.grade,
            accessory_overlays=args.accessory,
            species_id=args.species,
            size=args.size,
        )
    else:
        if args.size is not None:
            renderer = SpriteRenderer(
                RenderConfig(args.size, config.icon_size, config.data_uri)
            )
        output = renderer.full(
            args.element,
            args.personality,
            grade=args.grade,
            species_id=args.species,
            accessory_overlays=args.accessory,
        )

    if args.output is not None:
        args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
