"""
Zone Auto-Layout - Command Line Entry Point
===========================================
Load -> Lay out -> Report

Usage:
    # Lay out a world file, seed chosen automatically
    zone-layout world/30.json

    # Force the start room and write the result to a file
    zone-layout world/30.json --start-room 3001 --output layout.json

    # Legacy fixed-spacing layout without reverse-edge inference
    zone-layout request.json --classic

Output is the editor JSON contract: positions, overlaps, quality and
oneWayExits.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from zone_layout.core.config import LayoutConfig, SPACING_FIXED
from zone_layout.data.world_loader import load_rooms
from zone_layout.pipeline.auto_layout import AutoLayoutPipeline

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> LayoutConfig:
    """Layout configuration from parsed command line arguments."""
    config = LayoutConfig.classic() if args.classic else LayoutConfig()
    if args.spacing is not None:
        config = replace(config, spacing_mode=SPACING_FIXED, fixed_spacing=args.spacing)
    if args.spawn_room is not None:
        config = replace(config, spawn_room_id=args.spawn_room)
    if args.no_reverse_inference:
        config = replace(config, infer_reverse_edges=False)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='zone-layout',
        description='Zone Auto-Layout - assign grid coordinates to rooms by following exits'
    )

    parser.add_argument(
        'input',
        help='Zone JSON file (world file or layout request)'
    )
    parser.add_argument(
        '--start-room', '-s', type=int,
        help='Room to place at the origin'
    )
    parser.add_argument(
        '--classic', action='store_true',
        help='Legacy layout: 1-unit spacing, declared exits only'
    )
    parser.add_argument(
        '--spacing', type=int,
        help='Fixed grid spacing (overrides size-based spacing)'
    )
    parser.add_argument(
        '--spawn-room', type=int,
        help='Spawn room id preferred as the origin (default: 3001)'
    )
    parser.add_argument(
        '--no-reverse-inference', action='store_true',
        help='Do not add reverse connections for one-directional exits'
    )
    parser.add_argument(
        '--output', '-o', type=str,
        help='Write JSON here instead of stdout'
    )
    parser.add_argument(
        '--indent', type=int, default=2,
        help='JSON indent (default: 2)'
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '--verbose', '-v', action='store_true',
        help='Log per-room placement diagnostics'
    )
    verbosity.add_argument(
        '--quiet', '-q', action='store_true',
        help='Only log errors'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.spacing is not None and args.spacing < 1:
        parser.error("--spacing must be >= 1")

    try:
        request = load_rooms(args.input, start_room_id=args.start_room)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load {args.input}: {e}")
        return 1

    try:
        result = AutoLayoutPipeline(build_config(args)).run_request(request)
    except ValueError as e:
        logger.error(f"Could not lay out {args.input}: {e}")
        return 1

    logger.info(
        f"Laid out {len(result.positions)} rooms from start room {result.start_room_id} "
        f"(spacing {result.spacing}, quality {result.quality:.2f}, "
        f"{len(result.overlaps)} overlaps, {len(result.one_way_exits)} one-way exits)"
    )

    payload = json.dumps(result.to_dict(), indent=args.indent)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(payload + '\n')
        logger.info(f"Wrote layout to {args.output}")
    else:
        print(payload)
    return 0


if __name__ == '__main__':
    sys.exit(main())
