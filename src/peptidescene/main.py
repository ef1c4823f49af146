"""
Application Initialization
==========================
Builds a world from command-line sequences, resolves cross-links and shows
the result in a PyVista window.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the scene backend (PyVista).
3. Passes the scene into the DescWorld translator.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from peptidescene.config import DEFAULT_GEOMETRY, load_geometry
from peptidescene.controller.world import DescWorld
from peptidescene.logging_config import setup_logging
from peptidescene.model.geometry_primitives import Point

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peptidescene",
        description="Lay out peptide chains and cross-links as 3D primitives.",
    )
    parser.add_argument("sequences", nargs="+", help="One sequence per chain; chains are named P1, P2, ...")
    parser.add_argument("-x", "--crosslinks", default="", help='Cross-link spec, e.g. "P1:C2-P2:C5"')
    parser.add_argument("--spacing", type=float, default=6.0, help="Y distance between chains")
    parser.add_argument("--geometry", default=None, help="JSON file overriding the geometry constants")
    parser.add_argument("--no-show", action="store_true", help="Do not open the PyVista window")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Scene backend; imported here so pyvista loads only when rendering
    from peptidescene.view.pyvista_scene import PyVistaScene
    scene = PyVistaScene()

    # 3. Translator
    config = load_geometry(args.geometry) if args.geometry else DEFAULT_GEOMETRY
    world = DescWorld(scene, config=config)

    for i, sequence in enumerate(args.sequences):
        world.add_peptide(f"P{i + 1}", sequence, Point(0.0, args.spacing * i, 0.0))

    if args.crosslinks:
        report = world.add_cross_links(args.crosslinks)
        for skipped in report.skipped:
            logger.warning(f"Skipped '{skipped.text}': {skipped.reason} ({skipped.detail})")
        for failed in report.failed:
            logger.error(f"Failed '{failed.text}': {failed.error}")

    if not args.no_show:
        scene.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
