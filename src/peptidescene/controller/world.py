"""
Description World
=================
Translates a textual description of a world (peptide sequences plus a
cross-link string) into primitives that are rendered and simulated by a
scene backend.

Why is this class needed?
-------------------------
It is the single entry point a calling application talks to. It owns the
chain registry and the list of every ball created so far, and wires the
layout engine and the cross-link resolver to the same scene.

Usage:
    world = DescWorld(scene)
    world.add_peptide("A", "ACDEFGHIK", Point(0, 0, 0))
    world.add_peptide("B", "KLMNP", Point(0, 10, 0))
    report = world.add_cross_links("A:C2-B:K1")
"""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union, TYPE_CHECKING

import numpy as np

from peptidescene.config import DEFAULT_GEOMETRY, GeometryConfig
from peptidescene.controller.crosslinks import CrossLinkReport, CrossLinkResolver
from peptidescene.controller.layout import ChainLayoutEngine
from peptidescene.model.geometry_primitives import Point
from peptidescene.model.primitives import Ball
from peptidescene.model.registry import Chain, ChainRegistry, DuplicatePolicy

if TYPE_CHECKING:
    import numpy.typing as npt
    from peptidescene.view.scene import SceneInterface

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float], "npt.NDArray[np.float64]"]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    return Point.from_array(np.asarray(value, dtype=np.float64).ravel())


class DescWorld:
    def __init__(
        self,
        scene: SceneInterface,
        config: GeometryConfig = DEFAULT_GEOMETRY,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REPLACE,
    ) -> None:
        self.scene = scene
        self.config = config
        self._registry = ChainRegistry(policy=duplicate_policy)
        self._balls: List[Ball] = []

        self._layout = ChainLayoutEngine(self._registry, scene, config, self._balls)
        self._resolver = CrossLinkResolver(self._registry, scene, config, self._balls)

    @property
    def chains(self) -> ChainRegistry:
        return self._registry

    @property
    def balls(self) -> Tuple[Ball, ...]:
        return tuple(self._balls)

    def add_peptide(self, name: str, sequence: str, start_pos: PointLike) -> Chain:
        """Lay out `sequence` as chain `name`, first residue centred on `start_pos`."""
        return self._layout.build_chain(name, sequence, as_point(start_pos))

    def add_cross_links(self, spec: str) -> CrossLinkReport:
        """Join residues named in `spec` (e.g. ``"A:C14-B:7;A:K3-A:E9"``)."""
        return self._resolver.resolve(spec)
