"""
Chain Layout Engine
===================
Lays a peptide chain out along the X axis and synthesizes the socket/ball
connection between every pair of consecutive residues.

Geometry along the chain (all distances measured on X):

    residue | socket1 | ball | socket2 | residue
       R        L       2B       L         R

so consecutive residue centres are 2 * (L + R + B) apart.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, TYPE_CHECKING

from peptidescene.config import GeometryConfig
from peptidescene.model.geometry_primitives import Point, Transform, UNIT_Z
from peptidescene.model.primitives import Residue, Socket, Ball
from peptidescene.model.registry import Chain, ChainRegistry
from peptidescene.utils import new_id

if TYPE_CHECKING:
    from peptidescene.view.scene import SceneInterface

logger = logging.getLogger(__name__)


class ChainLayoutEngine:
    def __init__(
        self,
        registry: ChainRegistry,
        scene: SceneInterface,
        config: GeometryConfig,
        balls: List[Ball],
    ) -> None:
        self.registry = registry
        self.scene = scene
        self.config = config
        # Shared with the owning world; every ball created here is appended
        self.balls = balls

    def build_chain(self, name: str, sequence: Iterable[str], start: Point) -> Chain:
        """
        Create, register and emit one chain.

        Args:
            name: Registry key for the chain. Must be non-empty.
            sequence: Monomer symbols, one character each (a plain string works).
            start: Centre of the first residue.

        Returns:
            The registered Chain.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Chain name must be a non-empty string.")

        symbols = list(sequence)
        for i, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"Symbol #{i + 1} of chain '{name}' must be a single character, got {symbol!r}.")

        chain = Chain(name=name)
        self.registry.register(chain)

        if not symbols:
            logger.info(f"Chain '{name}' has an empty sequence; nothing to lay out.")
            return chain

        prev_residue = None
        for i, symbol in enumerate(symbols):
            residue_x = start.x + self.config.residue_spacing * i
            residue = Residue(new_id(), symbol, self.config.residue_radius, start.with_x(residue_x))
            self.scene.add_residue(residue)
            chain.append(residue)

            if prev_residue is not None:
                self._connect(prev_residue, residue)

            prev_residue = residue

        logger.info(f"Built chain '{name}': {len(chain)} residues, {len(chain) - 1} joints.")
        return chain

    def _connect(self, prev_residue: Residue, residue: Residue) -> None:
        """Emit socket1, socket2 and the ball joining prev_residue to residue."""
        cfg = self.config
        origin = prev_residue.position
        # Cylinders are modelled along Y; lay them along the chain axis
        rotation = Transform.from_axis_angle(UNIT_Z, math.pi / 2)

        socket1_x = origin.x + cfg.residue_radius + cfg.socket_length / 2
        socket1 = Socket(
            new_id(), prev_residue.id, cfg.socket_radius, cfg.socket_length,
            Transform.from_translation(origin.with_x(socket1_x)) @ rotation,
        )
        self.scene.add_socket(socket1)

        socket2_x = socket1_x + cfg.socket_length + cfg.ball_radius * 2
        socket2 = Socket(
            new_id(), residue.id, cfg.socket_radius, cfg.socket_length,
            Transform.from_translation(origin.with_x(socket2_x)) @ rotation,
        )
        self.scene.add_socket(socket2)

        ball_x = socket1_x + cfg.socket_length / 2 + cfg.ball_radius
        ball = Ball(
            new_id(), socket1.id, socket2.id, cfg.ball_radius,
            Transform.from_translation(origin.with_x(ball_x)),
        )
        self.scene.add_ball(ball)
        self.balls.append(ball)
