"""
PyVista Scene Backend
=====================
Turns the translator's primitives into PyVista meshes:
residues and balls become spheres, sockets become cylinders laid along the
socket transform's Y axis.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pyvista as pv

from peptidescene.model.geometry_primitives import UNIT_Y
from peptidescene.model.primitives import Residue, Socket, Ball

logger = logging.getLogger(__name__)

# Residue colours grouped by side-chain character
SYMBOL_COLORS: Dict[str, str] = {
    **dict.fromkeys("AVLIMFWPG", "khaki"),      # hydrophobic
    **dict.fromkeys("STNQYC", "lightgreen"),    # polar
    **dict.fromkeys("KRH", "royalblue"),        # basic
    **dict.fromkeys("DE", "tomato"),            # acidic
}
DEFAULT_RESIDUE_COLOR = "lightgray"
SOCKET_COLOR = "silver"
BALL_COLOR = "dimgray"


class PyVistaScene:
    def __init__(self, resolution: int = 24) -> None:
        self.resolution = resolution
        self.residue_meshes: Dict[str, Tuple[pv.PolyData, str]] = {}
        self.socket_meshes: Dict[str, pv.PolyData] = {}
        self.ball_meshes: Dict[str, pv.PolyData] = {}

    # --- SceneInterface ---
    def add_residue(self, residue: Residue) -> None:
        mesh = pv.Sphere(
            radius=residue.radius,
            center=residue.position.to_array(),
            theta_resolution=self.resolution,
            phi_resolution=self.resolution,
        )
        self.residue_meshes[residue.id] = (mesh, residue.symbol)

    def add_socket(self, socket: Socket) -> None:
        direction = socket.transform.apply_to_vector(UNIT_Y)
        mesh = pv.Cylinder(
            center=socket.position.to_array(),
            direction=direction.to_array(),
            radius=socket.radius,
            height=socket.length,
            resolution=self.resolution,
        )
        self.socket_meshes[socket.id] = mesh

    def add_ball(self, ball: Ball) -> None:
        mesh = pv.Sphere(
            radius=ball.radius,
            center=ball.position.to_array(),
            theta_resolution=self.resolution,
            phi_resolution=self.resolution,
        )
        self.ball_meshes[ball.id] = mesh

    # --- Rendering ---
    def to_multiblock(self) -> pv.MultiBlock:
        blocks = pv.MultiBlock()
        for rid, (mesh, _) in self.residue_meshes.items():
            blocks.append(mesh, f"residue_{rid}")
        for sid, mesh in self.socket_meshes.items():
            blocks.append(mesh, f"socket_{sid}")
        for bid, mesh in self.ball_meshes.items():
            blocks.append(mesh, f"ball_{bid}")
        return blocks

    def build_plotter(self, off_screen: bool = False, plotter: Optional[pv.Plotter] = None) -> pv.Plotter:
        plotter = plotter or pv.Plotter(off_screen=off_screen)
        for mesh, symbol in self.residue_meshes.values():
            plotter.add_mesh(mesh, color=SYMBOL_COLORS.get(symbol, DEFAULT_RESIDUE_COLOR), smooth_shading=True)
        for mesh in self.socket_meshes.values():
            plotter.add_mesh(mesh, color=SOCKET_COLOR)
        for mesh in self.ball_meshes.values():
            plotter.add_mesh(mesh, color=BALL_COLOR, smooth_shading=True)
        return plotter

    def show(self) -> None:
        logger.info(
            f"Showing scene: {len(self.residue_meshes)} residues, "
            f"{len(self.socket_meshes)} sockets, {len(self.ball_meshes)} balls."
        )
        plotter = self.build_plotter()
        plotter.show()
