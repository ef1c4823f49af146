"""
Configuration & Geometry Constants
==================================
This module serves as the central registry for asset paths and the fixed
geometric constants used when laying out chains.

Why is this file needed?
------------------------
1. Consistency: every residue, socket and ball is sized from the same set of
   radii/lengths, so the layout arithmetic and the renderer agree.
2. Override: a world can be constructed from a JSON file instead of the
   built-in defaults (e.g. to scale the scene up for presentation).

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_GEOMETRY_PATH (str): Absolute path to the default geometry file.
    DEFAULT_GEOMETRY (GeometryConfig): The built-in constants.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from importlib.resources import files
from typing import Any, Dict

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource shipped inside the package.
    Works for source checkouts as well as installed wheels.
    """
    return str(files("peptidescene").joinpath(relative_path))


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_GEOMETRY_PATH: str = os.path.join(ASSETS_PATH, "geometry_default.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

RESIDUE_RADIUS: float = 1.0
SOCKET_RADIUS: float = 0.25
SOCKET_LENGTH: float = 0.6
BALL_RADIUS: float = 0.3


@dataclass(frozen=True)
class GeometryConfig:
    """
    Fixed sizes of the scene primitives.
    Frozen: a world captures one instance for its whole lifetime.
    """
    residue_radius: float = RESIDUE_RADIUS
    socket_radius: float = SOCKET_RADIUS
    socket_length: float = SOCKET_LENGTH
    ball_radius: float = BALL_RADIUS

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value <= 0.0:
                raise ValueError(f"'{f.name}' must be positive, got {value}.")

    @property
    def residue_spacing(self) -> float:
        """Distance between the centres of two consecutive residues."""
        return (self.socket_length + self.residue_radius + self.ball_radius) * 2

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> GeometryConfig:
        known = {f.name for f in fields(GeometryConfig)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown geometry keys: {sorted(unknown)}")
        return GeometryConfig(**{key: float(val) for key, val in data.items()})


DEFAULT_GEOMETRY = GeometryConfig()


def load_geometry(path: str = DEFAULT_GEOMETRY_PATH) -> GeometryConfig:
    """
    Load a GeometryConfig from a JSON file.

    Args:
        path: Path to a JSON object with any subset of the GeometryConfig fields.

    Returns:
        The parsed configuration; missing keys keep their defaults.
    """
    logger.info(f"Loading geometry from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Geometry file '{path}' must contain a JSON object.")

    config = GeometryConfig.from_dict(data)
    logger.debug(f"Geometry loaded: {config}")
    return config
