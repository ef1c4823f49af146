"""Translate peptide sequences and cross-link annotations into scene primitives."""
from peptidescene.config import DEFAULT_GEOMETRY, GeometryConfig, load_geometry
from peptidescene.controller import (
    CrossLinkParseError,
    CrossLinkReport,
    DescWorld,
    SkipReason,
)
from peptidescene.model.geometry_primitives import Point, Transform, Vector
from peptidescene.model.primitives import Ball, Residue, Socket
from peptidescene.model.registry import Chain, ChainRegistry, DuplicateChainError, DuplicatePolicy
from peptidescene.view.scene import RecordingScene, SceneInterface

__all__ = [
    "Ball",
    "Chain",
    "ChainRegistry",
    "CrossLinkParseError",
    "CrossLinkReport",
    "DEFAULT_GEOMETRY",
    "DescWorld",
    "DuplicateChainError",
    "DuplicatePolicy",
    "GeometryConfig",
    "Point",
    "RecordingScene",
    "Residue",
    "SceneInterface",
    "SkipReason",
    "Socket",
    "Transform",
    "Vector",
    "load_geometry",
]
