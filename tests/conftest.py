import pytest

from peptidescene.config import DEFAULT_GEOMETRY
from peptidescene.controller.world import DescWorld
from peptidescene.model.geometry_primitives import Point
from peptidescene.view.scene import RecordingScene


@pytest.fixture
def scene() -> RecordingScene:
    return RecordingScene()


@pytest.fixture
def world(scene: RecordingScene) -> DescWorld:
    return DescWorld(scene)


@pytest.fixture
def origin() -> Point:
    return Point.origin()


@pytest.fixture
def spacing() -> float:
    return DEFAULT_GEOMETRY.residue_spacing
