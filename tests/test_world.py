import pytest

from peptidescene.config import GeometryConfig
from peptidescene.controller.world import DescWorld
from peptidescene.model.geometry_primitives import Point
from peptidescene.model.registry import DuplicateChainError, DuplicatePolicy
from peptidescene.view.scene import RecordingScene, SceneInterface


def test_recording_scene_satisfies_protocol(scene):
    assert isinstance(scene, SceneInterface)


def test_worlds_are_independent(origin):
    scene_a, scene_b = RecordingScene(), RecordingScene()
    world_a, world_b = DescWorld(scene_a), DescWorld(scene_b)

    world_a.add_peptide("P1", "AGC", origin)
    world_b.add_peptide("P1", "K", origin)

    assert len(world_a.balls) == 2
    assert len(world_b.balls) == 0
    assert world_b.chains.get("P1").sequence == "K"
    assert scene_b.counts() == {"residues": 1, "sockets": 0, "balls": 0}


def test_balls_view_is_a_snapshot(world, origin):
    world.add_peptide("P1", "AG", origin)
    balls = world.balls
    world.add_cross_links("P1:A1-P1:G2")

    assert len(balls) == 1
    assert len(world.balls) == 2


def test_reject_policy(origin):
    world = DescWorld(RecordingScene(), duplicate_policy=DuplicatePolicy.REJECT)
    world.add_peptide("P1", "AG", origin)
    with pytest.raises(DuplicateChainError):
        world.add_peptide("P1", "KL", origin)


def test_custom_geometry_changes_spacing(origin):
    config = GeometryConfig(residue_radius=2.0, socket_radius=0.5, socket_length=1.0, ball_radius=1.0)
    scene = RecordingScene()
    world = DescWorld(scene, config=config)
    world.add_peptide("P1", "AG", origin)

    assert scene.residues[1].position.x == pytest.approx(8.0)
    assert scene.balls[0].position.x == pytest.approx(4.0)
    assert scene.balls[0].radius == 1.0


def test_chains_from_multiple_calls_share_registry(world):
    world.add_peptide("A", "KLM", Point(0.0, 0.0, 0.0))
    world.add_peptide("B", "C", Point(0.0, 5.0, 0.0))

    assert world.chains.names() == ["A", "B"]
    assert world.add_cross_links("A:M3-B:C1").ok
