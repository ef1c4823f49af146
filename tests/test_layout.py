import pytest

from peptidescene.config import DEFAULT_GEOMETRY as G
from peptidescene.model.geometry_primitives import Point, UNIT_Y


@pytest.mark.parametrize("sequence", ["A", "AG", "ACDEFGHIKLMNPQRSTVWY"])
def test_counts(world, scene, origin, sequence):
    n = len(sequence)
    chain = world.add_peptide("P1", sequence, origin)

    assert len(chain) == n
    assert scene.counts() == {"residues": n, "sockets": 2 * (n - 1), "balls": n - 1}
    assert len(world.balls) == n - 1
    assert chain.sequence == sequence


def test_empty_sequence_is_degenerate_chain(world, scene, origin):
    chain = world.add_peptide("P1", "", origin)

    assert len(chain) == 0
    assert world.chains.get("P1") is chain
    assert scene.counts() == {"residues": 0, "sockets": 0, "balls": 0}


def test_residues_spaced_along_x(world, spacing):
    start = Point(2.0, -1.0, 4.0)
    chain = world.add_peptide("P1", "KLMNP", start)

    xs = [r.position.x for r in chain]
    assert xs == pytest.approx([start.x + spacing * i for i in range(5)])
    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert all(r.position.y == start.y and r.position.z == start.z for r in chain)
    assert all(r.radius == G.residue_radius for r in chain)


def test_two_residue_positions_differ_only_in_x(world, origin, spacing):
    world.add_peptide("P1", "AC", origin)
    first = world.chains.residue_at("P1", 1)
    second = world.chains.residue_at("P1", 2)

    assert second.position.x - first.position.x == pytest.approx(spacing)
    assert (second.position.y, second.position.z) == (first.position.y, first.position.z)


def test_connection_geometry(world, scene, origin):
    world.add_peptide("P1", "AG", origin)
    first, second = scene.residues
    socket1, socket2 = scene.sockets
    (ball,) = scene.balls

    assert socket1.residue_id == first.id
    assert socket2.residue_id == second.id
    assert (ball.socket1_id, ball.socket2_id) == (socket1.id, socket2.id)

    assert socket1.position.x == pytest.approx(G.residue_radius + G.socket_length / 2)
    assert socket2.position.x == pytest.approx(socket1.position.x + G.socket_length + 2 * G.ball_radius)
    # sockets symmetric about the ball, ball halfway between residues
    midpoint = (first.position.x + second.position.x) / 2
    assert ball.position.x == pytest.approx(midpoint)
    assert midpoint - socket1.position.x == pytest.approx(socket2.position.x - midpoint)

    # connectors lie along the chain axis
    for socket in (socket1, socket2):
        direction = socket.transform.apply_to_vector(UNIT_Y)
        assert abs(direction.x) == pytest.approx(1.0)
        assert (socket.radius, socket.length) == (G.socket_radius, G.socket_length)


def test_emission_order(world, scene, origin):
    calls = []
    scene.add_residue = lambda r: calls.append("residue")
    scene.add_socket = lambda s: calls.append("socket")
    scene.add_ball = lambda b: calls.append("ball")

    world.add_peptide("P1", "AGC", origin)

    assert calls == ["residue", "residue", "socket", "socket", "ball", "residue", "socket", "socket", "ball"]


def test_accepts_sequence_of_symbols_and_array_start(world):
    chain = world.add_peptide("P1", ["K", "L"], (1.0, 2.0, 3.0))
    assert chain.residue_at(1).position == Point(1.0, 2.0, 3.0)


@pytest.mark.parametrize("name", ["", None])
def test_rejects_empty_name(world, origin, name):
    with pytest.raises(ValueError):
        world.add_peptide(name, "AG", origin)


def test_rejects_multi_character_symbols_before_registering(world, scene, origin):
    with pytest.raises(ValueError):
        world.add_peptide("P1", ["A", "Gly"], origin)
    assert "P1" not in world.chains
    assert scene.counts()["residues"] == 0


def test_same_name_replaces_chain(world, origin):
    world.add_peptide("P1", "AG", origin)
    world.add_peptide("P1", "KLM", origin)
    assert world.chains.get("P1").sequence == "KLM"
