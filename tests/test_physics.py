"""Tests for the world model and the acceleration evaluator."""

import numpy as np
import pytest
from solar_sim.physics.world import World
from solar_sim.physics.force_calculator import ForceCalculator, pair_force
from solar_sim.presets import SolarSystem


def two_body_world():
    positions = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    velocities = np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    masses = np.array([1.0, 1.0])
    return World(positions, velocities, masses, names=["a", "b"])


def test_world_initialization():
    """Test world construction and body handles."""
    world = two_body_world()
    
    assert world.n_bodies == 2
    assert len(world) == 2
    assert world.names == ("a", "b")
    assert world["b"].index == 1
    assert world[0].name == "a"
    assert world["b"].mass == 1.0
    assert np.allclose(world["b"].velocity, [0.0, 1.0, 0.0])


def test_world_default_names():
    world = World([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], np.zeros((2, 3)), [1.0, 2.0])
    assert world.names == ("body-0", "body-1")


@pytest.mark.parametrize("bad_mass", [0.0, -1.0, np.inf, np.nan])
def test_world_rejects_invalid_mass(bad_mass):
    with pytest.raises(ValueError, match="mass"):
        World([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], np.zeros((2, 3)), [1.0, bad_mass])


def test_world_rejects_coincident_positions():
    with pytest.raises(ValueError, match="same position"):
        World([[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]], np.zeros((2, 3)), [1.0, 1.0])


def test_world_rejects_bad_shapes_and_names():
    with pytest.raises(ValueError):
        World([[0.0, 0.0], [1.0, 0.0]], np.zeros((2, 2)), [1.0, 1.0])
    with pytest.raises(ValueError):
        World([[0.0, 0.0, 0.0]], np.zeros((2, 3)), [1.0])
    with pytest.raises(ValueError):
        World(np.zeros((0, 3)), np.zeros((0, 3)), [])
    with pytest.raises(ValueError, match="unique"):
        World([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], np.zeros((2, 3)), [1.0, 1.0], names=["x", "x"])


def test_body_views_follow_commit():
    """Body handles see the state written by commit()."""
    world = two_body_world()
    body = world["b"]
    positions_array = world.positions
    
    world.commit(world.positions + 1.0, world.velocities * 2.0)
    
    assert world.positions is positions_array
    assert np.allclose(body.position, [2.0, 1.0, 1.0])
    assert np.allclose(body.velocity, [0.0, 2.0, 0.0])


def test_by_body_mapping():
    world = two_body_world()
    mapping = world.by_body(np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]]))
    assert set(mapping) == {"a", "b"}
    assert np.allclose(mapping["b"], [-1.0, 0.0, 0.0])
    with pytest.raises(ValueError):
        world.by_body(np.zeros((3, 3)))


def test_recenter_moves_to_com_frame():
    world = World([[0.0, 0.0, 0.0], [4.0, 0.0, 0.0]], [[0.0, 0.0, 0.0], [0.0, 3.0, 0.0]], [3.0, 1.0])
    world.recenter()
    assert np.allclose(np.sum(world.masses[:, None] * world.positions, axis=0), 0.0)
    assert np.allclose(np.sum(world.masses[:, None] * world.velocities, axis=0), 0.0)


def test_pair_force_symmetry():
    """F(i, j) == -F(j, i), equal magnitudes."""
    x_i, m_i = np.array([0.3, -1.2, 4.0]), 7.0
    x_j, m_j = np.array([-2.5, 0.8, 1.1]), 0.25
    
    f_ij = pair_force(x_i, m_i, x_j, m_j, G=3.0, softening=0.1)
    f_ji = pair_force(x_j, m_j, x_i, m_i, G=3.0, softening=0.1)
    
    assert np.array_equal(f_ij, -f_ji)
    assert np.linalg.norm(f_ij) == np.linalg.norm(f_ji)


def test_pair_force_inverse_square():
    f = pair_force([0.0, 0.0, 0.0], 2.0, [3.0, 4.0, 0.0], 3.0, G=1.0, softening=0.1)
    # |F| = G m_i m_j / r^2 = 6 / 25, directed toward j
    assert np.isclose(np.linalg.norm(f), 6.0 / 25.0)
    assert np.allclose(f / np.linalg.norm(f), [0.6, 0.8, 0.0])


@pytest.mark.parametrize("method", ["vectorized", "pairwise"])
def test_single_body_has_zero_acceleration(method):
    """No self-force: a lone body feels nothing."""
    calc = ForceCalculator(method=method)
    acc = calc.compute_accelerations(np.array([[1.0, 2.0, 3.0]]), np.array([5.0]), G=1.0, softening=0.1)
    assert np.array_equal(acc, np.zeros((1, 3)))


@pytest.mark.parametrize("method", ["vectorized", "pairwise"])
def test_two_body_acceleration_excludes_self(method):
    """Each body's acceleration comes only from the other body."""
    calc = ForceCalculator(method=method)
    positions = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    masses = np.array([3.0, 5.0])
    
    acc = calc.compute_accelerations(positions, masses, G=1.0, softening=0.1)
    
    assert np.allclose(acc[0], [5.0 / 4.0, 0.0, 0.0])
    assert np.allclose(acc[1], [-3.0 / 4.0, 0.0, 0.0])


@pytest.mark.parametrize("method", ["vectorized", "pairwise"])
def test_softening_guard_near_zero_separation(method):
    """Near-coincident bodies give finite, bounded accelerations."""
    calc = ForceCalculator(method=method)
    softening = 0.5
    G = 2.0
    masses = np.array([4.0, 6.0])
    for separation in [1e-3, 1e-9, 1e-15]:
        positions = np.array([[0.0, 0.0, 0.0], [separation, 0.0, 0.0]])
        acc = calc.compute_accelerations(positions, masses, G=G, softening=softening)
        
        assert np.all(np.isfinite(acc))
        assert np.linalg.norm(acc[0]) <= G * masses[1] / softening ** 2
        assert np.linalg.norm(acc[1]) <= G * masses[0] / softening ** 2


@pytest.mark.parametrize("method", ["vectorized", "pairwise"])
def test_softening_guard_exact_coincidence(method):
    calc = ForceCalculator(method=method)
    positions = np.array([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    acc = calc.compute_accelerations(positions, np.array([1.0, 1.0]), G=1.0, softening=0.5)
    assert np.all(np.isfinite(acc))
    assert np.allclose(acc, 0.0)


def test_clamped_distance_inside_threshold():
    """Inside the threshold r is replaced by the softening length."""
    calc = ForceCalculator()
    s = 2.0
    r = 0.5
    positions = np.array([[0.0, 0.0, 0.0], [r, 0.0, 0.0]])
    acc = calc.compute_accelerations(positions, np.array([1.0, 10.0]), G=1.0, softening=s)
    assert np.isclose(acc[0, 0], 10.0 * r / s ** 3)


def test_methods_agree():
    """Vectorized and pairwise evaluators give the same accelerations."""
    rng = np.random.default_rng(7)
    positions = rng.uniform(-10.0, 10.0, size=(6, 3))
    masses = rng.uniform(0.5, 50.0, size=6)
    
    a_vec = ForceCalculator("vectorized").compute_accelerations(positions, masses, G=1.5, softening=1.0)
    a_pair = ForceCalculator("pairwise").compute_accelerations(positions, masses, G=1.5, softening=1.0)
    
    assert np.allclose(a_vec, a_pair, rtol=1e-12, atol=1e-14)


def test_net_force_vanishes():
    """Newton's third law: Σ m_i a_i = 0."""
    positions, _, masses, _ = SolarSystem().generate()
    acc = ForceCalculator().compute_accelerations(positions, masses, G=1.0, softening=2.0)
    net = np.sum(masses[:, None] * acc, axis=0)
    assert np.allclose(net, 0.0, atol=1e-10)


def test_evaluator_does_not_mutate_inputs():
    positions, _, masses, _ = SolarSystem().generate()
    positions_before = positions.copy()
    masses_before = masses.copy()
    
    acc = ForceCalculator().compute_accelerations(positions, masses)
    
    assert np.array_equal(positions, positions_before)
    assert np.array_equal(masses, masses_before)
    assert acc is not positions


def test_zero_gravity_gives_zero_acceleration():
    positions, _, masses, _ = SolarSystem().generate()
    acc = ForceCalculator().compute_accelerations(positions, masses, G=0.0)
    assert np.array_equal(acc, np.zeros_like(positions))


def test_unknown_force_method():
    with pytest.raises(ValueError, match="Unknown force method"):
        ForceCalculator(method="barnes_hut")
