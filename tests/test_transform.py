import math

import pytest
from photon_core.ensemble import build_ensemble
from photon_core.integrators import integrate_trajectory
from photon_core.models import EnsembleConfig, Orientation
from photon_core.transform import orient_point, orient_trajectory


def test_equatorial_orientation_is_identity():
    o = Orientation(theta=math.pi / 2, phi_sphere=0.0, psi=0.0)
    x, y, z = orient_point(2.0, math.pi / 3, o)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(math.sqrt(3.0))
    assert z == pytest.approx(0.0, abs=1e-12)


def test_theta_zero_starts_at_pole():
    x, y, z = orient_point(5.0, 0.0, Orientation(theta=0.0, phi_sphere=0.0, psi=1.1))
    assert (x, y) == (pytest.approx(0.0, abs=1e-12), pytest.approx(0.0, abs=1e-12))
    assert z == pytest.approx(5.0)


def test_longitude_rotates_about_polar_axis():
    x, y, z = orient_point(1.0, 0.0, Orientation(theta=math.pi / 2, phi_sphere=math.pi / 2, psi=0.0))
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)
    assert z == pytest.approx(0.0, abs=1e-12)


def test_orient_trajectory_keeps_flags_and_length():
    traj = integrate_trajectory(4.0, 1.0)
    pts = orient_trajectory(traj, Orientation(0.3, 1.2, 2.5))
    assert len(pts) == len(traj.points)
    assert all(p.crossed for p in pts)
    assert [p.r for p in pts] == [p.r for p in traj.points]


@pytest.mark.parametrize("mode", ["isotropic", "planar", "beam"])
def test_transform_preserves_radius(mode):
    config = EnsembleConfig(mass=1.0, impact_parameter=4.0, ray_count=6, seed=11,
                            distribution_mode=mode, impact_mode="random")
    for ray in build_ensemble(config):
        for p in ray.points:
            extent = math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)
            assert extent == pytest.approx(p.r, rel=1e-9)


def test_planar_mode_stays_in_equatorial_plane():
    config = EnsembleConfig(mass=1.0, impact_parameter=7.0, ray_count=4, seed=3,
                            distribution_mode="planar")
    for ray in build_ensemble(config):
        assert all(abs(p.z) < 1e-9 * p.r for p in ray.points)
