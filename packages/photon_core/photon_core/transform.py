"""Placement of planar trajectories in 3D.

The integrator works in a local XY plane with the photon starting on the +X
axis. Three rotations put that plane anywhere on the sphere:

1. about local X by ``psi`` (spins the orbital plane around the initial
   radial direction),
2. about Y by ``theta - pi/2`` (moves the start point to polar angle theta),
3. about Z by ``phi_sphere`` (sets the longitude).

Each step is orthonormal, so |(x, y, z)| == r for every point.
"""
import math
from typing import Tuple

from .models import Orientation, OrientedPoint, Trajectory

def orient_point(r: float, phi: float, orientation: Orientation) -> Tuple[float, float, float]:
    lx = r * math.cos(phi)
    ly = r * math.sin(phi)

    cs, ss = math.cos(orientation.psi), math.sin(orientation.psi)
    x1 = lx
    y1 = ly * cs
    z1 = ly * ss

    beta = orientation.theta - math.pi / 2.0
    cb, sb = math.cos(beta), math.sin(beta)
    x2 = x1 * cb + z1 * sb
    y2 = y1
    z2 = -x1 * sb + z1 * cb

    cp, sp = math.cos(orientation.phi_sphere), math.sin(orientation.phi_sphere)
    return x2 * cp - y2 * sp, x2 * sp + y2 * cp, z2

def orient_trajectory(trajectory: Trajectory, orientation: Orientation) -> Tuple[OrientedPoint, ...]:
    out = []
    for p in trajectory.points:
        x, y, z = orient_point(p.r, p.phi, orientation)
        out.append(OrientedPoint(p.r, p.phi, x, y, z, p.crossed, p.escaped, p.turned))
    return tuple(out)
