import logging
import math

from .errors import InvalidConfiguration
from .models import IntegrationConfig, Termination, Trajectory, TrajectoryPoint

logger = logging.getLogger("photon_core.integrators")

def radial_term(r: float, b: float, mass: float) -> float:
    """(dr/dlam)^2 / E^2 = 1 - (b^2 / r^2)(1 - 2M/r) for a null geodesic."""
    f = 1.0 - 2.0 * mass / r
    return 1.0 - (b * b * f) / (r * r)

def _asymptotic_escape(raw, mass: float, cfg: IntegrationConfig) -> bool:
    last = raw[-1][0]
    prev = raw[max(0, len(raw) - cfg.lookback_steps)][0]
    return last > cfg.asymptotic_radius * mass and last > prev

def integrate_trajectory(b: float, mass: float, config: IntegrationConfig = None) -> Trajectory:
    """Advance one photon of impact parameter b from start_radius until it
    crosses the horizon limit, escapes, diverges or runs out of steps.

    Points are accumulated raw and the final outcome is stamped on every one of
    them afterwards, so no point ever carries a provisional fate.
    """
    cfg = config or IntegrationConfig()
    for name, value in (("b", b), ("mass", mass)):
        if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
            raise InvalidConfiguration(f"{name} must be a positive finite number, got {value!r}")

    dlam = cfg.step_size * mass
    r_escape = cfg.escape_radius * mass
    r_horizon = cfg.horizon_limit * mass

    r = cfg.start_radius * mass
    phi = cfg.phi0
    turned = False
    prev_dr = -1.0
    termination = None
    raw = []

    for _ in range(cfg.max_steps):
        if r > r_escape:
            termination = Termination.ESCAPE
            raw.append((r, phi))
            break
        if r < r_horizon:
            termination = Termination.HORIZON
            raw.append((r, phi))
            break

        F = radial_term(r, b, mass)
        dphi = b / (r * r)

        if F < 0:
            # past the turning point: record it, then step outward
            turned = True
            raw.append((r, phi))
            prev_dr = 0.0
            dr = math.sqrt(max(0.0, -F) + cfg.turning_epsilon)
            r = r + dr * dlam
            phi = phi + dphi * dlam
        else:
            dr = math.sqrt(F) if turned else -math.sqrt(F)
            if prev_dr < 0 and dr > 0:
                turned = True
            prev_dr = dr
            r = r + dr * dlam
            phi = phi + dphi * dlam
            if math.isfinite(r) and math.isfinite(phi):
                raw.append((r, phi))

        if not (math.isfinite(r) and math.isfinite(phi)):
            termination = Termination.DIVERGED
            logger.warning("trajectory diverged (b=%g, M=%g) after %d points", b, mass, len(raw))
            break

    if termination is None:
        if raw and _asymptotic_escape(raw, mass, cfg):
            termination = Termination.ASYMPTOTIC_ESCAPE
        else:
            termination = Termination.EXHAUSTED
            logger.warning("trajectory inconclusive (b=%g, M=%g): %d steps exhausted at r=%g",
                           b, mass, cfg.max_steps, raw[-1][0] if raw else r)

    crossed = termination is Termination.HORIZON
    escaped = termination in (Termination.ESCAPE, Termination.ASYMPTOTIC_ESCAPE)
    points = tuple(TrajectoryPoint(pr, pphi, crossed, escaped, turned) for pr, pphi in raw)
    logger.debug("b=%g M=%g -> %s, turned=%s, %d points", b, mass, termination.value, turned, len(points))
    return Trajectory(points, crossed, escaped, turned, termination)
