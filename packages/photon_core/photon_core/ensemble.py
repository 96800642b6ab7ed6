import logging
import math
from concurrent.futures import Executor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .classify import classify_fate
from .constants import (RANDOM_B_MAX, RANDOM_B_MIN, TIME_OFFSET_SPAN, TWO_PI,
                        critical_impact_parameter)
from .integrators import integrate_trajectory
from .models import (DistributionMode, EnsembleConfig, ImpactMode,
                     IntegrationConfig, Orientation, RayPath)
from .rng import Mulberry32
from .transform import orient_trajectory

logger = logging.getLogger("photon_core.ensemble")

@dataclass(frozen=True)
class RaySample:
    """Everything a ray draws from the RNG, fixed before any integration."""
    index: int
    orientation: Orientation
    b: float
    time_offset: int

def sample_orientation(rng: Mulberry32, mode: DistributionMode, index: int, count: int) -> Orientation:
    if mode is DistributionMode.ISOTROPIC:
        theta = math.acos(2.0 * rng() - 1.0)
        phi_sphere = rng() * TWO_PI
        psi = rng() * TWO_PI
    elif mode is DistributionMode.PLANAR:
        theta = math.pi / 2.0
        phi_sphere = rng() * TWO_PI
        psi = 0.0
    else:
        # beam: fan the orbital planes evenly, nothing is sampled
        theta = 0.0
        phi_sphere = 0.0
        psi = (index / max(1, count)) * TWO_PI
    return Orientation(theta, phi_sphere, psi)

def plan_rays(config: EnsembleConfig) -> List[RaySample]:
    """Draw every ray's random inputs in index order from one seeded stream.

    The draw order per ray is orientation, impact parameter (random mode only),
    time offset. Doing this up front is what keeps parallel integration from
    changing the ensemble.
    """
    rng = Mulberry32(config.seed)
    mass = config.mass
    samples = []
    for i in range(config.ray_count):
        orientation = sample_orientation(rng, config.distribution_mode, i, config.ray_count)
        b = config.impact_parameter
        if config.impact_mode is ImpactMode.RANDOM:
            lo, hi = RANDOM_B_MIN * mass, RANDOM_B_MAX * mass
            b = lo + rng() * (hi - lo)
        time_offset = int(math.floor(rng() * TIME_OFFSET_SPAN))
        samples.append(RaySample(i, orientation, b, time_offset))
    return samples

def trace_ray(sample: RaySample, seed: int, mass: float, integration: IntegrationConfig) -> RayPath:
    trajectory = integrate_trajectory(sample.b, mass, integration)
    category = classify_fate(trajectory.crossed, sample.b, critical_impact_parameter(mass))
    return RayPath(
        id=f"{seed}-{sample.index}",
        b=sample.b,
        phi0=integration.phi0,
        category=category,
        orientation=sample.orientation,
        points=orient_trajectory(trajectory, sample.orientation),
        crossed=trajectory.crossed,
        escaped=trajectory.escaped,
        turned=trajectory.turned,
        termination=trajectory.termination,
        time_offset=sample.time_offset,
    )

def build_ensemble(config: EnsembleConfig, executor: Optional[Executor] = None) -> Tuple[RayPath, ...]:
    """Turn a configuration into its ordered, reproducible tuple of rays.

    With an executor the rays are traced concurrently; the result is the same
    as the sequential build because all random draws were made by plan_rays.
    """
    if not isinstance(config, EnsembleConfig):
        raise TypeError(f"expected EnsembleConfig, got {type(config).__name__}")
    samples = plan_rays(config)
    args = (config.seed, config.mass, config.integration)

    if executor is None:
        rays = [trace_ray(s, *args) for s in samples]
    else:
        rays = [None] * len(samples)
        futures = {executor.submit(trace_ray, s, *args): s.index for s in samples}
        for future in as_completed(futures):
            rays[futures[future]] = future.result()

    inconclusive = sum(1 for r in rays if r.inconclusive)
    logger.info("built %d rays (M=%g, seed=%d, %s/%s), %d inconclusive",
                len(rays), config.mass, config.seed, config.distribution_mode.value,
                config.impact_mode.value, inconclusive)
    return tuple(rays)

def build_rays(b: float, mass: float, count: int, seed: int,
               distribution_mode="isotropic", impact_mode="fixed",
               executor: Optional[Executor] = None) -> Tuple[RayPath, ...]:
    config = EnsembleConfig(mass=mass, impact_parameter=b, ray_count=count, seed=seed,
                            distribution_mode=distribution_mode, impact_mode=impact_mode)
    return build_ensemble(config, executor)
