from .constants import (critical_impact_parameter, event_horizon_radius,
                        impact_parameter_presets, photon_sphere_radius)
from .errors import InvalidConfiguration, PhotonCoreError
from .models import (DistributionMode, EnsembleConfig, FateCategory, ImpactMode,
                     IntegrationConfig, Orientation, OrientedPoint, RayPath,
                     Termination, Trajectory, TrajectoryPoint)
from .rng import Mulberry32, mulberry32
from .integrators import integrate_trajectory
from .classify import classify_fate
from .transform import orient_point, orient_trajectory
from .ensemble import build_ensemble, build_rays, plan_rays
from .stats import EnsembleStats, summarize
from .store import EnsembleStore
from .utils import configure_logging
__all__ = ["critical_impact_parameter","event_horizon_radius","impact_parameter_presets",
           "photon_sphere_radius","InvalidConfiguration","PhotonCoreError","DistributionMode",
           "EnsembleConfig","FateCategory","ImpactMode","IntegrationConfig","Orientation",
           "OrientedPoint","RayPath","Termination","Trajectory","TrajectoryPoint","Mulberry32",
           "mulberry32","integrate_trajectory","classify_fate","orient_point","orient_trajectory",
           "build_ensemble","build_rays","plan_rays","EnsembleStats","summarize","EnsembleStore",
           "configure_logging"]
