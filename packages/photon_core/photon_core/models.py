import math
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Tuple

from .constants import MAX_RAY_COUNT
from .errors import InvalidConfiguration

UINT32_MAX = 0xFFFFFFFF

class DistributionMode(str, Enum):
    ISOTROPIC = "isotropic"
    PLANAR = "planar"
    BEAM = "beam"

class ImpactMode(str, Enum):
    FIXED = "fixed"
    RANDOM = "random"

class FateCategory(str, Enum):
    TRAPPED = "trapped"
    LENSED = "lensed"
    UNAFFECTED = "unaffected"

# display colors, tunable
CATEGORY_COLORS = {
    FateCategory.TRAPPED: "#ff3333",
    FateCategory.LENSED: "#4488ff",
    FateCategory.UNAFFECTED: "#eab308",
}

class Termination(str, Enum):
    HORIZON = "horizon"
    ESCAPE = "escape"
    ASYMPTOTIC_ESCAPE = "asymptotic_escape"
    EXHAUSTED = "exhausted"
    DIVERGED = "diverged"

INCONCLUSIVE = frozenset({Termination.EXHAUSTED, Termination.DIVERGED})

def _positive(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive finite number, got {value!r}")
    return float(value)

def _enum(kind, value):
    try:
        return kind(value)
    except ValueError:
        allowed = ", ".join(m.value for m in kind)
        raise InvalidConfiguration(f"unrecognized {kind.__name__} {value!r} (expected one of: {allowed})") from None

@dataclass(frozen=True)
class IntegrationConfig:
    # radii and step size are in units of M
    step_size: float = 0.05
    max_steps: int = 6000
    start_radius: float = 100.0
    escape_radius: float = 150.0
    horizon_limit: float = 2.01
    phi0: float = 0.0
    # asymptotic escape heuristic, applied when max_steps runs out
    asymptotic_radius: float = 50.0
    lookback_steps: int = 20
    turning_epsilon: float = 1e-8

    def __post_init__(self):
        for name in ("step_size", "start_radius", "escape_radius", "horizon_limit",
                     "asymptotic_radius", "turning_epsilon"):
            _positive(name, getattr(self, name))
        for name in ("max_steps", "lookback_steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
        if not math.isfinite(self.phi0):
            raise InvalidConfiguration(f"phi0 must be finite, got {self.phi0!r}")
        if self.horizon_limit >= self.escape_radius:
            raise InvalidConfiguration("horizon_limit must lie below escape_radius")

@dataclass(frozen=True)
class EnsembleConfig:
    """Everything that determines an ensemble. Invalid values are rejected on construction."""
    mass: float
    impact_parameter: float
    ray_count: int
    seed: int
    distribution_mode: DistributionMode = DistributionMode.ISOTROPIC
    impact_mode: ImpactMode = ImpactMode.FIXED
    integration: IntegrationConfig = field(default_factory=IntegrationConfig)

    def __post_init__(self):
        object.__setattr__(self, "mass", _positive("mass", self.mass))
        object.__setattr__(self, "impact_parameter", _positive("impact_parameter", self.impact_parameter))
        count = self.ray_count
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= MAX_RAY_COUNT:
            raise InvalidConfiguration(f"ray_count must be an integer in [1, {MAX_RAY_COUNT}], got {count!r}")
        seed = self.seed
        if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= UINT32_MAX:
            raise InvalidConfiguration(f"seed must be an unsigned 32-bit integer, got {seed!r}")
        object.__setattr__(self, "distribution_mode", _enum(DistributionMode, self.distribution_mode))
        object.__setattr__(self, "impact_mode", _enum(ImpactMode, self.impact_mode))
        if not isinstance(self.integration, IntegrationConfig):
            raise InvalidConfiguration("integration must be an IntegrationConfig")

@dataclass(frozen=True)
class TrajectoryPoint:
    r: float; phi: float
    crossed: bool; escaped: bool; turned: bool

@dataclass(frozen=True)
class Trajectory:
    points: Tuple[TrajectoryPoint, ...]
    crossed: bool
    escaped: bool
    turned: bool
    termination: Termination

    @property
    def inconclusive(self) -> bool:
        return self.termination in INCONCLUSIVE

@dataclass(frozen=True)
class Orientation:
    theta: float       # polar angle of the start position
    phi_sphere: float  # longitude of the start position
    psi: float         # spin of the orbital plane about the initial radial direction

@dataclass(frozen=True)
class OrientedPoint:
    r: float; phi: float
    x: float; y: float; z: float
    crossed: bool; escaped: bool; turned: bool

@dataclass(frozen=True)
class RayPath:
    id: str
    b: float
    phi0: float
    category: FateCategory
    orientation: Orientation
    points: Tuple[OrientedPoint, ...]
    crossed: bool
    escaped: bool
    turned: bool
    termination: Termination
    time_offset: int  # opaque to photon_core, consumed by playback

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self.category]

    @property
    def inconclusive(self) -> bool:
        return self.termination in INCONCLUSIVE

    def point_at(self, step) -> OrientedPoint:
        """Random access by an external step counter, clamped to the trajectory."""
        idx = min(int(math.floor(step)), len(self.points) - 1)
        return self.points[max(idx, 0)]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["category"] = self.category.value
        data["termination"] = self.termination.value
        data["color"] = self.color
        return data
