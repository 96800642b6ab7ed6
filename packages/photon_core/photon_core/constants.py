import math

# Geometric units, G = c = 1. Every length is a multiple of the mass M.
SQRT_27 = 3.0 * math.sqrt(3.0)
TWO_PI = 2.0 * math.pi

# Random impact-parameter band, in units of M. Straddles b_crit ~ 5.196 M.
RANDOM_B_MIN = 2.5
RANDOM_B_MAX = 7.5

MAX_RAY_COUNT = 1000
TIME_OFFSET_SPAN = 400

def event_horizon_radius(mass: float) -> float:
    return 2.0 * mass

def photon_sphere_radius(mass: float) -> float:
    return 3.0 * mass

def critical_impact_parameter(mass: float) -> float:
    """b_crit = 3*sqrt(3)*M, the boundary between capture and escape."""
    return SQRT_27 * mass

def impact_parameter_presets(mass: float) -> dict:
    """Named impact parameters around b_crit, plus the usable slider range."""
    return {
        "presets": {
            "high": 8.0 * mass,
            "escape": 5.3 * mass,
            "critical": 5.2 * mass,
            "capture": 5.1 * mass,
            "low": 4.0 * mass,
        },
        "b_range": (2.1 * mass, 10.0 * mass),
    }
