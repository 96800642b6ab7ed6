from .models import CATEGORY_COLORS, FateCategory

# Visualization heuristic, not a physical boundary: escaping rays with
# b < LENSING_FACTOR * b_crit are drawn as strongly lensed.
LENSING_FACTOR = 1.25

def classify_fate(crossed: bool, b: float, b_crit: float,
                  lensing_factor: float = LENSING_FACTOR) -> FateCategory:
    if crossed:
        return FateCategory.TRAPPED
    if b < lensing_factor * b_crit:
        return FateCategory.LENSED
    return FateCategory.UNAFFECTED

__all__ = ["LENSING_FACTOR", "CATEGORY_COLORS", "classify_fate"]
