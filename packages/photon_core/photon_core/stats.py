from dataclasses import dataclass, asdict
from typing import Sequence

from .constants import critical_impact_parameter
from .models import FateCategory, RayPath

@dataclass(frozen=True)
class EnsembleStats:
    total: int
    trapped: int
    escaped: int
    inconclusive: int
    lensed: int
    unaffected: int
    b_crit: float
    max_step: int  # last valid step index of the longest ray
    status: str

    def to_dict(self) -> dict:
        return asdict(self)

def status_text(trapped: int, escaped: int, total: int) -> str:
    if trapped > 0:
        return f"{trapped}/{total} trapped in horizon"
    if total and escaped == total:
        return "All rays escaped"
    return "Simulating..."

def summarize(rays: Sequence[RayPath], mass: float) -> EnsembleStats:
    trapped = sum(1 for r in rays if r.crossed)
    escaped = sum(1 for r in rays if r.escaped)
    return EnsembleStats(
        total=len(rays),
        trapped=trapped,
        escaped=escaped,
        inconclusive=sum(1 for r in rays if r.inconclusive),
        lensed=sum(1 for r in rays if r.category is FateCategory.LENSED),
        unaffected=sum(1 for r in rays if r.category is FateCategory.UNAFFECTED),
        b_crit=critical_impact_parameter(mass),
        max_step=max((len(r.points) - 1 for r in rays), default=0),
        status=status_text(trapped, escaped, len(rays)),
    )
