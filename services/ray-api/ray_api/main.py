import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from photon_core.ensemble import build_ensemble
from photon_core.errors import InvalidConfiguration
from photon_core.models import EnsembleConfig
from photon_core.stats import summarize
from photon_core.store import EnsembleStore
from photon_core.utils import configure_logging

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger("ray_api")

MAX_WORKERS = int(os.getenv("RAY_API_MAX_WORKERS", "0"))
CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

app = FastAPI(title="Ray API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

store = EnsembleStore()
executor = ThreadPoolExecutor(max_workers=MAX_WORKERS) if MAX_WORKERS > 0 else None

class EnsembleReq(BaseModel):
    mass: float = 1.0
    impact_parameter: float = 4.0
    ray_count: int = 7
    seed: int
    distribution_mode: Literal["isotropic", "planar", "beam"] = "isotropic"
    impact_mode: Literal["fixed", "random"] = "fixed"

def _payload(generation, config, rays):
    return {
        "generation": generation,
        "config": {
            "mass": config.mass,
            "impact_parameter": config.impact_parameter,
            "ray_count": config.ray_count,
            "seed": config.seed,
            "distribution_mode": config.distribution_mode.value,
            "impact_mode": config.impact_mode.value,
        },
        "rays": [r.to_dict() for r in rays],
        "stats": summarize(rays, config.mass).to_dict(),
    }

@app.post("/ensemble")
def ensemble(req: EnsembleReq):
    try:
        config = EnsembleConfig(
            mass=req.mass,
            impact_parameter=req.impact_parameter,
            ray_count=req.ray_count,
            seed=req.seed,
            distribution_mode=req.distribution_mode,
            impact_mode=req.impact_mode,
        )
    except InvalidConfiguration as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    generation = store.begin()
    rays = build_ensemble(config, executor)
    accepted = store.publish(generation, config, rays)
    return {"accepted": accepted, **_payload(generation, config, rays)}

def _latest():
    latest = store.latest()
    if latest is None:
        raise HTTPException(status_code=404, detail="no ensemble has been built yet")
    return latest

@app.get("/ensemble/latest")
def ensemble_latest():
    return _payload(*_latest())

@app.get("/ensemble/stats")
def ensemble_stats():
    generation, config, rays = _latest()
    return {"generation": generation, **summarize(rays, config.mass).to_dict()}
