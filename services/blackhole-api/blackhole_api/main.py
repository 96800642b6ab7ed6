import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from photon_core.constants import (critical_impact_parameter, event_horizon_radius,
                                   impact_parameter_presets, photon_sphere_radius)

app = FastAPI(title="Black Hole API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

class BHReq(BaseModel):
    mass: float = Field(gt=0)  # geometric units, lengths in M

@app.post("/derived")
def derived(req: BHReq):
    presets = impact_parameter_presets(req.mass)
    return {
        "mass": req.mass,
        "event_horizon_radius": event_horizon_radius(req.mass),
        "photon_sphere_radius": photon_sphere_radius(req.mass),
        "critical_impact_parameter": critical_impact_parameter(req.mass),
        "presets": presets["presets"],
        "b_range": list(presets["b_range"]),
    }
