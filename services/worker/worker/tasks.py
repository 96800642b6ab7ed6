import logging
import os
from celery import Celery
from photon_core.ensemble import build_ensemble
from photon_core.models import EnsembleConfig
from photon_core.stats import summarize
from photon_core.utils import configure_logging

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger("worker")

celery = Celery("photons", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)

@celery.task
def build_ensemble_task(config):
    """Build one ensemble from a plain dict of EnsembleConfig fields.

    InvalidConfiguration propagates and fails the task; nothing is retried.
    """
    cfg = EnsembleConfig(**config)
    rays = build_ensemble(cfg)
    logger.info("ensemble task done: seed=%d, %d rays", cfg.seed, len(rays))
    return {
        "rays": [r.to_dict() for r in rays],
        "stats": summarize(rays, cfg.mass).to_dict(),
    }
