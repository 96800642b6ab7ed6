import logging
import threading
from typing import Optional, Tuple

from .models import EnsembleConfig, RayPath

logger = logging.getLogger("photon_core.store")

class EnsembleStore:
    """Holds the most recently requested ensemble, last write wins.

    Each build first takes a generation from begin(). A publish is accepted only
    for the newest generation handed out, so a slow build that was superseded
    while in flight is dropped instead of overwriting newer results.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued = 0
        self._generation = 0
        self._config: Optional[EnsembleConfig] = None
        self._rays: Optional[Tuple[RayPath, ...]] = None

    def begin(self) -> int:
        with self._lock:
            self._issued += 1
            return self._issued

    def publish(self, generation: int, config: EnsembleConfig, rays) -> bool:
        with self._lock:
            if generation != self._issued:
                logger.info("dropping stale ensemble generation %d (latest is %d)", generation, self._issued)
                return False
            self._generation = generation
            self._config = config
            self._rays = tuple(rays)
            return True

    def latest(self):
        """(generation, config, rays) of the last accepted publish, or None."""
        with self._lock:
            if self._rays is None:
                return None
            return self._generation, self._config, self._rays
