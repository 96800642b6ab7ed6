import os
import sys

# Make the library and the services importable without installing them
repo_root = os.path.dirname(os.path.dirname(__file__))
for rel in ("packages/photon_core", "services/ray-api", "services/blackhole-api", "services/worker"):
    path = os.path.join(repo_root, rel)
    if path not in sys.path:
        sys.path.insert(0, path)

import pytest
from photon_core.models import IntegrationConfig


@pytest.fixture
def default_integration():
    return IntegrationConfig()