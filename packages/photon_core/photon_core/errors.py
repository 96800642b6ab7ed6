class PhotonCoreError(Exception):
    """Base class for errors raised by photon_core."""

class InvalidConfiguration(PhotonCoreError, ValueError):
    """A configuration was rejected before any integration started."""
