#Marks routing as a package.
#Re-exports the public API (OSRMClient, TransportProfile, EngineFailure, ...)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .models import EngineOperation, EngineResult, TransportProfile, Waypoint
from .osrm_client import EngineFailure, OSRMClient, TransportError
from .settings import RoutingSettings

__all__ = [
           "EngineFailure",
           "EngineOperation",
           "EngineResult",
           "OSRMClient",
           "RoutingSettings",
           "TransportError",
           "TransportProfile",
           "Waypoint",
             ]
