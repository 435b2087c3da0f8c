"""
Trips domain package.

Public API:
- Domain models: Place, RouteResult, ModeRoute, MultiModeRoute
- Place provider: PlaceProvider, UserServicePlaceProvider
- Routing entry point: TripRoutingService, InsufficientWaypoints
"""
from .models import ModeRoute, MultiModeRoute, Place, RouteResult
from .place_provider import PlaceProvider, UserServicePlaceProvider
from .routing_service import InsufficientWaypoints, TripRoutingService, reorder_place_ids

__all__ = ["Place",
           "RouteResult",
             "ModeRoute",
               "MultiModeRoute",
               "PlaceProvider",
               "UserServicePlaceProvider",
               "TripRoutingService",
               "InsufficientWaypoints",
               "reorder_place_ids",
               ]
