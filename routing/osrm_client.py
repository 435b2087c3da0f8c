#Purpose: The OSRM “adapter/client”.
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route, /trip)
#error handling (status code + empty result lists)
#parsing response JSON into your internal shape
#It should not know anything about trip plans or place ids.

import logging
from typing import Any, Dict, List, Optional

import requests

from .models import (
    EngineOperation,
    EngineResult,
    LonLat,
    RouteEngineResponse,
    RouteResponse,
    TransportProfile,
    TripResponse,
)
from .settings import DEFAULT_OSRM_BASE_URL

logger = logging.getLogger(__name__)

# Network level failures (connection refused, timeouts, non-2xx without an OSRM body)
# are requests' own exceptions and are propagated unmodified.
TransportError = requests.RequestException

# full-detail geometry in GeoJSON form
GEOMETRY_PARAMS = {
    "geometries": "geojson",
    "overview": "full",
}


class EngineFailure(Exception):
    """
    OSRM answered, but not with a usable result:
    non "Ok" code, empty routes/trips list or a response we cannot decode.
    """

    def __init__(
        self,
        operation: EngineOperation,
        profile: TransportProfile,
        detail: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.operation = operation
        self.profile = profile
        self.detail = detail
        self.code = code
        message = f"OSRM {operation.value} failed ({profile.value})"
        if code:
            message += f" [{code}]"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Serialize (lon, lat) coordinates into OSRM's path format
    - Return normalized outputs (EngineResult)

    The HTTP session is owned by the caller; the client keeps no state between calls.
    """
    def __init__(self,
                 base_url: str = DEFAULT_OSRM_BASE_URL,
                 session: Optional[requests.Session] = None,
                 timeout: float = 10):
        if not base_url:
            raise ValueError("OSRM base URL not set. Please set it in the .env file.")

        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout #the time to wait for a response from OSRM before giving up

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LonLat]) -> str:
        """Convert list of (lon, lat) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join(f"{lon},{lat}" for lon, lat in coords)

    def _get_json(self, url: str, params: Dict[str, str],
                  operation: EngineOperation,
                  profile: TransportProfile) -> Dict[str, Any]:
        logger.debug("OSRM %s request (%s): %s", operation.value, profile.value, url)

        response = self.session.get(url, params=params, timeout=self.timeout)

        try:
            data = response.json()
        except ValueError:
            # not an OSRM body at all: let HTTP errors surface as transport errors
            response.raise_for_status()
            raise EngineFailure(operation, profile, "response body is not JSON")

        if not isinstance(data, dict) or "code" not in data:
            response.raise_for_status()
            raise EngineFailure(operation, profile, "response has no status code")

        return data

    def _decode(self, data: Dict[str, Any],
                operation: EngineOperation,
                profile: TransportProfile) -> RouteEngineResponse:
        decoder = TripResponse if operation is EngineOperation.TRIP else RouteResponse
        try:
            decoded = decoder.from_json(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise EngineFailure(operation, profile, f"malformed response: {exc!r}") from exc

        if not decoded.ok:
            logger.warning(
                "OSRM %s (%s) returned code=%s message=%s",
                operation.value, profile.value, decoded.code, decoded.message,
            )
            raise EngineFailure(operation, profile, decoded.message, code=decoded.code)

        return decoded

    @staticmethod
    def _require_pair(coords: List[LonLat]) -> None:
        if len(coords) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

    #----------------
    # route service (keep the given order)
    #----------------
    def route_keep_order(self, coords: List[LonLat],
                         profile: TransportProfile = TransportProfile.DRIVING) -> EngineResult:
        """
        calls the OSRM /route endpoint with the coordinates in the exact order given.

        Returns EngineResult with distance (meters), duration (seconds), GeoJSON geometry.
        OSRM may return alternative routes; only the first one is used.
        """
        self._require_pair(coords)
        profile = TransportProfile(profile)

        url = f"{self.base_url}/route/v1/{profile.path}/{self.format_coordinates(coords)}"
        data = self._get_json(url, dict(GEOMETRY_PARAMS), EngineOperation.ROUTE, profile)
        route = self._decode(data, EngineOperation.ROUTE, profile).first()

        return EngineResult(
            operation=EngineOperation.ROUTE,
            profile=profile,
            distance=route.distance,
            duration=route.duration,
            geometry=route.geometry,
        )

    def route_keep_order_driving(self, coords: List[LonLat]) -> EngineResult:
        return self.route_keep_order(coords, TransportProfile.DRIVING)

    def route_keep_order_walking(self, coords: List[LonLat]) -> EngineResult:
        return self.route_keep_order(coords, TransportProfile.WALKING)

    def route_keep_order_cycling(self, coords: List[LonLat]) -> EngineResult:
        return self.route_keep_order(coords, TransportProfile.CYCLING)

    #----------------
    # trip service (let OSRM choose the visiting order)
    #----------------
    def trip_optimize(self, coords: List[LonLat]) -> EngineResult:
        """
        calls the OSRM /trip endpoint (driving only).

        First coordinate stays the start, last stays the end, no round trip.
        The returned waypoints (if any) are passed through for the caller to reconcile.
        """
        self._require_pair(coords)
        profile = TransportProfile.DRIVING

        url = f"{self.base_url}/trip/v1/{profile.path}/{self.format_coordinates(coords)}"
        params = {
            "roundtrip": "false",
            "source": "first",
            "destination": "last",
            **GEOMETRY_PARAMS,
        }
        data = self._get_json(url, params, EngineOperation.TRIP, profile)
        decoded = self._decode(data, EngineOperation.TRIP, profile)
        trip = decoded.first()

        return EngineResult(
            operation=EngineOperation.TRIP,
            profile=profile,
            distance=trip.distance,
            duration=trip.duration,
            geometry=trip.geometry,
            waypoints=decoded.waypoints,
        )
