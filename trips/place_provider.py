#Purpose: Where the routing layer gets a trip plan's places from.
#PlaceProvider is the interface the routing service depends on.
#UserServicePlaceProvider is the HTTP implementation backed by user-service:
#GET /api/trip-plans/{id}/places, bearer token forwarded when present.
#No routing logic here.

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

import requests

from routing.settings import DEFAULT_USER_SERVICE_URL

from .models import Place

logger = logging.getLogger(__name__)


class PlaceProvider(Protocol):
    def get_places(self, trip_plan_id: Any, credential: Optional[str] = None) -> List[Place]:
        ...


def bearer_headers(credential: Optional[str]) -> dict:
    """Authorization header for a non-blank credential, nothing otherwise."""
    if credential is None or not credential.strip():
        return {}
    return {"Authorization": f"Bearer {credential}"}


class UserServicePlaceProvider:
    """
    Fetches the ordered places of a trip plan from user-service.
    """
    def __init__(self,
                 base_url: str = DEFAULT_USER_SERVICE_URL,
                 session: Optional[requests.Session] = None,
                 timeout: float = 5):
        if not base_url:
            raise ValueError("User service URL not set. Please set it in the .env file.")

        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get_places(self, trip_plan_id: Any, credential: Optional[str] = None) -> List[Place]:
        url = f"{self.base_url}/api/trip-plans/{trip_plan_id}/places"

        response = self.session.get(url, headers=bearer_headers(credential), timeout=self.timeout)
        response.raise_for_status()

        body = response.json()
        if body is None:
            return []
        if not isinstance(body, list):
            raise ValueError(f"trip plan {trip_plan_id} places must be a list, got {type(body).__name__}")

        places = [Place.from_json(item) for item in body]
        logger.debug("Trip plan %s has %d places", trip_plan_id, len(places))
        return places
