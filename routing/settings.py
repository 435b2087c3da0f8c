"""
Purpose: Central configuration for the route engine and the place provider.
What it does:

Stores the endpoints and timeouts the HTTP adapters need:

OSRM_BASE_URL = https://router.project-osrm.org

USER_SERVICE_URL = http://user-service:8081

OSRM_TIMEOUT_SECONDS = 10

USER_SERVICE_TIMEOUT_SECONDS = 5

Values are read from the environment (a .env file is loaded first, see
python-dotenv). BASE_URL is still honoured for the OSRM endpoint.

Rule: No logic here beyond reading and validating values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OSRM_BASE_URL = "https://router.project-osrm.org"
DEFAULT_USER_SERVICE_URL = "http://user-service:8081"


@dataclass(frozen=True)
class RoutingSettings:
    """
    Endpoints and transport timeouts for the routing adapters.
    """

    # --- Route engine ---
    osrm_base_url: str = DEFAULT_OSRM_BASE_URL
    # How long to wait for OSRM before giving up (seconds)
    osrm_timeout_seconds: float = 10.0

    # --- Place provider (user-service) ---
    user_service_url: str = DEFAULT_USER_SERVICE_URL
    user_service_timeout_seconds: float = 5.0

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not self.osrm_base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        if not self.user_service_url:
            raise ValueError("User service URL not set. Please set USER_SERVICE_URL in the .env file.")

        if self.osrm_timeout_seconds <= 0:
            raise ValueError("osrm_timeout_seconds must be > 0")

        if self.user_service_timeout_seconds <= 0:
            raise ValueError("user_service_timeout_seconds must be > 0")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> RoutingSettings:
        load_dotenv(env_file)

        settings = cls(
            osrm_base_url=(
                os.getenv("OSRM_BASE_URL") or os.getenv("BASE_URL") or DEFAULT_OSRM_BASE_URL
            ).rstrip("/"),
            osrm_timeout_seconds=float(os.getenv("OSRM_TIMEOUT_SECONDS", "10")),
            user_service_url=os.getenv("USER_SERVICE_URL", DEFAULT_USER_SERVICE_URL).rstrip("/"),
            user_service_timeout_seconds=float(os.getenv("USER_SERVICE_TIMEOUT_SECONDS", "5")),
        )
        settings.validate()
        return settings


def default_settings() -> RoutingSettings:
    return RoutingSettings()
