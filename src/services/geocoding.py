"""Forward geocoding using the OpenStreetMap Nominatim API."""

import logging
from dataclasses import dataclass

import httpx

from src.config import get_settings

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when the geocoding provider cannot be reached or answers badly."""


@dataclass(frozen=True)
class Coordinates:
    """A resolved point."""

    latitude: float
    longitude: float


class GeocodingService:
    """Service for turning free-text locations into coordinates."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        settings = get_settings()
        self.base_url = settings.geocoder_base_url.rstrip("/")
        self.user_agent = settings.geocoder_user_agent
        self.timeout = settings.geocoder_timeout
        self.transport = transport

    async def geocode(self, query: str) -> Coordinates | None:
        """Look up the best match for a location.

        Args:
            query: Free-text location, e.g. "Greenwich, UK"

        Returns:
            Coordinates of the first match, or None if nothing matched

        Raises:
            GeocodingError: If the request fails or the response is malformed
        """
        logger.debug(f"Geocoding location: {query!r}")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                headers={"User-Agent": self.user_agent},
            ) as client:
                response = await client.get(
                    f"{self.base_url}/search",
                    params={"q": query, "format": "json", "limit": 1},
                )
                response.raise_for_status()
                results = response.json()
        except httpx.HTTPError as e:
            raise GeocodingError(f"Geocoding request failed: {e}") from e
        except ValueError as e:
            raise GeocodingError(f"Invalid geocoding response: {e}") from e

        if not results:
            logger.info(f"No geocoding match for {query!r}")
            return None

        try:
            first = results[0]
            return Coordinates(latitude=float(first["lat"]), longitude=float(first["lon"]))
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise GeocodingError(f"Unexpected geocoding result: {results!r}") from e
