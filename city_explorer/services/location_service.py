import logging

from ..errors import NoMatch, UpstreamRejected
from ..models.schemas import LocationRecord
from ..repositories.location_repository import LocationRepository
from ..utils.normalizers import normalize_locations
from .upstream_client import UpstreamClient

logger = logging.getLogger(__name__)

# LocationIQ signals "nothing found" with a 404 instead of an empty array.
GEOCODER_NO_MATCH_STATUS = 404


class LocationService:
    """Cache-aside lookup of geocoded locations keyed by the literal search string.

    The read and the insert are separate store calls with no lock between them,
    so two concurrent misses for the same string can both insert a row. Later
    reads return whichever row the store yields first.
    """

    def __init__(self, geocode_client: UpstreamClient, location_repository: LocationRepository):
        self.geocode_client = geocode_client
        self.location_repository = location_repository

    async def resolve(self, search_query: str) -> LocationRecord:
        existing = await self.location_repository.get_by_search_query(search_query)
        if existing is not None:
            logger.info(f"Location cache hit: '{search_query}'")
            return existing

        logger.info(f"Location cache miss, geocoding: '{search_query}'")
        try:
            body = await self.geocode_client.fetch(query=search_query)
        except UpstreamRejected as e:
            if e.status == GEOCODER_NO_MATCH_STATUS:
                raise NoMatch(f"no location found for '{search_query}'") from e
            raise

        location = normalize_locations(search_query, body)
        return await self.location_repository.create(location)
