import logging
from typing import Optional

from databases import Database
from sqlalchemy import Column, MetaData, String, Table, Text

from ..errors import StoreUnavailable
from ..models.schemas import LocationRecord

logger = logging.getLogger(__name__)

metadata = MetaData()

# search_query is intentionally not unique: concurrent misses may both insert.
locations = Table(
    "locations",
    metadata,
    Column("search_query", String(255), nullable=False, index=True),
    Column("formatted_query", Text, nullable=False),
    Column("latitude", String(32), nullable=False),
    Column("longitude", String(32), nullable=False),
)

SCHEMA_SQL = [
    """
    CREATE TABLE IF NOT EXISTS locations (
        search_query VARCHAR(255) NOT NULL,
        formatted_query TEXT NOT NULL,
        latitude VARCHAR(32) NOT NULL,
        longitude VARCHAR(32) NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS ix_locations_search_query ON locations (search_query)",
]


class LocationRepository:
    def __init__(self, database: Database):
        self.database = database
        self.locations = locations

    async def connect(self):
        try:
            await self.database.connect()
        except Exception as e:
            raise StoreUnavailable(f"could not connect to store: {e}") from e

    async def disconnect(self):
        await self.database.disconnect()

    async def create_schema(self) -> None:
        try:
            for statement in SCHEMA_SQL:
                await self.database.execute(statement)
        except Exception as e:
            raise StoreUnavailable(f"could not create locations table: {e}") from e

    async def get_by_search_query(self, search_query: str) -> Optional[LocationRecord]:
        """Return the first stored row for the exact search string, if any."""
        query = self.locations.select().where(self.locations.c.search_query == search_query)
        try:
            row = await self.database.fetch_one(query)
        except Exception as e:
            raise StoreUnavailable(f"location lookup failed: {e}") from e
        if row is None:
            return None
        return LocationRecord(**dict(row._mapping))

    async def create(self, location: LocationRecord) -> LocationRecord:
        """Insert one row and return it in its stored form.

        Coordinates are stored as text, so the record returned here (and on
        every later hit) carries string coordinates even when the provider
        sent numbers.
        """
        values = {
            "search_query": location.search_query,
            "formatted_query": location.formatted_query,
            "latitude": str(location.latitude),
            "longitude": str(location.longitude),
        }
        query = self.locations.insert().values(**values)
        try:
            await self.database.execute(query)
        except Exception as e:
            raise StoreUnavailable(f"location insert failed: {e}") from e
        logger.info(f"Cached location for '{location.search_query}'")
        return LocationRecord(**values)
