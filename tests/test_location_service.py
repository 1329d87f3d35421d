"""Tests for the cache-aside location resolver."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from city_explorer.errors import (
    MalformedUpstreamData,
    NoMatch,
    StoreUnavailable,
    UpstreamRejected,
    UpstreamUnavailable,
)
from city_explorer.services.location_service import LocationService

from samples import SEATTLE_GEOCODE


def make_geocoder(return_value=None, side_effect=None):
    client = MagicMock()
    client.fetch = AsyncMock(return_value=return_value, side_effect=side_effect)
    return client


class TestResolve:
    @pytest.mark.asyncio
    async def test_miss_geocodes_and_inserts_once(self, in_memory_repository):
        geocoder = make_geocoder(SEATTLE_GEOCODE)
        service = LocationService(geocoder, in_memory_repository)

        record = await service.resolve("seattle")

        geocoder.fetch.assert_awaited_once_with(query="seattle")
        assert in_memory_repository.inserts == 1
        assert record.formatted_query == "Seattle, King County, Washington, USA"
        assert record.latitude == "47.6038321"
        assert record.longitude == "-122.3300624"

    @pytest.mark.asyncio
    async def test_hit_skips_provider(self, in_memory_repository):
        geocoder = make_geocoder(SEATTLE_GEOCODE)
        service = LocationService(geocoder, in_memory_repository)

        first = await service.resolve("seattle")
        second = await service.resolve("seattle")

        assert geocoder.fetch.await_count == 1
        assert in_memory_repository.inserts == 1
        assert first.model_dump() == second.model_dump()

    @pytest.mark.asyncio
    async def test_key_is_case_sensitive(self, in_memory_repository):
        geocoder = make_geocoder(SEATTLE_GEOCODE)
        service = LocationService(geocoder, in_memory_repository)

        await service.resolve("seattle")
        await service.resolve("Seattle")

        assert geocoder.fetch.await_count == 2
        assert in_memory_repository.inserts == 2

    @pytest.mark.asyncio
    async def test_concurrent_misses_may_duplicate_but_never_lose(self, in_memory_repository):
        async def slow_geocode(query):
            await asyncio.sleep(0.01)
            return SEATTLE_GEOCODE

        service = LocationService(make_geocoder(side_effect=slow_geocode), in_memory_repository)

        first, second = await asyncio.gather(service.resolve("seattle"), service.resolve("seattle"))

        assert first.search_query == second.search_query == "seattle"
        assert first.formatted_query == second.formatted_query
        rows = [r for r in in_memory_repository.rows if r.search_query == "seattle"]
        assert 1 <= len(rows) <= 2

    @pytest.mark.asyncio
    async def test_empty_result_is_no_match(self, in_memory_repository):
        service = LocationService(make_geocoder([]), in_memory_repository)

        with pytest.raises(NoMatch):
            await service.resolve("atlantis")
        assert in_memory_repository.inserts == 0

    @pytest.mark.asyncio
    async def test_geocoder_404_is_no_match(self, in_memory_repository):
        geocoder = make_geocoder(side_effect=UpstreamRejected("location", 404, '{"error":"Unable to geocode"}'))
        service = LocationService(geocoder, in_memory_repository)

        with pytest.raises(NoMatch):
            await service.resolve("atlantis")

    @pytest.mark.asyncio
    async def test_other_rejections_propagate(self, in_memory_repository):
        geocoder = make_geocoder(side_effect=UpstreamRejected("location", 401))
        service = LocationService(geocoder, in_memory_repository)

        with pytest.raises(UpstreamRejected):
            await service.resolve("seattle")

    @pytest.mark.asyncio
    async def test_provider_unavailable_propagates(self, in_memory_repository):
        geocoder = make_geocoder(side_effect=UpstreamUnavailable("location", "connection refused"))
        service = LocationService(geocoder, in_memory_repository)

        with pytest.raises(UpstreamUnavailable):
            await service.resolve("seattle")
        assert in_memory_repository.inserts == 0

    @pytest.mark.asyncio
    async def test_malformed_result_is_not_cached(self, in_memory_repository):
        service = LocationService(make_geocoder([{"lat": "1"}]), in_memory_repository)

        with pytest.raises(MalformedUpstreamData):
            await service.resolve("seattle")
        assert in_memory_repository.inserts == 0

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        repository = MagicMock()
        repository.get_by_search_query = AsyncMock(side_effect=StoreUnavailable("connection lost"))
        geocoder = make_geocoder(SEATTLE_GEOCODE)
        service = LocationService(geocoder, repository)

        with pytest.raises(StoreUnavailable):
            await service.resolve("seattle")
        geocoder.fetch.assert_not_awaited()
