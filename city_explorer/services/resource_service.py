import logging
from typing import Any, Callable, List

from pydantic import BaseModel

from .upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


class ResourceService:
    """Fetch one uncached resource and normalize the provider's result list."""

    def __init__(self, client: UpstreamClient, normalize: Callable[[Any], List[BaseModel]]):
        self.client = client
        self.normalize = normalize

    async def search(self, **params) -> List[BaseModel]:
        body = await self.client.fetch(**params)
        results = self.normalize(body)
        logger.info(f"{self.client.name}: {len(results)} results")
        return results
