import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional

import aiohttp

from ..errors import MalformedUpstreamData, UpstreamRejected, UpstreamUnavailable

logger = logging.getLogger(__name__)

AUTH_QUERY = "query"
AUTH_BEARER = "bearer"


class UpstreamClient:
    """One outbound GET against a single provider.

    Instances differ only by URL, the function that turns caller arguments into
    query parameters, and where the API key goes (a query parameter or a bearer
    header). Failures are raised immediately; nothing is retried.
    """

    def __init__(
        self,
        name: str,
        url: str,
        build_params: Callable[..., Dict[str, Any]],
        api_key: str,
        auth: str = AUTH_QUERY,
        key_param: str = "key",
        timeout_seconds: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        if auth not in (AUTH_QUERY, AUTH_BEARER):
            raise ValueError(f"Unknown auth strategy: {auth}")
        self.name = name
        self.url = url
        self.build_params = build_params
        self.api_key = api_key
        self.auth = auth
        self.key_param = key_param
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds) if timeout_seconds else None
        self.session = session

    def _request_parts(self, **kwargs) -> tuple[Dict[str, Any], Dict[str, str]]:
        params = {k: v for k, v in self.build_params(**kwargs).items() if v is not None}
        headers: Dict[str, str] = {}
        if self.auth == AUTH_BEARER:
            headers["Authorization"] = f"Bearer {self.api_key}"
        else:
            params[self.key_param] = self.api_key
        return params, headers

    async def fetch(self, **kwargs) -> Any:
        params, headers = self._request_parts(**kwargs)
        logger.info(f"GET {self.name} {self.url} ({', '.join(k for k in params if k != self.key_param)})")

        if self.session is not None:
            return await self._get(self.session, params, headers)
        async with aiohttp.ClientSession() as session:
            return await self._get(session, params, headers)

    async def _get(self, session: aiohttp.ClientSession, params: Dict[str, Any], headers: Dict[str, str]) -> Any:
        try:
            async with session.get(self.url, params=params, headers=headers, timeout=self.timeout) as response:
                if response.status >= 400:
                    body = await response.text(errors="replace")
                    logger.warning(f"{self.name} rejected request: HTTP {response.status}")
                    raise UpstreamRejected(self.name, response.status, body)
                try:
                    return await response.json(content_type=None)
                except (json.JSONDecodeError, UnicodeDecodeError, aiohttp.ContentTypeError) as e:
                    raise MalformedUpstreamData(f"{self.name} returned a non-JSON body") from e
        except asyncio.TimeoutError as e:
            logger.error(f"{self.name} timed out")
            raise UpstreamUnavailable(self.name, "request timed out") from e
        except aiohttp.ClientError as e:
            logger.error(f"{self.name} request failed: {e}")
            raise UpstreamUnavailable(self.name, str(e)) from e
