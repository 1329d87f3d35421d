"""Failures raised by the resolver, clients and normalizers.

Handlers do not distinguish between them: every subclass is rendered as the
same server-error response (see ``main.register_error_handlers``).
"""
from typing import Optional


class CityExplorerError(Exception):
    """Base class for every failure the request handlers know how to render."""

    kind = "CityExplorerError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailable(CityExplorerError):
    kind = "UpstreamUnavailable"

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class UpstreamRejected(CityExplorerError):
    kind = "UpstreamRejected"

    def __init__(self, provider: str, status: int, body: Optional[str] = None):
        detail = f"{provider} responded with HTTP {status}"
        if body:
            detail = f"{detail}: {body[:200]}"
        super().__init__(detail)
        self.provider = provider
        self.status = status


class NoMatch(CityExplorerError):
    kind = "NoMatch"


class MalformedUpstreamData(CityExplorerError):
    kind = "MalformedUpstreamData"


class StoreUnavailable(CityExplorerError):
    kind = "StoreUnavailable"
