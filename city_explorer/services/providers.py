"""Outbound endpoints for each resource type."""
from typing import Optional

import aiohttp

from ..config import Settings
from .upstream_client import AUTH_BEARER, AUTH_QUERY, UpstreamClient

GEOCODE_URL = "https://us1.locationiq.com/v1/search.php"
WEATHER_URL = "https://api.weatherbit.io/v2.0/forecast/daily"
YELP_URL = "https://api.yelp.com/v3/businesses/search"
MOVIES_URL = "https://api.themoviedb.org/3/search/movie"
TRAILS_URL = "https://www.hikingproject.com/data/get-trails"

FORECAST_DAYS = 5
TRAIL_MAX_DISTANCE = 200


def geocode_params(query: str) -> dict:
    return {"q": query, "format": "json", "limit": 1}


def weather_params(latitude: float, longitude: float) -> dict:
    return {"lat": latitude, "lon": longitude, "lang": "en", "days": FORECAST_DAYS}


def yelp_params(search_query: str) -> dict:
    return {"location": search_query}


def movie_params(search_query: str) -> dict:
    return {"query": search_query, "language": "en-US", "page": 1}


def trail_params(latitude: float, longitude: float) -> dict:
    return {"lat": latitude, "lon": longitude, "maxDistance": TRAIL_MAX_DISTANCE}


class Providers:
    """The five configured clients, built from one Settings instance."""

    def __init__(self, settings: Settings, session: Optional[aiohttp.ClientSession] = None):
        timeout = settings.UPSTREAM_TIMEOUT_SECONDS
        self.geocode = UpstreamClient(
            "location", GEOCODE_URL, geocode_params, settings.GEOCODE_API_KEY,
            auth=AUTH_QUERY, key_param="key", timeout_seconds=timeout, session=session,
        )
        self.weather = UpstreamClient(
            "weather", WEATHER_URL, weather_params, settings.WEATHER_API_KEY,
            auth=AUTH_QUERY, key_param="key", timeout_seconds=timeout, session=session,
        )
        self.yelp = UpstreamClient(
            "yelp", YELP_URL, yelp_params, settings.YELP_API_KEY,
            auth=AUTH_BEARER, timeout_seconds=timeout, session=session,
        )
        self.movies = UpstreamClient(
            "movies", MOVIES_URL, movie_params, settings.MOVIE_API_KEY,
            auth=AUTH_QUERY, key_param="api_key", timeout_seconds=timeout, session=session,
        )
        self.trails = UpstreamClient(
            "trails", TRAILS_URL, trail_params, settings.TRAIL_API_KEY,
            auth=AUTH_QUERY, key_param="key", timeout_seconds=timeout, session=session,
        )
