"""Map provider JSON onto the service's record types.

Every function here is pure apart from reading the clock for ``created_at``.
A required field that is missing or of the wrong type raises
``MalformedUpstreamData``; a provider result array that is present but empty
raises ``NoMatch`` so callers never have to guess what an empty list means.
"""
import time
from typing import Any, Callable, Dict, List, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import MalformedUpstreamData, NoMatch
from ..models.schemas import (
    LocationRecord,
    MovieRecord,
    ReviewRecord,
    TrailRecord,
    WeatherRecord,
)

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

# "YYYY-MM-DD" + one separator + at least one character of time
CONDITION_DATE_LENGTH = 10
CONDITION_TIME_OFFSET = CONDITION_DATE_LENGTH + 1
MIN_CONDITION_LENGTH = CONDITION_TIME_OFFSET + 1

RecordT = TypeVar("RecordT", bound=BaseModel)


def _now_millis() -> int:
    return int(time.time() * 1000)


def _require(item: Dict[str, Any], field: str, resource: str) -> Any:
    if not isinstance(item, dict):
        raise MalformedUpstreamData(f"{resource} item is not an object: {item!r}")
    value = item.get(field)
    if value is None:
        raise MalformedUpstreamData(f"{resource} item is missing '{field}'")
    return value


def _build(model: Callable[..., RecordT], resource: str, **fields) -> RecordT:
    try:
        return model(**fields)
    except ValidationError as e:
        raise MalformedUpstreamData(f"{resource} item has unexpected shape: {e}") from e


def _items(body: Any, key: str, resource: str) -> List[Any]:
    if not isinstance(body, dict) or not isinstance(body.get(key), list):
        raise MalformedUpstreamData(f"{resource} response has no '{key}' array")
    items = body[key]
    if not items:
        raise NoMatch(f"{resource} provider returned no results")
    return items


def normalize_location(search_query: str, item: Dict[str, Any]) -> LocationRecord:
    return _build(
        LocationRecord,
        "location",
        search_query=search_query,
        formatted_query=_require(item, "display_name", "location"),
        latitude=_require(item, "lat", "location"),
        longitude=_require(item, "lon", "location"),
    )


def normalize_weather(day: Dict[str, Any]) -> WeatherRecord:
    weather = _require(day, "weather", "weather")
    return _build(
        WeatherRecord,
        "weather",
        forecast=_require(weather, "description", "weather"),
        time=_require(day, "datetime", "weather"),
    )


def normalize_review(business: Dict[str, Any]) -> ReviewRecord:
    return _build(
        ReviewRecord,
        "yelp",
        name=_require(business, "name", "yelp"),
        image_url=business.get("image_url"),
        price=business.get("price"),
        rating=business.get("rating"),
        url=_require(business, "url", "yelp"),
        created_at=_now_millis(),
    )


def normalize_movie(movie: Dict[str, Any]) -> MovieRecord:
    # A missing poster_path leaves "None" in the URL rather than dropping the field.
    return _build(
        MovieRecord,
        "movies",
        title=_require(movie, "title", "movies"),
        overview=movie.get("overview"),
        average_votes=movie.get("vote_average"),
        total_votes=movie.get("vote_count"),
        image_url=f"{TMDB_IMAGE_BASE_URL}{movie.get('poster_path')}",
        popularity=movie.get("popularity"),
        released_on=movie.get("release_date"),
        created_at=_now_millis(),
    )


def split_condition_date(condition_date: Any) -> tuple[str, str]:
    """Split ``"2023-04-01 15:30:00"`` into its date and time parts."""
    if not isinstance(condition_date, str) or len(condition_date) < MIN_CONDITION_LENGTH:
        raise MalformedUpstreamData(
            f"trails conditionDate must be a date, a separator and a time, got {condition_date!r}"
        )
    return condition_date[:CONDITION_DATE_LENGTH], condition_date[CONDITION_TIME_OFFSET:]


def normalize_trail(trail: Dict[str, Any]) -> TrailRecord:
    condition_date, condition_time = split_condition_date(
        _require(trail, "conditionDate", "trails")
    )
    return _build(
        TrailRecord,
        "trails",
        name=_require(trail, "name", "trails"),
        location=trail.get("location"),
        length=trail.get("length"),
        stars=trail.get("stars"),
        star_votes=trail.get("starVotes"),
        summary=trail.get("summary"),
        trail_url=trail.get("url"),
        conditions=trail.get("conditionDetails"),
        condition_date=condition_date,
        condition_time=condition_time,
        created_at=_now_millis(),
    )


def normalize_locations(search_query: str, body: Any) -> LocationRecord:
    """LocationIQ answers with a bare array; only the first match is used."""
    if not isinstance(body, list):
        raise MalformedUpstreamData("location response is not an array")
    if not body:
        raise NoMatch(f"no location found for '{search_query}'")
    return normalize_location(search_query, body[0])


def normalize_forecasts(body: Any) -> List[WeatherRecord]:
    return [normalize_weather(day) for day in _items(body, "data", "weather")]


def normalize_reviews(body: Any) -> List[ReviewRecord]:
    return [normalize_review(business) for business in _items(body, "businesses", "yelp")]


def normalize_movies(body: Any) -> List[MovieRecord]:
    return [normalize_movie(movie) for movie in _items(body, "results", "movies")]


def normalize_trails(body: Any) -> List[TrailRecord]:
    return [normalize_trail(trail) for trail in _items(body, "trails", "trails")]
