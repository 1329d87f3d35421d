from pydantic import BaseModel
from typing import Optional, Union

# LocationIQ returns coordinates as strings; keep whatever the provider sent.
Coordinate = Union[str, float]

class LocationRecord(BaseModel):
    search_query: str
    formatted_query: str
    latitude: Coordinate
    longitude: Coordinate

class WeatherRecord(BaseModel):
    forecast: str
    time: str

class ReviewRecord(BaseModel):
    name: str
    image_url: Optional[str] = None
    price: Optional[str] = None
    rating: Optional[float] = None
    url: str
    created_at: int

class MovieRecord(BaseModel):
    title: str
    overview: Optional[str] = None
    average_votes: Optional[float] = None
    total_votes: Optional[int] = None
    image_url: str
    popularity: Optional[float] = None
    released_on: Optional[str] = None
    created_at: int

class TrailRecord(BaseModel):
    name: str
    location: Optional[str] = None
    length: Optional[float] = None
    stars: Optional[float] = None
    star_votes: Optional[int] = None
    summary: Optional[str] = None
    trail_url: Optional[str] = None
    conditions: Optional[str] = None
    condition_date: str
    condition_time: str
    created_at: int
