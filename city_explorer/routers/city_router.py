from typing import List

from fastapi import APIRouter, Depends, Query

from ..dependencies import (
    get_location_service,
    get_movie_service,
    get_trail_service,
    get_weather_service,
    get_yelp_service,
)
from ..models.schemas import LocationRecord, MovieRecord, ReviewRecord, TrailRecord, WeatherRecord
from ..services.location_service import LocationService
from ..services.resource_service import ResourceService

city_router = APIRouter()

@city_router.get("/location", response_model=LocationRecord)
async def get_location(
    city: str = Query(...),
    location_service: LocationService = Depends(get_location_service),
):
    return await location_service.resolve(city)

@city_router.get("/weather", response_model=List[WeatherRecord])
async def get_weather(
    latitude: float = Query(...),
    longitude: float = Query(...),
    weather_service: ResourceService = Depends(get_weather_service),
):
    return await weather_service.search(latitude=latitude, longitude=longitude)

@city_router.get("/yelp", response_model=List[ReviewRecord])
async def get_yelp(
    search_query: str = Query(...),
    yelp_service: ResourceService = Depends(get_yelp_service),
):
    return await yelp_service.search(search_query=search_query)

@city_router.get("/movies", response_model=List[MovieRecord])
async def get_movies(
    search_query: str = Query(...),
    movie_service: ResourceService = Depends(get_movie_service),
):
    return await movie_service.search(search_query=search_query)

@city_router.get("/trails", response_model=List[TrailRecord])
async def get_trails(
    latitude: float = Query(...),
    longitude: float = Query(...),
    trail_service: ResourceService = Depends(get_trail_service),
):
    return await trail_service.search(latitude=latitude, longitude=longitude)
