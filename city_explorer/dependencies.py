from fastapi import Request

from .services.location_service import LocationService
from .services.resource_service import ResourceService

# Services are built once per application in main.create_app and kept on app.state.

def get_location_service(request: Request) -> LocationService:
    return request.app.state.location_service

def get_weather_service(request: Request) -> ResourceService:
    return request.app.state.weather_service

def get_yelp_service(request: Request) -> ResourceService:
    return request.app.state.yelp_service

def get_movie_service(request: Request) -> ResourceService:
    return request.app.state.movie_service

def get_trail_service(request: Request) -> ResourceService:
    return request.app.state.trail_service
