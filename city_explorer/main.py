import logging
from typing import Optional

from databases import Database
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, settings
from .errors import CityExplorerError
from .repositories.location_repository import LocationRepository
from .routers.city_router import city_router
from .services.location_service import LocationService
from .services.providers import Providers
from .services.resource_service import ResourceService
from .utils.normalizers import normalize_forecasts, normalize_movies, normalize_reviews, normalize_trails

# ロギング設定
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI):
    # Every failure kind gets the same status; only the body says which one it was.
    @app.exception_handler(CityExplorerError)
    async def city_explorer_error_handler(request: Request, exc: CityExplorerError):
        logger.error(f"{request.method} {request.url.path} failed with {exc.kind}: {exc.message}")
        return JSONResponse(status_code=500, content={"error": exc.kind, "detail": exc.message})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="City Explorer API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # サービスの初期化
    location_repository = LocationRepository(Database(app_settings.DATABASE_URL))
    providers = Providers(app_settings)
    app.state.location_repository = location_repository
    app.state.location_service = LocationService(providers.geocode, location_repository)
    app.state.weather_service = ResourceService(providers.weather, normalize_forecasts)
    app.state.yelp_service = ResourceService(providers.yelp, normalize_reviews)
    app.state.movie_service = ResourceService(providers.movies, normalize_movies)
    app.state.trail_service = ResourceService(providers.trails, normalize_trails)

    @app.on_event("startup")
    async def startup():
        missing = app_settings.missing_api_keys()
        if missing:
            logger.warning(f"API keys not configured: {', '.join(missing)}")
        await location_repository.connect()
        if app_settings.CREATE_SCHEMA_ON_STARTUP:
            await location_repository.create_schema()
        logger.info("Location store connected")

    @app.on_event("shutdown")
    async def shutdown():
        await location_repository.disconnect()
        logger.info("Location store disconnected")

    @app.get("/")
    async def root():
        return {"message": "City Explorer API", "version": "1.0"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(city_router)
    register_error_handlers(app)
    return app


app = create_app()
