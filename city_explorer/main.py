"""City Explorer backend — FastAPI application entry point.

Each endpoint takes the location search string in ``?data=`` and answers
with canonical records served through the read-through cache.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from city_explorer.config import Settings, settings
from city_explorer.database import Database
from city_explorer.errors import CityExplorerError
from city_explorer.orchestrator.router import OrchestratorRouter, build_router
from city_explorer.orchestrator.schemas import (
    BusinessRecord,
    LocationRecord,
    MeetupRecord,
    MovieRecord,
    TrailRecord,
    WeatherRecord,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("city_explorer")

GENERIC_ERROR = "Sorry, something went wrong"


def create_app(app_settings: Settings | None = None, router: OrchestratorRouter | None = None) -> FastAPI:
    """Build the app; pass a ready router to skip wiring from settings."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("City Explorer backend starting")
        owns_database = router is None
        if owns_database:
            database = Database(app_settings.database_url)
            db_ok = await database.connect()
            logger.info("Database: %s", "connected" if db_ok else "unavailable")
            app.state.router = build_router(app_settings, database)

        yield

        if owns_database:
            await app.state.router.database.close()
        logger.info("City Explorer backend shutting down")

    app = FastAPI(
        title="City Explorer API",
        description="Location-keyed aggregator with a read-through relational cache",
        version="1.0.0",
        lifespan=lifespan,
    )
    if router is not None:
        app.state.router = router

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(CityExplorerError)
    async def explorer_error(request: Request, exc: CityExplorerError):
        logger.error("Request failed | %s | %s: %s", request.url.path, type(exc).__name__, str(exc)[:300])
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error | %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request: 'data' must be a non-empty search string."})

    # ═══════════════ ENDPOINTS ═══════════════

    @app.get("/health")
    async def health(request: Request):
        return {"status": "ok", "database": request.app.state.router.database.available}

    @app.get("/location", response_model=LocationRecord)
    async def get_location(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.location(_query(data))

    @app.get("/location/{location_id}", response_model=LocationRecord)
    async def get_location_by_id(request: Request, location_id: int):
        return await request.app.state.router.resolver.get(location_id)

    @app.get("/weather", response_model=list[WeatherRecord])
    async def get_weather(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.category("weather", _query(data))

    @app.get("/yelp", response_model=list[BusinessRecord])
    async def get_yelp(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.category("yelp", _query(data))

    @app.get("/movies", response_model=list[MovieRecord])
    async def get_movies(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.category("movies", _query(data))

    @app.get("/meetups", response_model=list[MeetupRecord])
    async def get_meetups(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.category("meetups", _query(data))

    @app.get("/trails", response_model=list[TrailRecord])
    async def get_trails(request: Request, data: str = Query(..., min_length=1)):
        return await request.app.state.router.category("trails", _query(data))

    return app


def _query(data: str) -> str:
    # Blank input would geocode to nothing; reject it like a missing parameter
    if not data.strip():
        raise RequestValidationError([{"loc": ("query", "data"), "msg": "blank", "type": "value_error"}])
    return data


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("city_explorer.main:app", host=settings.host, port=settings.port)
