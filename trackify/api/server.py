"""
Trackify - Vehicle lookup API
FastAPI + MongoDB
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trackify.api import vehicles
from trackify.core.location.coordinate_parser import LocationFormatError
from trackify.database.errors import StorageError
from trackify.database.mongodb_manager import MongoDBManager
from trackify.utils.logger import get_logger


def create_app(config: dict, db: Optional[MongoDBManager] = None) -> FastAPI:
    logger = get_logger(__name__)
    if db is None:
        db = MongoDBManager(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Trackify API started")
        yield
        db.close()
        logger.info("Trackify API shutting down")

    app = FastAPI(
        title="Trackify API",
        description="Read-only lookup of license plate sightings",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config['server']['cors_origins'],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"{request.url.path} failed: {exc}")
        return JSONResponse(status_code=500, content={"message": str(exc)})

    @app.exception_handler(LocationFormatError)
    async def location_error_handler(request: Request, exc: LocationFormatError):
        return JSONResponse(status_code=422, content={"message": str(exc)})

    app.include_router(vehicles.router, prefix="/api/vehicles", tags=["vehicles"])

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "database": "up" if db.ping() else "down"}

    return app
