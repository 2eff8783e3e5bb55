# cloudeats/api/__init__.py
from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.collection import Collection
from sqlalchemy.engine import Engine

from cloudeats.api.routers import auth, carts, health, menu, users
from cloudeats.api.routers import orders as orders_router
from cloudeats.data.cache import create_redis, wait_for_redis
from cloudeats.data.database import (
    create_db_engine,
    create_session_factory,
    init_schema,
    wait_for_database,
)
from cloudeats.data.documents import (
    create_mongo,
    ensure_indexes,
    get_orders_collection,
    wait_for_mongo,
)
from cloudeats.utils import settings
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    #bad payloads are 400 here, not FastAPI's 422
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def _base_app(title: str, service_name: str, lifespan) -> FastAPI:
    app = FastAPI(title=title, version="1.0.0", lifespan=lifespan)
    app.state.service_name = service_name

    origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    return app


def create_order_app(
    cache: redis.Redis | None = None,
    orders_collection: Collection | None = None,
) -> FastAPI:
    """
    Cart (Redis) + orders (MongoDB).

    Clients passed in are used as they are and left open,
    missing ones are created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        redis_client = None
        mongo_client = None

        try:
            if cache is None:
                redis_client = create_redis(settings.REDIS_URL)
                wait_for_redis(redis_client)
                app.state.cache = redis_client
            else:
                app.state.cache = cache

            if orders_collection is None:
                mongo_client = create_mongo(settings.MONGO_URL)
                wait_for_mongo(mongo_client)
                app.state.orders = get_orders_collection(mongo_client, settings.MONGO_DB)
            else:
                app.state.orders = orders_collection

            ensure_indexes(app.state.orders)
            logger.info("order-service ready")

            yield
        finally:
            if redis_client is not None:
                redis_client.close()
            if mongo_client is not None:
                mongo_client.close()
            logger.info("order-service stopped")

    app = _base_app("Order Service", "order-service", lifespan)
    app.include_router(carts.router)
    app.include_router(orders_router.router)
    return app


def create_user_app(engine: Engine | None = None) -> FastAPI:
    """User accounts over SQLAlchemy, tables are created on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = engine is None
        db_engine = create_db_engine(settings.DATABASE_URL) if owned else engine

        try:
            if owned:
                wait_for_database(db_engine)
            init_schema(db_engine)
            app.state.session_factory = create_session_factory(db_engine)
            logger.info("user-service ready")

            yield
        finally:
            if owned:
                db_engine.dispose()
            logger.info("user-service stopped")

    app = _base_app("User Service", "user-service", lifespan)
    app.include_router(auth.router)
    app.include_router(users.router)
    return app


def create_menu_app() -> FastAPI:
    """Menu ratings, validation only, no backing store."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("menu-service ready")
        yield
        logger.info("menu-service stopped")

    app = _base_app("Menu Service", "menu-service", lifespan)
    app.include_router(menu.router)
    return app
