import os

#cheap hashes in tests, must be set before cloudeats.utils.settings is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from uuid import uuid4

import fakeredis
import mongomock
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from cloudeats.api import create_menu_app, create_order_app, create_user_app
from cloudeats.data.database import create_db_engine


@pytest.fixture()
def cache():
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture()
def orders():
    return mongomock.MongoClient()[f"orders_{uuid4().hex}"]["orders"]


@pytest.fixture()
def order_client(cache, orders):
    app = create_order_app(cache=cache, orders_collection=orders)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def engine():
    engine = create_db_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def user_client(engine):
    app = create_user_app(engine=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def menu_client():
    with TestClient(create_menu_app()) as client:
        yield client
