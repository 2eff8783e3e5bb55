# cloudeats/data/documents.py
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

from cloudeats.utils.retry import startup_retry
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)

ORDERS_COLLECTION = "orders"


def create_mongo(url: str) -> MongoClient:
    return MongoClient(url, tz_aware=True)


@startup_retry()
def wait_for_mongo(client: MongoClient) -> None:
    client.admin.command("ping")
    logger.info("Connected to MongoDB")


def get_orders_collection(client: MongoClient, db_name: str) -> Collection:
    return client[db_name][ORDERS_COLLECTION]


def ensure_indexes(orders: Collection) -> None:
    orders.create_index([("userId", ASCENDING)])
    orders.create_index([("createdAt", DESCENDING)])
    orders.create_index([("status", ASCENDING)])
    logger.info("MongoDB indexes created")
