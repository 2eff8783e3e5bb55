# cloudeats/repos/order_repo.py
from datetime import datetime
from typing import Any, Dict, List

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cloudeats.domain.errors import StoreFailure
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


class OrderRepo:
    def __init__(self, orders: Collection):
        self.orders = orders

    def create_order(self, order: Dict[str, Any]) -> ObjectId:
        try:
            result = self.orders.insert_one(order)
        except (PyMongoError, InvalidDocument, OverflowError) as e:
            #bson encoding errors are not PyMongoError
            logger.exception(f"Order insert failed for user {order.get('userId')}")
            raise StoreFailure("Order write failed") from e
        return result.inserted_id

    def get_orders_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        try:
            return list(self.orders.find({"userId": user_id}).sort("createdAt", DESCENDING))
        except PyMongoError as e:
            logger.exception(f"Order lookup failed for user {user_id}")
            raise StoreFailure("Order read failed") from e

    def get_order(self, order_id: ObjectId) -> Dict[str, Any] | None:
        try:
            return self.orders.find_one({"_id": order_id})
        except PyMongoError as e:
            logger.exception(f"Order lookup failed for {order_id}")
            raise StoreFailure("Order read failed") from e

    def update_order_status(self, order_id: ObjectId, status: str, updated_at: datetime) -> bool:
        """Returns False when no order matched."""
        try:
            result = self.orders.update_one(
                {"_id": order_id},
                {"$set": {"status": status, "updatedAt": updated_at}},
            )
        except PyMongoError as e:
            logger.exception(f"Order status update failed for {order_id}")
            raise StoreFailure("Order write failed") from e
        return result.matched_count > 0
