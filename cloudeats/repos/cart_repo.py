# cloudeats/repos/cart_repo.py
import json
from typing import Any, Dict

import redis
from redis.exceptions import RedisError

from cloudeats.domain.errors import StoreFailure
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


def cart_key(user_id: int) -> str:
    return f"cart:user:{user_id}"


class CartRepo:
    """
    Cart record in Redis, one JSON blob per user.
    Every save rewrites the whole cart and resets its TTL.
    """

    def __init__(self, cache: redis.Redis):
        self.cache = cache

    def get_cart(self, user_id: int) -> Dict[str, Any] | None:
        try:
            raw = self.cache.get(cart_key(user_id))
        except RedisError as e:
            logger.exception(f"Redis GET failed for user {user_id}")
            raise StoreFailure("Cache read failed") from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except ValueError as e:
            logger.exception(f"Corrupted cart entry for user {user_id}")
            raise StoreFailure("Cache entry unreadable") from e

    def save_cart(self, user_id: int, cart: Dict[str, Any], ttl: int) -> None:
        try:
            #SETEX, ttl counts from the last write
            self.cache.setex(cart_key(user_id), ttl, json.dumps(cart))
        except RedisError as e:
            logger.exception(f"Redis SETEX failed for user {user_id}")
            raise StoreFailure("Cache write failed") from e

    def delete_cart(self, user_id: int) -> None:
        try:
            self.cache.delete(cart_key(user_id))
        except RedisError as e:
            logger.exception(f"Redis DEL failed for user {user_id}")
            raise StoreFailure("Cache delete failed") from e
