# cloudeats/data/cache.py
import redis

from cloudeats.utils.retry import startup_retry
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


def create_redis(url: str) -> redis.Redis:
    return redis.Redis.from_url(url, decode_responses=True)


@startup_retry()
def wait_for_redis(client: redis.Redis) -> None:
    client.ping()
    logger.info("Connected to Redis")
