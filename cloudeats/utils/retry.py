# cloudeats/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import redis
from pymongo.errors import PyMongoError
from sqlalchemy.exc import OperationalError

#startup only, containers come up before redis/mongo/db accept connections
#request paths never retry
STARTUP_ERRORS = (redis.RedisError, PyMongoError, OperationalError)


def startup_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(STARTUP_ERRORS),
    )
