import logging

import redis

from taxilink.config import conf

logger = logging.getLogger(__name__)

pool = redis.ConnectionPool(
    host=conf.REDIS_HOST,
    port=conf.REDIS_PORT,
    db=conf.REDIS_DB,
    password=conf.REDIS_PASSWORD,
    decode_responses=True,
    socket_connect_timeout=5,
    socket_timeout=5,
    retry_on_timeout=True,
    health_check_interval=30
)

redis_client = redis.Redis(connection_pool=pool)


def check_redis_connection(client: redis.Redis = redis_client) -> None:
    """Test connection to Redis and log if it fails."""
    try:
        if client.ping():
            logger.info("Connected to Redis successfully.")
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        raise  # Re-raise so the app fails fast instead of silently continuing


# Example use
if __name__ == "__main__":
    check_redis_connection()
