import json
import logging
import re
from typing import Any, Dict, Optional, Protocol

from redis import Redis
from redis.exceptions import RedisError, ConnectionError as RedisConnectionError

from taxilink.config import conf

logger = logging.getLogger(__name__)


class Store(Protocol):
    """Process-wide key-value state. Values are JSON-compatible python objects."""

    def load(self, key: str, default: Any = None) -> Any:
        ...

    def save(self, key: str, value: Any) -> bool:
        ...

    def delete(self, key: str) -> bool:
        ...


def _format_key(prefix: str, key: str) -> str:
    if not key or not isinstance(key, str):
        raise ValueError("key must be a non-empty string")

    sanitized = re.sub(r'[^a-zA-Z0-9_-]', '', key)
    if not sanitized:
        raise ValueError("key contains only invalid characters")

    return f"{prefix}_{sanitized}"


def _decode(name: str, raw: Optional[str], default: Any) -> Any:
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as e:  # JSONDecodeError and UnicodeDecodeError are ValueErrors
        logger.error(f"Data parsing error for key {name}, using default: {e}")
        return default


class InMemoryStore:

    def __init__(self, data: Optional[Dict[str, str]] = None, prefix: Optional[str] = None):
        # raw JSON strings, keyed by the namespaced key
        self.data = data if data is not None else {}
        self.prefix = prefix or conf.STORE_PREFIX

    def key(self, key: str) -> str:
        return _format_key(self.prefix, key)

    def load(self, key: str, default: Any = None) -> Any:
        name = self.key(key)
        return _decode(name, self.data.get(name), default)

    def save(self, key: str, value: Any) -> bool:
        self.data[self.key(key)] = json.dumps(value, ensure_ascii=False)
        return True

    def delete(self, key: str) -> bool:
        return self.data.pop(self.key(key), None) is not None


class RedisStore:

    def __init__(self, redis_client: Optional[Redis] = None, prefix: Optional[str] = None):
        if redis_client is None:
            from taxilink.db.redis_db import redis_client as connection
            redis_client = connection
        self.redis = redis_client
        self.prefix = prefix or conf.STORE_PREFIX

    def key(self, key: str) -> str:
        return _format_key(self.prefix, key)

    def load(self, key: str, default: Any = None) -> Any:
        name = self.key(key)
        try:
            raw = self.redis.get(name)
        except (RedisError, RedisConnectionError) as e:
            logger.error(f"Redis error getting key {name}: {e}")
            return default
        except UnicodeDecodeError as e:
            # decode_responses=True decodes inside get()
            logger.error(f"Data parsing error for key {name}, using default: {e}")
            return default
        return _decode(name, raw, default)

    def save(self, key: str, value: Any) -> bool:
        name = self.key(key)
        try:
            return bool(self.redis.set(name, json.dumps(value, ensure_ascii=False)))
        except (RedisError, RedisConnectionError) as e:
            logger.error(f"Redis error setting key {name}: {e}")
            return False

    def delete(self, key: str) -> bool:
        name = self.key(key)
        try:
            return bool(self.redis.delete(name))
        except (RedisError, RedisConnectionError) as e:
            logger.exception(f"Redis error deleting key {name}: {e}")
            return False


def build_store(backend: Optional[str] = None) -> Store:
    backend = (backend or conf.STORE_BACKEND or "memory").lower()
    if backend == "redis":
        return RedisStore()
    if backend == "memory":
        return InMemoryStore()
    raise ValueError(f"Unknown store backend: {backend}")
