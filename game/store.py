import redis

from config import StorageConfig
from utils import log


class MemoryStore:
    """
    Process-local key-value store. Used when Redis is unavailable (development)
    and in tests.
    """

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


class RedisStore:
    """
    Redis-backed key-value store for statistics shared across workers.
    Values are JSON strings.
    """

    def __init__(self, client):
        self.client = client

    def get(self, key):
        value = self.client.get(key)
        if isinstance(value, bytes):
            value = value.decode('utf-8')
        return value

    def set(self, key, value):
        self.client.set(key, value)

    def delete(self, key):
        self.client.delete(key)


def create_store(backend=None):
    """
    Connect to Redis, falling back to in-memory storage if it is unreachable.
    """
    backend = backend or StorageConfig.BACKEND
    if backend == 'memory':
        log("STORE", "Using in-memory storage")
        return MemoryStore()

    try:
        client = redis.Redis(
            host=StorageConfig.REDIS_HOST,
            port=StorageConfig.REDIS_PORT,
            password=StorageConfig.REDIS_PASSWORD,
            socket_connect_timeout=StorageConfig.CONNECT_TIMEOUT,
        )
        # Test connection
        client.ping()
        log("STORE", f"Connected to Redis at {StorageConfig.REDIS_HOST}:{StorageConfig.REDIS_PORT}")
        return RedisStore(client)
    except (redis.RedisError, OSError) as e:
        log("STORE", f"Redis connection failed: {e}. Using in-memory storage.")
        return MemoryStore()
