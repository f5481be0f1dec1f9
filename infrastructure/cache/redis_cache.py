import json

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.currency import ConversionRecord


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, history_key: str = "currencyHistory"):
        self.redis = redis_client
        self.history_key = history_key

    async def get_history(self) -> list[ConversionRecord] | None:
        try:
            data = await self.redis.get(self.history_key)
        except RedisError as e:
            raise CacheError(f"Failed to read {self.history_key}: {e}") from e

        if not data:
            return None

        try:
            items = json.loads(data)
        except (json.JSONDecodeError, TypeError) as e:
            raise CacheError(f"Invalid json data under {self.history_key}") from e

        if not isinstance(items, list):
            raise CacheError(f"Invalid json data under {self.history_key}: expected a list")

        try:
            return [ConversionRecord.from_dict(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            raise CacheError(f"Malformed history record under {self.history_key}: {e}") from e

    async def set_history(self, records: list[ConversionRecord]) -> None:
        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        try:
            await self.redis.set(self.history_key, payload)
        except RedisError as e:
            raise CacheError(f"Failed to write {self.history_key}: {e}") from e
