from __future__ import annotations

from typing import Any, Optional, Protocol

from loguru import logger

from author_pages.schemas.platform_stats_schema import PlatformStats


class _RedisLike(Protocol):
    @property
    def client(self) -> Any: ...


class PlatformStatsRepository:
    def __init__(self, redis_client: _RedisLike, *, key_prefix: str = ""):
        self._redis_client = redis_client
        self._key = f"{key_prefix or ''}platform_stats:current"

    @property
    def key(self) -> str:
        return self._key

    async def get_current_stats(self) -> Optional[PlatformStats]:
        doc = await self._redis_client.client.get(self._key)
        if not doc:
            return None
        return PlatformStats.model_validate_json(doc)

    async def upsert_stats(self, stats: PlatformStats) -> PlatformStats:
        await self._redis_client.client.set(self._key, stats.model_dump_json(by_alias=True))
        logger.info(f"Platform stats saved: {self._key}")
        return stats
