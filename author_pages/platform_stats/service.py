from __future__ import annotations

from datetime import datetime, timezone

from loguru import logger

from author_pages.core.cache import TimedCache
from author_pages.platform_stats.repository import PlatformStatsRepository
from author_pages.schemas.platform_stats_schema import PlatformStats


class PlatformStatsService:
    def __init__(self, repo: PlatformStatsRepository, cache: TimedCache[PlatformStats]):
        self._repo = repo
        self._cache = cache

    @property
    def cache(self) -> TimedCache[PlatformStats]:
        return self._cache

    async def get_platform_stats(self) -> PlatformStats:
        """
        读取平台统计，不会抛异常：

        - 缓存未过期：直接返回
        - 缓存过期/为空：读仓库；仓库里没有记录时返回默认值
        - 仓库出错：返回过期缓存；从未缓存过则返回默认值
        """
        cached = self._cache.get()
        if cached is not None:
            logger.info(f"Returning cached platform stats (age: {self._cache.age_seconds():.0f}s)")
            return cached

        logger.info("Platform stats cache miss or expired, reading repository")
        try:
            stats = await self._repo.get_current_stats()
        except Exception as exc:
            logger.exception(f"Failed to read platform stats: {exc}")
            stale = self._cache.get_stale()
            if stale is not None:
                logger.info("Returning stale cached platform stats")
                return stale
            return PlatformStats()

        if stats is None:
            logger.warning("No platform stats stored, returning defaults")
            stats = PlatformStats()

        self._cache.set(stats)
        return stats

    async def update_stats(self, stats: PlatformStats) -> PlatformStats:
        stamped = stats.model_copy(
            update={"id": "current", "last_updated": datetime.now(timezone.utc).isoformat()}
        )
        saved = await self._repo.upsert_stats(stamped)
        self._cache.set(saved)
        return saved
