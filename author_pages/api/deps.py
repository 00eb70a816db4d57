# 依赖注入（仓库与服务的构造）
from __future__ import annotations

from typing import Optional

from fastapi import Depends

from author_pages.core.cache import TimedCache
from author_pages.core.config import settings
from author_pages.core.redis_client import RedisClient, get_redis_client
from author_pages.experiments.keys import ExperimentKeys
from author_pages.experiments.repository import ExperimentRepository
from author_pages.experiments.service import ExperimentService
from author_pages.platform_stats.repository import PlatformStatsRepository
from author_pages.platform_stats.service import PlatformStatsService
from author_pages.schemas.platform_stats_schema import PlatformStats


def get_experiment_repository(
    redis: RedisClient = Depends(get_redis_client),
) -> ExperimentRepository:
    return ExperimentRepository(redis, ExperimentKeys.with_prefix(settings.REDIS_KEY_PREFIX))


def get_experiment_service(
    repo: ExperimentRepository = Depends(get_experiment_repository),
) -> ExperimentService:
    return ExperimentService(repo, repository_timeout=settings.EXPERIMENTS_READ_TIMEOUT_SECONDS)


# 统计缓存需要跨请求保留，所以服务是应用级单例
_platform_stats_service: Optional[PlatformStatsService] = None


def get_platform_stats_service(
    redis: RedisClient = Depends(get_redis_client),
) -> PlatformStatsService:
    global _platform_stats_service
    if _platform_stats_service is None:
        repo = PlatformStatsRepository(redis, key_prefix=settings.REDIS_KEY_PREFIX)
        cache: TimedCache[PlatformStats] = TimedCache(settings.PLATFORM_STATS_CACHE_TTL_SECONDS)
        _platform_stats_service = PlatformStatsService(repo, cache)
    return _platform_stats_service
