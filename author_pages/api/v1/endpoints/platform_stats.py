from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from loguru import logger

from author_pages.api.deps import get_platform_stats_service
from author_pages.platform_stats.service import PlatformStatsService
from author_pages.schemas.platform_stats_schema import PlatformStats

router = APIRouter()


@router.get(
    "/platform",
    response_model=PlatformStats,
    response_model_exclude={"id"},
    summary="获取平台统计",
)
async def get_platform_stats(
    response: Response,
    service: PlatformStatsService = Depends(get_platform_stats_service),
) -> PlatformStats:
    # 服务层自行兜底，不会抛异常
    stats = await service.get_platform_stats()
    response.headers["Cache-Control"] = "public, max-age=3600"
    logger.info("Returned platform stats")
    return stats
