# 路由汇总
from fastapi import APIRouter

from author_pages.api.v1.endpoints import experiments, platform_stats

api_router = APIRouter()

# 挂载 A/B 实验模块 (访问地址: /api/v1/experiments)
api_router.include_router(experiments.router, prefix="/experiments", tags=["A/B 实验"])

# 挂载平台统计模块 (访问地址: /api/v1/stats/...)
api_router.include_router(platform_stats.router, prefix="/stats", tags=["平台统计"])
