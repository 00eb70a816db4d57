"""
平台统计模块

落地页展示的作者数、书籍数等统计：Redis 中保存预计算结果，服务层带 TTL 缓存。
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from author_pages.platform_stats.repository import PlatformStatsRepository
    from author_pages.platform_stats.service import PlatformStatsService

__all__ = [
    "PlatformStatsRepository",
    "PlatformStatsService",
]
