"""
API 端点模块

包含所有 v1 版本的 API 端点定义
"""

from author_pages.api.v1.endpoints import experiments, platform_stats

__all__ = ["experiments", "platform_stats"]
