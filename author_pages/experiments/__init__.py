"""
A/B 实验模块

提供确定性分桶、版本分配、实验文档仓库与按页面获取实验分配的服务。
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from author_pages.experiments.allocator import NoVariantsError, assign_variant
    from author_pages.experiments.hashing import hash_to_percentage
    from author_pages.experiments.repository import ExperimentRepository
    from author_pages.experiments.service import ExperimentService

__all__ = [
    "ExperimentRepository",
    "ExperimentService",
    "NoVariantsError",
    "assign_variant",
    "hash_to_percentage",
]
