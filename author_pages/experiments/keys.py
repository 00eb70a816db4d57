from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExperimentKeys:
    """
    实验文档的 Redis Key 集合：每个 page 一个 hash（相当于分区），field 为实验 id。
    """

    page_prefix: str = "experiments:"

    @classmethod
    def with_prefix(cls, prefix: str) -> "ExperimentKeys":
        p = prefix or ""
        return cls(page_prefix=f"{p}experiments:")

    def page(self, page: str) -> str:
        return f"{self.page_prefix}{page}"
