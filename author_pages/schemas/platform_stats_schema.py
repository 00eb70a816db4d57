from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class PlatformStats(BaseModel):
    """落地页展示用的平台统计（预先计算，定期刷新）。"""

    id: str = "current"
    active_authors: int = Field(default=0, ge=0, alias="activeAuthors")
    books_published: int = Field(default=0, ge=0, alias="booksPublished")
    total_revenue: float = Field(default=0.0, ge=0, alias="totalRevenue")
    average_rating: float = Field(default=0.0, ge=0, le=5, alias="averageRating")
    countries_served: int = Field(default=0, ge=0, alias="countriesServed")
    last_updated: str = Field(default_factory=_utcnow_iso, alias="lastUpdated")

    model_config = ConfigDict(populate_by_name=True)
