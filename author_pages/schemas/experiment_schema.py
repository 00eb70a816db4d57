from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bool 放在最前面，避免 True/False 被当成 int
ConfigValue = Union[bool, int, float, str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExperimentVariant(BaseModel):
    id: str
    name: str = ""
    traffic_percentage: int = Field(default=0, ge=0, le=100, alias="trafficPercentage")
    config: Dict[str, ConfigValue] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class Experiment(BaseModel):
    """A/B 实验文档，以 page 作为分区键存储。"""

    id: str = ""
    name: str = ""
    page: str = ""
    is_active: bool = Field(default=True, alias="isActive")
    variants: List[ExperimentVariant] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=_utcnow, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # 外部工具写入的时间可能不带时区，按 UTC 处理
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class GetExperimentsRequest(BaseModel):
    page: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class AssignedVariant(BaseModel):
    id: str
    name: str = ""
    config: Dict[str, ConfigValue] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class AssignedExperiment(BaseModel):
    id: str
    name: str
    variant: AssignedVariant

    model_config = ConfigDict(populate_by_name=True)


class GetExperimentsResponse(BaseModel):
    session_id: str = Field(..., alias="sessionId")
    experiments: List[AssignedExperiment] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
