from __future__ import annotations

import asyncio
import uuid
from typing import Optional, Protocol

from loguru import logger

from author_pages.experiments.allocator import assign_variant
from author_pages.schemas.experiment_schema import (
    AssignedExperiment,
    AssignedVariant,
    Experiment,
    ExperimentVariant,
    GetExperimentsRequest,
    GetExperimentsResponse,
)


class ActiveExperimentSource(Protocol):
    async def get_active_experiments_by_page(self, page: str) -> list[Experiment]: ...


class ExperimentService:
    """给某个页面上的所有进行中实验分配版本。

    无状态：除了一次仓库读取以外都是纯计算，可以被并发请求共享。
    """

    def __init__(
        self,
        repo: ActiveExperimentSource,
        *,
        repository_timeout: Optional[float] = None,
    ):
        if repo is None:
            raise ValueError("repo must not be None")
        self._repo = repo
        self._repository_timeout = repository_timeout

    def assign_variant(self, experiment: Experiment, bucketing_key: str) -> ExperimentVariant:
        return assign_variant(experiment, bucketing_key)

    async def get_experiments(
        self,
        request: Optional[GetExperimentsRequest],
        *,
        timeout: Optional[float] = None,
    ) -> GetExperimentsResponse:
        if request is None:
            raise ValueError("request must not be None")
        if not request.page or not request.page.strip():
            raise ValueError("page must not be empty")

        user_id = request.user_id if request.user_id and request.user_id.strip() else None
        bucketing_key = user_id or str(uuid.uuid4())
        logger.info(f"Getting experiments for page '{request.page}', userId: {user_id or '(none)'}")

        deadline = timeout if timeout is not None else self._repository_timeout
        experiments = await asyncio.wait_for(
            self._repo.get_active_experiments_by_page(request.page), timeout=deadline
        )

        assigned: list[AssignedExperiment] = []
        for experiment in experiments:
            variant = assign_variant(experiment, bucketing_key)
            assigned.append(
                AssignedExperiment(
                    id=experiment.id,
                    name=experiment.name,
                    variant=AssignedVariant(
                        id=variant.id,
                        name=variant.name,
                        config=dict(variant.config),
                    ),
                )
            )

        logger.info(f"Assigned {len(assigned)} experiments for session {bucketing_key}")
        return GetExperimentsResponse(session_id=bucketing_key, experiments=assigned)
