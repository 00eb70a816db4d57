from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from loguru import logger

from author_pages.experiments.keys import ExperimentKeys
from author_pages.schemas.experiment_schema import Experiment


class _RedisLike(Protocol):
    @property
    def client(self) -> Any: ...


class ExperimentConflictError(ValueError):
    """An experiment with the same id already exists on the page."""


class ExperimentNotFoundError(LookupError):
    pass


class ExperimentRepository:
    def __init__(self, redis_client: _RedisLike, keys: ExperimentKeys | None = None):
        self._redis_client = redis_client
        self._keys = keys or ExperimentKeys()

    @property
    def keys(self) -> ExperimentKeys:
        return self._keys

    async def get_active_experiments_by_page(self, page: str) -> list[Experiment]:
        _require(page, "page")
        try:
            raw = await self._redis_client.client.hgetall(self._keys.page(page))
        except Exception as exc:
            logger.error(f"Failed to read experiments for page '{page}': {exc}")
            raise

        experiments = [_loads(doc) for doc in (raw or {}).values() if doc]
        active = [e for e in experiments if e.is_active and e.page == page]
        active.sort(key=lambda e: (e.created_at, e.id))
        logger.info(f"Retrieved {len(active)} active experiments for page '{page}'")
        return active

    async def get_by_id(self, experiment_id: str, page: str) -> Optional[Experiment]:
        _require(experiment_id, "experiment id")
        _require(page, "page")
        doc = await self._redis_client.client.hget(self._keys.page(page), experiment_id)
        if not doc:
            logger.warning(f"Experiment not found: '{experiment_id}' on page '{page}'")
            return None
        return _loads(doc)

    async def create(self, experiment: Experiment) -> Experiment:
        if experiment is None:
            raise ValueError("experiment must not be None")
        _require(experiment.page, "page")

        now = datetime.now(timezone.utc)
        stored = experiment.model_copy(
            update={
                "id": experiment.id or str(uuid.uuid4()),
                "created_at": now,
                "updated_at": now,
            }
        )
        created = await self._redis_client.client.hsetnx(
            self._keys.page(stored.page), stored.id, _dumps(stored)
        )
        if not created:
            logger.error(f"Experiment '{stored.id}' already exists on page '{stored.page}'")
            raise ExperimentConflictError(
                f"experiment '{stored.id}' already exists on page '{stored.page}'"
            )
        logger.info(f"Created experiment '{stored.id}' on page '{stored.page}'")
        return stored

    async def update(self, experiment: Experiment) -> Experiment:
        if experiment is None:
            raise ValueError("experiment must not be None")
        _require(experiment.id, "experiment id")
        _require(experiment.page, "page")

        key = self._keys.page(experiment.page)
        if not await self._redis_client.client.hexists(key, experiment.id):
            logger.error(f"Cannot update missing experiment '{experiment.id}' on page '{experiment.page}'")
            raise ExperimentNotFoundError(
                f"experiment '{experiment.id}' not found on page '{experiment.page}'"
            )

        stored = experiment.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        await self._redis_client.client.hset(key, stored.id, _dumps(stored))
        logger.info(f"Updated experiment '{stored.id}' on page '{stored.page}'")
        return stored

    async def delete(self, experiment_id: str, page: str) -> bool:
        _require(experiment_id, "experiment id")
        _require(page, "page")
        deleted = await self._redis_client.client.hdel(self._keys.page(page), experiment_id)
        logger.info(f"Deleted experiment '{experiment_id}' on page '{page}': {bool(deleted)}")
        return bool(deleted)


def _require(value: Optional[str], name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} must not be empty")


def _dumps(experiment: Experiment) -> str:
    return experiment.model_dump_json(by_alias=True)


def _loads(doc: str) -> Experiment:
    return Experiment.model_validate_json(doc)
