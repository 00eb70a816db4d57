"""Deterministic variant assignment.

The bucket for a user is derived from ``experiment_id:bucketing_key`` so the
same user always lands on the same variant of an experiment, while two
experiments on the same page split their traffic independently. Variants own
contiguous slices of ``[0, 100)`` in the order they are stored.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from author_pages.experiments.hashing import hash_to_percentage
from author_pages.schemas.experiment_schema import Experiment, ExperimentVariant


class NoVariantsError(RuntimeError):
    """Raised when an experiment has nothing to assign."""


def assign_variant(experiment: Optional[Experiment], bucketing_key: str) -> ExperimentVariant:
    if experiment is None:
        raise ValueError("experiment must not be None")
    if not bucketing_key or not bucketing_key.strip():
        raise ValueError("bucketing key must not be empty")
    if not experiment.variants:
        raise NoVariantsError(f"experiment '{experiment.id}' has no variants to assign")

    total = sum(v.traffic_percentage for v in experiment.variants)
    if total != 100:
        logger.warning(
            f"experiment '{experiment.id}' allocates {total}% of traffic, expected 100%"
        )

    bucket = hash_to_percentage(f"{experiment.id}:{bucketing_key}")

    threshold = 0
    for variant in experiment.variants:
        threshold += variant.traffic_percentage
        if bucket < threshold:
            logger.debug(
                f"experiment '{experiment.id}': bucket {bucket} -> variant '{variant.id}'"
            )
            return variant

    # 流量总和不足 100 时，剩余桶位归最后一个版本
    fallback = experiment.variants[-1]
    logger.warning(
        f"experiment '{experiment.id}': bucket {bucket} beyond {threshold}%, "
        f"falling back to '{fallback.id}'"
    )
    return fallback
