"""写入示例 A/B 实验，便于本地联调 /api/v1/experiments。

用法：
1) 在 .env 里配好 REDIS_HOST/REDIS_PORT（可选 REDIS_KEY_PREFIX）
2) python -m scripts.seed_experiments
3) curl "http://127.0.0.1:8000/api/v1/experiments?page=landing"
   curl "http://127.0.0.1:8000/api/v1/experiments?page=pricing&userId=test-user-123"
"""

from __future__ import annotations

import asyncio

from author_pages.core.config import settings
from author_pages.core.redis_client import redis_client
from author_pages.experiments.keys import ExperimentKeys
from author_pages.experiments.repository import ExperimentConflictError, ExperimentRepository
from author_pages.schemas.experiment_schema import Experiment, ExperimentVariant


def _v(variant_id: str, name: str, pct: int, **config) -> ExperimentVariant:
    return ExperimentVariant(id=variant_id, name=name, traffic_percentage=pct, config=config)


LANDING_EXPERIMENTS = [
    Experiment(
        id="hero-button-color-test",
        name="Hero Button Color Test",
        page="landing",
        variants=[
            _v("control", "Blue Button (Control)", 50, buttonColor="#007bff", buttonText="Get Started"),
            _v("variant_a", "Green Button", 50, buttonColor="#28a745", buttonText="Get Started"),
        ],
    ),
    Experiment(
        id="hero-headline-test",
        name="Hero Headline Test",
        page="landing",
        variants=[
            _v(
                "control",
                "Create Your Author Page (Control)",
                33,
                headline="Create Your Author Page",
                subheadline="Share your stories with the world",
            ),
            _v(
                "variant_a",
                "Build Your Author Brand",
                33,
                headline="Build Your Author Brand",
                subheadline="Connect with readers everywhere",
            ),
            _v(
                "variant_b",
                "Start Your Author Journey",
                34,
                headline="Start Your Author Journey",
                subheadline="Showcase your books and engage readers",
            ),
        ],
    ),
]

PRICING_EXPERIMENTS = [
    Experiment(
        id="pricing-card-design-test",
        name="Pricing Card Design Test",
        page="pricing",
        variants=[
            _v(
                "control",
                "Traditional Card (Control)",
                50,
                cardStyle="traditional",
                showBadge=False,
                highlightColor="#007bff",
            ),
            _v(
                "variant_a",
                "Modern Card with Badge",
                50,
                cardStyle="modern",
                showBadge=True,
                highlightColor="#28a745",
                badgeText="Most Popular",
            ),
        ],
    ),
    Experiment(
        id="pricing-cta-button-test",
        name="Pricing CTA Button Text Test",
        page="pricing",
        variants=[
            _v("control", "Subscribe Now (Control)", 40, buttonText="Subscribe Now"),
            _v("variant_a", "Start Free Trial", 30, buttonText="Start Free Trial"),
            _v("variant_b", "Get Started Today", 30, buttonText="Get Started Today"),
        ],
    ),
]


async def seed(repo: ExperimentRepository, experiments: list[Experiment]) -> int:
    created = 0
    for exp in experiments:
        try:
            await repo.create(exp)
            print(f"  [ok] created: {exp.name}")
            created += 1
        except ExperimentConflictError as exc:
            print(f"  [skip] {exp.name}: {exc}")
    return created


async def main() -> None:
    await redis_client.connect()
    try:
        repo = ExperimentRepository(
            redis_client, ExperimentKeys.with_prefix(settings.REDIS_KEY_PREFIX)
        )
        print("Seeding landing page experiments...")
        await seed(repo, LANDING_EXPERIMENTS)
        print("Seeding pricing page experiments...")
        await seed(repo, PRICING_EXPERIMENTS)
        print("[seed] done")
    finally:
        await redis_client.close()


if __name__ == "__main__":
    asyncio.run(main())
