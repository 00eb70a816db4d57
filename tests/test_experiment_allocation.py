from __future__ import annotations

import unittest
from collections import Counter

from author_pages.experiments.allocator import NoVariantsError, assign_variant
from author_pages.experiments.hashing import hash_to_percentage
from author_pages.schemas.experiment_schema import Experiment, ExperimentVariant


def _experiment(exp_id: str, *splits: tuple[str, int]) -> Experiment:
    return Experiment(
        id=exp_id,
        name=exp_id,
        page="landing",
        variants=[ExperimentVariant(id=vid, name=vid, traffic_percentage=pct) for vid, pct in splits],
    )


class HashToPercentageTestCase(unittest.TestCase):
    def test_range_and_repeatability(self) -> None:
        for i in range(500):
            key = f"key-{i}"
            value = hash_to_percentage(key)
            self.assertGreaterEqual(value, 0)
            self.assertLess(value, 100)
            self.assertEqual(value, hash_to_percentage(key))

    def test_known_values_are_stable_across_processes(self) -> None:
        self.assertEqual(hash_to_percentage("exp1:user-1"), 23)
        self.assertEqual(hash_to_percentage("hero-button-color-test:test-user-123"), 96)

    def test_empty_key_hashes(self) -> None:
        self.assertEqual(hash_to_percentage(""), 95)

    def test_spreads_over_buckets(self) -> None:
        buckets = {hash_to_percentage(f"user-{i}") for i in range(2000)}
        self.assertGreater(len(buckets), 90)


class AssignVariantValidationTestCase(unittest.TestCase):
    def test_none_experiment(self) -> None:
        with self.assertRaises(ValueError):
            assign_variant(None, "test-key")

    def test_empty_bucketing_key(self) -> None:
        exp = _experiment("exp1", ("control", 100))
        with self.assertRaises(ValueError):
            assign_variant(exp, "")
        with self.assertRaises(ValueError):
            assign_variant(exp, "   ")

    def test_no_variants(self) -> None:
        exp = _experiment("exp1")
        with self.assertRaises(NoVariantsError):
            assign_variant(exp, "test-key")


class AssignVariantTestCase(unittest.TestCase):
    def test_single_variant_takes_everyone(self) -> None:
        exp = _experiment("exp1", ("Control", 100))
        for i in range(200):
            self.assertEqual(assign_variant(exp, f"user-{i}").id, "Control")

    def test_same_key_same_variant(self) -> None:
        exp = _experiment("exp1", ("control", 50), ("variant_a", 50))
        first = assign_variant(exp, "consistent-user-123").id
        for _ in range(5):
            self.assertEqual(assign_variant(exp, "consistent-user-123").id, first)

    def test_known_assignment(self) -> None:
        exp = _experiment("hero-button-color-test", ("control", 50), ("variant_a", 50))
        # bucket 96 -> second half
        self.assertEqual(assign_variant(exp, "test-user-123").id, "variant_a")

    def test_even_split_within_band(self) -> None:
        exp = _experiment("exp1", ("A", 50), ("B", 50))
        counts = Counter(assign_variant(exp, f"user-{i}").id for i in range(1000))
        self.assertGreater(counts["A"], 0)
        self.assertGreater(counts["B"], 0)
        self.assertTrue(400 <= counts["A"] <= 600, counts)
        self.assertTrue(400 <= counts["B"] <= 600, counts)

    def test_weighted_split_within_band(self) -> None:
        exp = _experiment("exp1", ("control", 70), ("variantA", 20), ("variantB", 10))
        counts = Counter(assign_variant(exp, f"user-{i}").id for i in range(1000))
        self.assertTrue(650 <= counts["control"] <= 750, counts)
        self.assertTrue(150 <= counts["variantA"] <= 250, counts)
        self.assertTrue(50 <= counts["variantB"] <= 150, counts)

    def test_list_order_decides_ranges(self) -> None:
        # bucket 23 for exp1:user-1
        forward = _experiment("exp1", ("first", 30), ("second", 70))
        backward = _experiment("exp1", ("second", 70), ("first", 30))
        self.assertEqual(assign_variant(forward, "user-1").id, "first")
        self.assertEqual(assign_variant(backward, "user-1").id, "second")

    def test_under_allocated_falls_back_to_last(self) -> None:
        # bucket 23 lies beyond 10 + 10
        exp = _experiment("exp1", ("a", 10), ("b", 10))
        self.assertEqual(assign_variant(exp, "user-1").id, "b")

    def test_zero_allocation_still_assigns(self) -> None:
        exp = _experiment("exp1", ("a", 0), ("b", 0))
        seen = {assign_variant(exp, f"user-{i}").id for i in range(50)}
        self.assertEqual(seen, {"b"})

    def test_experiments_bucket_independently(self) -> None:
        exp_a = _experiment("exp_a", ("c", 50), ("t", 50))
        exp_b = _experiment("exp_b", ("c", 50), ("t", 50))
        differ = any(
            assign_variant(exp_a, f"user-{i}").id != assign_variant(exp_b, f"user-{i}").id
            for i in range(100)
        )
        self.assertTrue(differ)


if __name__ == "__main__":
    unittest.main()
