"""Utility functions for testing ordered tree invariants."""

import logging
from ordered_trees.ordered_tree_base import (
    OrderedTreeBase,
    Stats
)

TREE_FLAGS = (
    "is_search_tree",
    "no_shared_subtrees",
)

def assert_tree_invariants_tc(tc, t: OrderedTreeBase, stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    tc.assertEqual(stats.node_count, t.size(),
                   f"Invariant failed: node_count={stats.node_count} ≠ size()={t.size()}")
    tc.assertEqual(stats.height, t.height(),
                   f"Invariant failed: stats height={stats.height} ≠ height()={t.height()}")
    tc.assertLessEqual(t.height(), t.size(),
                       f"Invariant failed: height()={t.height()} > size()={t.size()}")

    if not t.is_empty():
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree"
        )
        tc.assertEqual(
            stats.least_key, t.min(),
            f"Invariant failed: least_key={stats.least_key!r} ≠ min()={t.min()!r}"
        )
        tc.assertEqual(
            stats.greatest_key, t.max(),
            f"Invariant failed: greatest_key={stats.greatest_key!r} ≠ max()={t.max()!r}"
        )
    else:
        tc.assertEqual(stats.height, 0, "Invariant failed: empty tree with non-zero height")
        tc.assertIsNone(stats.least_key, "Invariant failed: least_key set for empty tree")
        tc.assertIsNone(stats.greatest_key, "Invariant failed: greatest_key set for empty tree")


class InvariantError(Exception):
    """Raised when an ordered tree invariant is violated."""
    pass

def assert_tree_invariants_raise(t: OrderedTreeBase, stats: Stats) -> None:
    """Check all invariants, raising on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error(f"Invariant failed: {flag} is False")
            raise InvariantError(f"{flag} is False")

    if stats.node_count != t.size():
        raise InvariantError(f"node_count={stats.node_count} ≠ size()={t.size()}")
    if stats.height > stats.node_count:
        raise InvariantError(f"height={stats.height} > node_count={stats.node_count}")
