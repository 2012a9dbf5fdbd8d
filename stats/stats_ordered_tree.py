"""Random tree builders and structural checks for ordered trees."""

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ordered_trees.factory import create_ordered_tree
from ordered_trees.ordered_tree_base import OrderedTreeBase, tree_stats_, Stats


def create_tree(items: Iterable[Tuple[int, str]]) -> OrderedTreeBase:
    """Insert the (key, value) pairs in the given order into a new int-keyed tree."""
    return create_ordered_tree(int, items)


def random_keys(n: int, space: int = 1 << 24, seed: Optional[int] = None) -> List[int]:
    """Draw n distinct keys from range(space) in random order."""
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")
    rng = np.random.default_rng(seed)
    return [int(k) for k in rng.choice(space, size=n, replace=False)]


# Create a random tree with n items; keys are inserted in random order.
def random_tree_of_size(n: int, seed: Optional[int] = None) -> OrderedTreeBase:
    keys = random_keys(n, seed=seed)
    return create_tree((key, f"val{key}") for key in keys)


# Keys inserted in ascending order produce a degenerate tree of height n.
def degenerate_tree_of_size(n: int) -> OrderedTreeBase:
    return create_tree((key, f"val{key}") for key in range(n))


def check_keys_and_values(
    tree: OrderedTreeBase,
    expected_keys: Optional[List[int]] = None
) -> Tuple[List[int], bool, bool, bool]:
    """
    Walk the tree once in order, gathering its items (key, value),
    then compute three invariants:
      1. presence_ok: if `expected_keys` is provided, do we have exactly that set of keys?
                      otherwise always True.
      2. all_have_values: are all those items' values not None?
      3. order_ok: are the keys strictly increasing?

    Returns:
        (keys, presence_ok, all_have_values, order_ok)
    """
    keys = []
    all_have_values = True
    order_ok = True
    prev_key = None
    for key, value in tree.items():
        if value is None:
            all_have_values = False
        if prev_key is not None and not prev_key < key:
            order_ok = False
        prev_key = key
        keys.append(key)

    presence_ok = True
    if expected_keys is not None:
        presence_ok = (len(keys) == len(set(expected_keys))
                       and set(keys) == set(expected_keys))
    return keys, presence_ok, all_have_values, order_ok


def log_stats(tree: OrderedTreeBase) -> Stats:
    stats = tree_stats_(tree)
    logging.info(
        "nodes=%d height=%d least=%r greatest=%r search_tree=%s unshared=%s",
        stats.node_count, stats.height, stats.least_key, stats.greatest_key,
        stats.is_search_tree, stats.no_shared_subtrees,
    )
    return stats
