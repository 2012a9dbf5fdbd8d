"""
Ordered key-value trees backed by an unbalanced binary search tree.
"""

from ordered_trees.base import (
    Item,
    AbstractOrderedMap,
    EmptyTreeError,
)
from ordered_trees.ordered_tree_base import (
    OrderedTreeBase,
    OrderedNodeBase,
    Stats,
    tree_stats_,
    in_order_keys,
    print_pretty,
)
from ordered_trees.traversal import (
    TraversalOrder,
    TraversalTask,
    PlaceKeysValuesInLists,
    FunctionTask,
)
from ordered_trees.factory import (
    make_ordered_tree_classes,
    create_ordered_tree,
)

__all__ = [
    'Item',
    'AbstractOrderedMap',
    'EmptyTreeError',
    'OrderedTreeBase',
    'OrderedNodeBase',
    'Stats',
    'tree_stats_',
    'in_order_keys',
    'print_pretty',
    'TraversalOrder',
    'TraversalTask',
    'PlaceKeysValuesInLists',
    'FunctionTask',
    'make_ordered_tree_classes',
    'create_ordered_tree',
]
