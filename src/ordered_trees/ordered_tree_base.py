"""Unbalanced binary search tree base implementation"""

from __future__ import annotations
import logging
from typing import Any, Iterator, Optional, Set, Tuple, Type
from dataclasses import dataclass
import collections

from ordered_trees.base import (
    AbstractOrderedMap,
    EmptyTreeError,
    Item,
    _check_key,
)
from ordered_trees.traversal import (
    TraversalOrder,
    TraversalTask,
    PlaceKeysValuesInLists,
)

# Configure logging
logger = logging.getLogger(__name__)
# Clear all handlers to ensure we don't add duplicates
if logger.hasHandlers():
    logger.handlers.clear()
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)
# Prevent propagation to the root logger to avoid duplicate logs
logger.propagate = False

DEBUG = False


class OrderedNodeBase:
    """
    Base class for the non-empty variant of an ordered tree. The factory sets
      - TreeClass : which OrderedTreeBase subclass wraps the child subtrees
    """
    __slots__ = ("item", "left", "right")

    TreeClass: Type[OrderedTreeBase]

    def __init__(
        self,
        item: Item,
        left: OrderedTreeBase,
        right: OrderedTreeBase,
    ) -> None:
        self.item = item
        self.left = left
        self.right = right

    def __str__(self):
        return f"{self.__class__.__name__}(item={self.item})"

    __repr__ = __str__


class OrderedTreeBase(AbstractOrderedMap):
    """
    An ordered tree is a recursively defined structure that is either empty or
    contains a single node whose left and right children are ordered trees.

    Attributes:
        node (Optional[OrderedNodeBase]): The node that the tree contains. If None, the tree is empty.

    Every mutating method returns the handle the caller has to store in place
    of the one it was called on; the handle changes when an empty tree gains
    its first entry or when a removed node collapses into its right child.
    """
    __slots__ = ("node",)

    # Set below for the base classes and by the factory for subclasses
    NodeClass: Type[OrderedNodeBase]
    KeyType: Optional[type] = None

    def __init__(self, node: Optional[OrderedNodeBase] = None):
        self.node: Optional[OrderedNodeBase] = node

    def is_empty(self) -> bool:
        return self.node is None

    def __str__(self):
        cls = self.__class__.__name__
        return f"Empty {cls}" if self.is_empty() else f"{cls}(node={self.node})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return key is not None and self._retrieve(key) is not None

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        if self.is_empty():
            return
        node = self.node
        yield from node.left.items()
        yield node.item.key, node.item.value
        yield from node.right.items()

    # Public API
    def search(self, key: Any) -> Optional[Any]:
        """
        Find the value that key is bound to in this tree.

        Args:
            key: The key to search for.

        Returns:
            The value associated with the key, or None if the key is unbound.
            Use retrieve() to tell a bound None value apart from absence.
        """
        item = self.retrieve(key)
        return None if item is None else item.value

    def retrieve(self, key: Any) -> Optional[Item]:
        """Return the item stored under key, or None if the key is unbound."""
        _check_key(key, self.KeyType, "retrieve")
        return self._retrieve(key)

    def insert(self, key: Any, value: Any = None) -> OrderedTreeBase:
        """
        Insert/update the tree with a new key:value pair. If the key is already
        bound, only its value is replaced and the structure stays untouched.

        Args:
            key: The key. Must be totally ordered with the keys already stored.
            value: The value the key maps to.

        Returns:
            OrderedTreeBase: The updated tree. Always use the returned handle;
            inserting into an empty tree returns a new one.

        Raises:
            TypeError: If key is None or not of the tree's KeyType.
        """
        _check_key(key, self.KeyType, "insert")
        return self._insert(key, value)

    def delete(self, key: Any) -> OrderedTreeBase:
        """
        Delete any binding the key has in this tree. If the key isn't bound,
        this is a no-op.

        A node with a non-empty left subtree takes over the key and value of
        its in-order predecessor (the maximum of the left subtree), which is
        then deleted from the left subtree. A node without a left subtree is
        replaced by its right subtree.

        Returns:
            OrderedTreeBase: The updated tree. Always use the returned handle.
        """
        _check_key(key, self.KeyType, "delete")
        return self._delete(key)

    def max(self) -> Any:
        """
        Return the maximum key in the tree.

        Raises:
            EmptyTreeError: If the tree is empty.
        """
        item = self._max_item()
        if item is None:
            raise EmptyTreeError("max(): tree is empty")
        return item.key

    def min(self) -> Any:
        """
        Return the minimum key in the tree.

        Raises:
            EmptyTreeError: If the tree is empty.
        """
        item = self._min_item()
        if item is None:
            raise EmptyTreeError("min(): tree is empty")
        return item.key

    def size(self) -> int:
        if self.is_empty():
            return 0
        node = self.node
        return 1 + node.left.size() + node.right.size()

    def height(self) -> int:
        """Maximum number of nodes on a root-to-leaf path. A single entry has height 1."""
        if self.is_empty():
            return 0
        node = self.node
        return 1 + max(node.left.height(), node.right.height())

    def collect_keys(self, out=None):
        """
        Add all keys bound in this tree to the collection out (a new set if
        omitted) and return it. The keys are added in no particular order.
        """
        if out is None:
            out = set()
        add = out.add if hasattr(out, "add") else out.append
        self._add_keys(add)
        return out

    def sub_tree(self, from_key: Any, to_key: Any) -> OrderedTreeBase:
        """
        Return a new tree containing all entries with from_key <= key <= to_key.

        The source tree is left untouched and the result shares no handle,
        node or item with it. If from_key > to_key the result is empty.
        """
        _check_key(from_key, self.KeyType, "sub_tree")
        _check_key(to_key, self.KeyType, "sub_tree")
        logger.debug(f"sub_tree() called with range [{from_key!r}, {to_key!r}]")
        return self._sub_tree(from_key, to_key)

    def traverse(self, task: TraversalTask, order=TraversalOrder.IN_ORDER) -> None:
        """
        Perform task on every entry of the tree in the given order.

        Args:
            task: Object exposing perform_task(key, value).
            order: A TraversalOrder member or its value.

        Raises:
            TypeError: If task has no perform_task method.
            ValueError: If order is not a known traversal order.
        """
        if not callable(getattr(task, "perform_task", None)):
            raise TypeError(f"traverse(): expected a TraversalTask, got {type(task).__name__}")
        order = TraversalOrder(order)
        if order is TraversalOrder.IN_ORDER:
            self.inorder_traversal(task)
        else:
            self.right_root_left_traversal(task)

    def inorder_traversal(self, task: TraversalTask) -> None:
        """Perform task on the tree using a left, root, right traversal."""
        if self.is_empty():
            return
        node = self.node
        node.left.inorder_traversal(task)
        task.perform_task(node.item.key, node.item.value)
        node.right.inorder_traversal(task)

    def right_root_left_traversal(self, task: TraversalTask) -> None:
        """Perform task on the tree using a right, root, left traversal."""
        if self.is_empty():
            return
        node = self.node
        node.right.right_root_left_traversal(task)
        task.perform_task(node.item.key, node.item.value)
        node.left.right_root_left_traversal(task)

    # Private Methods
    def _retrieve(self, key: Any) -> Optional[Item]:
        if self.is_empty():
            return None
        node = self.node
        if key < node.item.key:
            return node.left._retrieve(key)
        if node.item.key < key:
            return node.right._retrieve(key)
        return node.item

    def _insert(self, key: Any, value: Any) -> OrderedTreeBase:
        if self.is_empty():
            if DEBUG:
                logger.debug(f"Inserting new key {key!r}")
            TreeK = type(self)
            return TreeK(self.NodeClass(Item(key, value), TreeK(), TreeK()))

        node = self.node
        if key < node.item.key:
            node.left = node.left._insert(key, value)
        elif node.item.key < key:
            node.right = node.right._insert(key, value)
        else:
            if DEBUG:
                logger.debug(f"Overwriting value of key {key!r}")
            node.item.value = value
        return self

    def _delete(self, key: Any) -> OrderedTreeBase:
        if self.is_empty():
            return self

        node = self.node
        if key < node.item.key:
            node.left = node.left._delete(key)
            return self
        if node.item.key < key:
            node.right = node.right._delete(key)
            return self

        predecessor = node.left._max_item()
        if predecessor is None:
            # No left subtree: the right subtree takes this node's place
            return node.right

        if DEBUG:
            logger.debug(f"Deleting key {key!r}: promoting predecessor {predecessor.key!r}")
        node.item.key = predecessor.key
        node.item.value = predecessor.value
        node.left = node.left._delete(predecessor.key)
        return self

    def _max_item(self) -> Optional[Item]:
        if self.is_empty():
            return None
        right_max = self.node.right._max_item()
        return self.node.item if right_max is None else right_max

    def _min_item(self) -> Optional[Item]:
        if self.is_empty():
            return None
        left_min = self.node.left._min_item()
        return self.node.item if left_min is None else left_min

    def _add_keys(self, add) -> None:
        if self.is_empty():
            return
        node = self.node
        add(node.item.key)
        node.right._add_keys(add)
        node.left._add_keys(add)

    def _sub_tree(self, from_key: Any, to_key: Any) -> OrderedTreeBase:
        TreeK = type(self)
        if self.is_empty():
            return TreeK()

        node = self.node
        if to_key < node.item.key:
            return node.left._sub_tree(from_key, to_key)
        if node.item.key < from_key:
            return node.right._sub_tree(from_key, to_key)

        return TreeK(self.NodeClass(
            node.item.copy(),
            node.left._sub_tree(from_key, to_key),
            node.right._sub_tree(from_key, to_key),
        ))

    def print_structure(self, indent: int = 0, depth: int = 0, max_depth: int = 8) -> str:
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        if depth > max_depth:
            return f"{prefix}... (max depth reached)"

        node = self.node
        result = [f"{prefix}{node.__class__.__name__}(key={node.item.short_key()}, value={node.item.value!r})"]
        for label, child in (("Left", node.left), ("Right", node.right)):
            if child.is_empty():
                result.append(f"{prefix}    {label}: Empty")
            else:
                result.append(f"{prefix}    {label}:")
                result.append(child.print_structure(indent + 8, depth + 1, max_depth))
        return "\n".join(result)


OrderedNodeBase.TreeClass = OrderedTreeBase
OrderedTreeBase.NodeClass = OrderedNodeBase


@dataclass
class Stats:
    node_count: int
    height: int
    least_key: Optional[Any]
    greatest_key: Optional[Any]
    is_search_tree: bool
    no_shared_subtrees: bool


def tree_stats_(t: Optional[OrderedTreeBase],
                _seen: Optional[Set[int]] = None,
                ) -> Stats:
    """
    Returns aggregated statistics for an ordered tree in **O(n)** time.

    `no_shared_subtrees` is False if any tree handle, node or item is
    reachable along more than one path; shared nodes are not descended into
    twice, so cycles terminate.
    """
    if _seen is None:
        _seen = set()

    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        shared = t is not None and id(t) in _seen
        if t is not None:
            _seen.add(id(t))
        return Stats(node_count          = 0,
                     height              = 0,
                     least_key           = None,
                     greatest_key        = None,
                     is_search_tree      = True,
                     no_shared_subtrees  = not shared)

    node = t.node
    shared = False
    for obj in (t, node, node.item):
        if id(obj) in _seen:
            shared = True
        _seen.add(id(obj))

    key = node.item.key
    if shared:
        return Stats(node_count=1, height=1, least_key=key, greatest_key=key,
                     is_search_tree=True, no_shared_subtrees=False)

    left_stats = tree_stats_(node.left, _seen)
    right_stats = tree_stats_(node.right, _seen)

    is_search_tree = left_stats.is_search_tree and right_stats.is_search_tree
    if left_stats.greatest_key is not None and not left_stats.greatest_key < key:
        is_search_tree = False
    if right_stats.least_key is not None and not key < right_stats.least_key:
        is_search_tree = False

    return Stats(
        node_count=1 + left_stats.node_count + right_stats.node_count,
        height=1 + max(left_stats.height, right_stats.height),
        least_key=key if left_stats.least_key is None else left_stats.least_key,
        greatest_key=key if right_stats.greatest_key is None else right_stats.greatest_key,
        is_search_tree=is_search_tree,
        no_shared_subtrees=left_stats.no_shared_subtrees and right_stats.no_shared_subtrees,
    )


def collect_object_ids(t: OrderedTreeBase) -> Set[int]:
    """Return the ids of every tree handle, node and item reachable from t."""
    ids = set()
    stack = [t]
    while stack:
        cur = stack.pop()
        ids.add(id(cur))
        if cur.is_empty():
            continue
        ids.add(id(cur.node))
        ids.add(id(cur.node.item))
        stack.append(cur.node.left)
        stack.append(cur.node.right)
    return ids


def in_order_keys(tree: OrderedTreeBase) -> list:
    task = PlaceKeysValuesInLists()
    tree.inorder_traversal(task)
    return task.get_keys()


def print_pretty(tree: OrderedTreeBase) -> None:
    """
    Print the tree so that all nodes on the same level appear on the same
    line, left to right in key order. Empty children are shown as '.'.
    """
    SEP = " | "
    if tree.is_empty():
        print(f"Empty {tree.__class__.__name__}")
        return

    levels = collections.defaultdict(list)  # depth -> list of key strings
    queue = collections.deque([(tree, 0)])
    while queue:
        cur, depth = queue.popleft()
        if cur.is_empty():
            levels[depth].append(".")
            continue
        levels[depth].append(cur.node.item.short_key())
        queue.append((cur.node.left, depth + 1))
        queue.append((cur.node.right, depth + 1))

    # the deepest level only holds empty children
    for depth in sorted(levels)[:-1]:
        print(f"Level {depth}: {SEP.join(levels[depth])}")
