"""Factory for the creation of ordered trees"""

from typing import Any, Dict, Iterable, Optional, Tuple, Type
import logging

from ordered_trees.ordered_tree_base import OrderedTreeBase, OrderedNodeBase

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# Cache for previously created classes to avoid recreating them
_class_cache: Dict[Optional[type], Tuple[Type, Type]] = {}


def make_ordered_tree_classes(key_type: Optional[type] = None) -> Tuple[
    Type[OrderedTreeBase],
    Type[OrderedNodeBase],
]:
    """
    Factory function to generate ordered tree and node classes specialized for a key type.

    Returns:
        OrderedTreeT  – subclass of OrderedTreeBase with NodeClass=OrderedNodeT and KeyType=key_type.
        OrderedNodeT  – subclass of OrderedNodeBase with TreeClass=OrderedTreeT.

    With key_type None the base classes are returned and keys are not type checked.
    """
    if key_type is None:
        return OrderedTreeBase, OrderedNodeBase
    if not isinstance(key_type, type):
        raise TypeError(f"make_ordered_tree_classes(): key_type must be a type, got {key_type!r}")

    if key_type in _class_cache:
        logger.debug(f"Using cached classes for key type {key_type.__name__}")
        return _class_cache[key_type]

    suffix = key_type.__name__
    logger.debug(f"Creating new classes for key type {suffix}")

    # 1) Tree class with a forward reference to its node class (set below)
    OrderedTreeT = type(
        f"OrderedTree_{suffix}",
        (OrderedTreeBase,),
        {
            "KeyType": key_type,
            "__slots__": (),
        }
    )
    logger.debug(f"Created OrderedTree_{suffix} with KeyType={suffix}")

    # 2) Node class references the already created tree class
    OrderedNodeT = type(
        f"OrderedNode_{suffix}",
        (OrderedNodeBase,),
        {
            "TreeClass": OrderedTreeT,
            "__slots__": (),
        }
    )
    logger.debug(f"Created OrderedNode_{suffix} with TreeClass={OrderedTreeT.__name__}")

    # 3) Set NodeClass on OrderedTreeT now that OrderedNodeT exists
    setattr(OrderedTreeT, "NodeClass", OrderedNodeT)

    _class_cache[key_type] = (OrderedTreeT, OrderedNodeT)
    return OrderedTreeT, OrderedNodeT


def create_ordered_tree(
    key_type: Optional[type] = None,
    items: Optional[Iterable[Tuple[Any, Any]]] = None,
) -> OrderedTreeBase:
    """
    Create a new ordered tree, optionally restricted to keys of key_type.

    Args:
        key_type: The type every key must have, or None for no check.
        items: Optional (key, value) pairs inserted in the given order. The
            insertion order determines the shape of the tree.

    Returns:
        The handle of the new tree.
    """
    TreeT, _ = make_ordered_tree_classes(key_type)
    tree = TreeT()
    if items is not None:
        count = 0
        for key, value in items:
            tree = tree.insert(key, value)
            count += 1
        logger.debug(f"Created {TreeT.__name__} with {count} insertions")
    return tree
