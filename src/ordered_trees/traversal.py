"""Traversal orders and the tasks invoked once per visited entry."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, List


class TraversalOrder(Enum):
    """Order in which a depth-first walk visits the entries of a tree."""
    IN_ORDER = "in_order"              # left, root, right (ascending keys)
    RIGHT_ROOT_LEFT = "right_root_left"  # right, root, left (descending keys)


class TraversalTask(ABC):
    """
    A task performed on every entry visited during a traversal.

    Implementations may have side effects (e.g. accumulate into caller-owned
    containers) but must not mutate the tree being traversed.
    """

    @abstractmethod
    def perform_task(self, key: Any, value: Any) -> None:
        """Called once per visited entry, in traversal order."""
        pass


class PlaceKeysValuesInLists(TraversalTask):
    """
    Places keys and values in two lists in the order in which they are seen
    during the traversal. Both lists are empty if nothing was visited.
    """

    def __init__(self):
        self.key_list: List[Any] = []
        self.value_list: List[Any] = []

    def perform_task(self, key: Any, value: Any) -> None:
        self.key_list.append(key)
        self.value_list.append(value)

    def get_keys(self) -> List[Any]:
        """Return the list holding the visited keys."""
        return self.key_list

    def get_values(self) -> List[Any]:
        """Return the list holding the visited values."""
        return self.value_list

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={self.key_list!r}, values={self.value_list!r})"


class FunctionTask(TraversalTask):
    """Adapts a plain callable taking (key, value) to a TraversalTask."""

    def __init__(self, func: Callable[[Any, Any], None]):
        if not callable(func):
            raise TypeError(f"FunctionTask(): expected a callable, got {type(func).__name__}")
        self.func = func

    def perform_task(self, key: Any, value: Any) -> None:
        self.func(key, value)
