from abc import ABC, abstractmethod

from typing import Any, Optional, TypeVar, Generic


class EmptyTreeError(LookupError):
    """Raised when min() or max() is called on an empty tree."""
    pass


class Item:
    """
    Represents an item (a key-value pair) stored in a node of an ordered tree.
    """
    __slots__ = ("key", "value")  # Define slots for memory efficiency

    def __init__(
            self,
            key: Any,
            value: Any = None
    ):
        """
        Initialize an Item.

        Parameters:
            key (Any): The item's key. Must be totally ordered with all other keys of the tree.
            value (Any): The item's value.
        """
        self.key = key
        self.value = value

    def copy(self) -> "Item":
        """Return a new item holding the same key and value."""
        return Item(self.key, self.value)

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        if isinstance(self.key, (bytes, bytearray)):
            s = self.key.hex()
        else:
            s = str(self.key)

        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r}, value={self.value!r})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.short_key()}, value={self.value})"


T = TypeVar("T", bound="AbstractOrderedMap")

class AbstractOrderedMap(ABC, Generic[T]):
    """
    Abstract base class for an ordered map whose mutating operations return
    the (possibly new) handle the caller has to keep.
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> T:
        """
        Bind key to value. An existing binding is overwritten.

        Parameters:
            key (Any): The key to bind.
            value (Any): The value to bind the key to.

        Returns:
            AbstractOrderedMap: The handle of the updated map.
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> T:
        """
        Remove any binding of key. Deleting an unbound key is a no-op.

        Parameters:
            key (Any): The key of the binding to remove.

        Returns:
            AbstractOrderedMap: The handle of the updated map.
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> Optional[Any]:
        """
        Return the value bound to key, or None if the key is unbound.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of bound keys."""
        pass


def _check_key(key: Any, key_type: Optional[type] = None, op: str = "insert") -> None:
    """Reject keys that cannot take part in the tree's total order."""
    if key is None:
        raise TypeError(f"{op}(): key must not be None")
    if key_type is not None and not isinstance(key, key_type):
        raise TypeError(
            f"{op}(): expected key of type {key_type.__name__}, got {type(key).__name__}"
        )
