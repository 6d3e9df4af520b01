"""A string-keyed table stored as a ternary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

CharCmp = Callable[[str, str], int]


def _natural_cmp(c1: str, c2: str) -> int:
    return ord(c1) - ord(c2)


@dataclass
class Entry:
    """A key-value pair held by a :class:`TSTTable`."""

    key: str
    value: Any


class _Node:
    __slots__ = ("char", "entry", "parent", "left", "mid", "right")

    def __init__(self, char: str, parent: Optional[_Node] = None) -> None:
        self.char = char
        self.entry: Optional[Entry] = None
        self.parent = parent
        self.left: Optional[_Node] = None
        self.mid: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.mid is None and self.right is None


def _check_key(key: object) -> str:
    if not isinstance(key, str):
        raise TypeError(f"keys must be str, not {type(key).__name__}")
    return key


class TSTTable:
    """A mapping from non-empty strings to values, backed by a ternary search tree.

    Characters are ordered by ``char_cmp``, which returns a negative, zero or
    positive number; the default orders them by code point.
    """

    def __init__(self, char_cmp: Optional[CharCmp] = None) -> None:
        self._cmp: CharCmp = char_cmp if char_cmp is not None else _natural_cmp
        self._root: Optional[_Node] = None
        self._size = 0

    def _descend(self, key: str):
        """Walk towards ``key``.

        Returns the node matching the whole key (or None), the number of
        matched characters, and the parent and attribute where a new chain
        would be attached.
        """
        parent: Optional[_Node] = None
        attr: Optional[str] = None
        node = self._root
        index = 0
        while node is not None:
            cmp = self._cmp(key[index], node.char)
            if cmp < 0:
                parent, attr, node = node, "left", node.left
            elif cmp > 0:
                parent, attr, node = node, "right", node.right
            else:
                if index + 1 == len(key):
                    return node, index + 1, parent, attr
                index += 1
                parent, attr, node = node, "mid", node.mid
        return None, index, parent, attr

    def _find_entry(self, key: str) -> Optional[_Node]:
        key = _check_key(key)
        if not key:
            return None
        node, _, _, _ = self._descend(key)
        if node is not None and node.entry is not None:
            return node
        return None

    def _detach(self, node: _Node) -> None:
        parent = node.parent
        if parent is None:
            self._root = None
        elif parent.left is node:
            parent.left = None
        elif parent.right is node:
            parent.right = None
        elif parent.mid is node:
            parent.mid = None

    def _prune(self, node: _Node) -> None:
        """Drop the entry at ``node`` and any nodes no longer needed by other keys."""
        node.entry = None
        current: Optional[_Node] = node
        while current is not None and current.is_leaf() and current.entry is None:
            parent = current.parent
            self._detach(current)
            current = parent

    def add(self, key: str, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value already held for it."""
        key = _check_key(key)
        if not key:
            raise ValueError("keys must not be empty")
        node, index, parent, attr = self._descend(key)
        if node is not None:
            if node.entry is None:
                node.entry = Entry(key, value)
                self._size += 1
            else:
                node.entry.key = key
                node.entry.value = value
            return

        begin = _Node(key[index], parent)
        end = begin
        for char in key[index + 1:]:
            end.mid = _Node(char, end)
            end = end.mid
        end.entry = Entry(key, value)

        if parent is None:
            self._root = begin
        else:
            setattr(parent, attr, begin)
        self._size += 1

    def get(self, key: str) -> Any:
        """Return the value for ``key``; raise KeyError if it is absent."""
        node = self._find_entry(key)
        if node is None:
            raise KeyError(key)
        return node.entry.value

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raise KeyError if it is absent."""
        node = self._find_entry(key)
        if node is None:
            raise KeyError(key)
        value = node.entry.value
        self._prune(node)
        self._size = max(self._size - 1, 0)
        return value

    def clear(self) -> None:
        """Remove every mapping."""
        self._root = None
        self._size = 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find_entry(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.add(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"

    def keys(self) -> Iterator[str]:
        """Yield the keys in tree order."""
        return (entry.key for entry in self.entries())

    def values(self) -> Iterator[Any]:
        """Yield the values in tree order."""
        return (entry.value for entry in self.entries())

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs in tree order."""
        return ((entry.key, entry.value) for entry in self.entries())

    def entries(self) -> TSTTableIterator:
        """Return an iterator over the entries that can also remove them."""
        return TSTTableIterator(self)

    def foreach_key(self, fn: Callable[[str], Any]) -> None:
        """Call ``fn`` with every key."""
        for key in self.keys():
            fn(key)

    def foreach_value(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` with every value."""
        for value in self.values():
            fn(value)


class TSTTableIterator:
    """Iterates over a table's entries and can remove the last one returned."""

    def __init__(self, table: TSTTable) -> None:
        self._table = table
        self._stack: list[_Node] = [table._root] if table._root is not None else []
        self._current: Optional[_Node] = None

    def __iter__(self) -> TSTTableIterator:
        return self

    def __next__(self) -> Entry:
        while self._stack:
            node = self._stack.pop()
            for child in (node.right, node.mid, node.left):
                if child is not None:
                    self._stack.append(child)
            if node.entry is not None:
                self._current = node
                return node.entry
        self._current = None
        raise StopIteration

    def remove(self) -> Any:
        """Remove the entry last returned and return its value.

        Raises KeyError if there is no such entry or it was already removed.
        """
        node = self._current
        if node is None or node.entry is None:
            raise KeyError("no current entry to remove")
        value = node.entry.value
        self._current = None
        self._table._prune(node)
        self._table._size = max(self._table._size - 1, 0)
        return value