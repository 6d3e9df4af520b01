# tsttable

A mapping from non-empty string keys to arbitrary values, stored in a
ternary search tree.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the table

```python
from tsttable.table import TSTTable

table = TSTTable()
table.add("key", "value")
table["randomstring"] = "cookies"
table["5"] = "m31"

len(table)              # 3
table.get("key")        # "value"
"5" in table            # True

table.remove("randomstring")   # returns "cookies"
del table["5"]

list(table.keys())      # ["key"]
table.clear()
```

Adding a key that is already present replaces its value and leaves the size
unchanged. Looking up or removing a key that is not present raises
`KeyError`.

Keys must be `str`: any other type raises `TypeError` when adding, getting
or removing, and `in` simply answers `False`. Adding the empty string raises
`ValueError`; it is never found by `get` or `in`.

### Iterating

`keys()`, `values()` and `items()` yield in tree order: a depth-first walk
that visits a node, then its left, middle and right subtrees. This is not
always sorted order; a key that ends at a node comes before the keys in
that node's left subtree.

Iterating over the table itself yields its keys. `entries()` yields `Entry`
objects holding `key` and `value`. `foreach_key(fn)` and
`foreach_value(fn)` call `fn` on each key or value.

### Removing while iterating

A `TSTTableIterator` (the object `entries()` returns) may remove the entry
it last returned without disturbing the walk:

```python
from tsttable.table import TSTTable, TSTTableIterator

table = TSTTable()
for key, value in [("five", "555"), ("three", "333"), ("random", "439834")]:
    table[key] = value

it = TSTTableIterator(table)
for entry in it:
    if entry.key != "three":
        it.remove()          # returns the removed value

list(table.keys())           # ["three"]
```

Calling `remove()` before the first entry, a second time for the same
entry, or once the walk has ended raises `KeyError`.

### Custom character order

`TSTTable` takes an optional `char_cmp(c1, c2)` function returning a
negative number, zero or a positive number. It decides how characters are
placed in the tree, and so the order of iteration. By default characters
are compared by code point.

```python
reverse = TSTTable(lambda a, b: ord(b) - ord(a))
```