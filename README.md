# pcclist

`pcclist` provides `List`, a list whose items may be of any type. Items are
read back by their exact type, and every index is checked.

## Installation

```
pip install pcclist
```

## Usage

```python
from pcclist.anylist import List, BadAnyCast

items = List(42, "hello", 3.14)
items.append(13.37)
items.append("world")

items.get(0, int)          # 42
items.try_get(1, float)    # None: the item is not a float
items.get(1, float)        # raises BadAnyCast

ref = items[0]             # a ValueRef pointing at slot 0
ref.value                  # 42
ref.cast(int)              # 42
ref == 42                  # True
str(ref)                   # "42"

items[0] = 100             # replace an item
ref.assign(7)              # or replace it through the reference

items.insert(1, "between")
items.remove(2)
len(items), items.size()

for value_ref in items:    # iteration yields a ValueRef for each slot
    print(value_ref)

items.clear()
items[10]                  # raises IndexError
```

### Type checks

Types are matched exactly: `get`, `cast` and comparisons do not accept a
subclass or convert between types, so asking for an `int` item as a `float`
raises `BadAnyCast` (a subclass of `TypeError`). `try_get` returns `None`
instead of raising, both for a wrong type and for an index out of range.

Comparing a `ValueRef` with `==` or `!=` casts the stored item to the type of
the other operand, so comparing against a value of a different type raises
`BadAnyCast` rather than returning `False`.

### Indices

Indices must be integers, non-negative and in range; negative indices are not
counted from the end. `insert` also accepts the index one past the end. An
out-of-range index raises `IndexError`; an index that is not an integer raises
`TypeError`.

### Printing

`str()` of a `ValueRef` prints `int` and `str` items as they are, `float`
items in the shortest general form (`3.14`, `13.37`), and an item of any other
type as `[unprintable: <type name>]`.

## Demo

To run a short demonstration of appending, typed retrieval, assignment and
out-of-range handling:

```
pcclist-demo
```

The same demonstration is available as `pcclist.demo.main()`.

## Tests

```
pip install "pcclist[test]"
pytest
```