# klib

A small library of containers with explicit, predictable growth rules, plus a minimal test runner.

- `klib.dynarr.DynArray` is a growable array. Its capacity starts at 8 and doubles whenever a push would go past it.
- `klib.hash_map.HashMap` is a separate-chaining hash map with pluggable hash and compare functions. It starts with 8 bucket slots and doubles the slot count once the load factor reaches 0.75.
- `klib.bucket.Bucket` is the chain the hash map uses. The same module provides the sample functions `hash_int` and `compare_int`.
- `klib.runner` is a registry of named checks. A `TestSuite` runs them, prints a coloured report and returns a `Summary`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

### Dynamic array

```python
from klib.dynarr import DynArray

arr = DynArray([1, 2, 3])
arr.push_back(4)
arr.extend(DynArray([5, 6]))   # any iterable works
assert list(arr) == [1, 2, 3, 4, 5, 6]
assert len(arr) == 6
arr[0] = 10
assert arr[0] == 10
print(arr.capacity)            # 8: nothing has outgrown the first block yet
```

`capacity` is a read-only property. Two `DynArray`s are equal when they hold equal items in the same order.

### Hash map

A hash function takes a key and the number of bucket slots, and returns a slot index below that number. A compare function returns 0 when two keys are equal. If you leave both out, `HashMap` uses `hash_int` and `compare_int`.

```python
from klib.bucket import hash_int, compare_int
from klib.hash_map import HashMap

m = HashMap(hash_int, compare_int)
m.set(32, 42)
assert m.get(32) == 42
assert m.get(3123) is None
assert 32 in m
print(dict(m.items()))
```

- `get` returns `None` when a key is missing.
- If the hash function returns an index outside the table, the map raises `ValueError`.
- `grow(new_capacity)` rehashes every entry into a larger table. A capacity that is not larger than the current one raises `ValueError`.
- `bucket(index)` returns the `Bucket` in that slot, or `None` if the slot was never used.
- `capacity` is the number of bucket slots.
- `len(m)` counts calls to `set`. That count includes calls that only replaced an existing value, and it is what drives growth.

### Bucket

```python
from klib.bucket import Bucket, compare_int

b = Bucket(compare_int)
b.set(1, "one")
b.set(1, "uno")        # same key: the value is replaced
assert b.get(1) == "uno"
assert len(b) == 1
assert list(b) == [(1, "uno")]
```

A bucket reserves 8 node slots to start with. It doubles that reservation (`capacity`) once an insert fills it.

### Test runner

```python
import sys
from klib.runner import TestSuite, check, check_equal

def test_addition():
    check_equal(1 + 1, 2)
    check(2 > 1, "2 > 1")

suite = TestSuite(32)
suite.register("test_addition", test_addition)
summary = suite.run(sys.stdout)
print(summary.total, summary.passed, summary.failed, summary.failures)
```

A test counts as failed when it raises `CheckFailed` or returns `False`. The message from a failed `check` or `check_equal` includes the file and line of the call. The runner prints that message and moves on to the next test. Other exceptions are not caught. Registering more tests than `max_tests` (32 by default) raises `ValueError`. `run` writes to standard output when `out` is not given.

## What it does not do

- Neither `HashMap` nor `Bucket` can remove an entry.
- Stored entries are not counted as distinct keys.
- The package is a library only. It installs no command-line program.

## Running the tests

```
pytest
```