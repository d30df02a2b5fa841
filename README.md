# xtlo

Small functional helpers for everyday Python code: searching sequences,
set-like operations, mapping transforms, inline conditionals, error
handling shortcuts, thread-backed channels and simple concurrency
primitives. It has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it offers |
| --- | --- |
| `xtlo.find` | `index_of`, `last_index_of`, `find`, `find_index_of`, `find_last_index_of`, `find_or_else`, `find_key`, `find_key_by`, `find_uniques`, `find_uniques_by`, `find_duplicates`, `find_duplicates_by`, `min_of`, `min_index`, `min_by`, `min_index_by`, `max_of`, `max_index`, `max_by`, `max_index_by`, `earliest`, `earliest_by`, `latest`, `latest_by`, `first`, `first_or`, `first_or_empty`, `last`, `last_or`, `last_or_empty`, `nth`, `nth_or`, `nth_or_empty`, `sample`, `sample_by`, `samples`, `samples_by` |
| `xtlo.intersect` | `contains`, `contains_by`, `every`, `every_by`, `some`, `some_by`, `none`, `none_by`, `intersect`, `difference`, `union`, `without`, `without_by`, `without_empty`, `without_nth`, `elements_match`, `elements_match_by` |
| `xtlo.maps` | `Entry`, `keys`, `uniq_keys`, `has_key`, `values`, `uniq_values`, `value_or`, `pick_by`, `pick_by_keys`, `pick_by_values`, `omit_by`, `omit_by_keys`, `omit_by_values`, `entries`, `to_pairs`, `from_entries`, `from_pairs`, `invert`, `assign`, `chunk_entries`, `map_keys`, `map_values`, `map_entries`, `map_to_slice`, `filter_map_to_slice` |
| `xtlo.condition` | `ternary`, `ternary_f`, `if_`, `if_f` (returning `IfElse`), `switch` (returning `SwitchCase`) |
| `xtlo.func` | `partial`, `partial1` ... `partial5` |
| `xtlo.errors` | `validate`, `must`, `must0` ... `must6`, `try_`, `try0` ... `try6`, `try_or`, `try_or1` ... `try_or6`, `try_with_error_value`, `try_catch`, `try_catch_with_error_value`, `errors_as`, `MustError` |
| `xtlo.channel` | `Channel`, `ChannelClosed`, `slice_to_channel`, `channel_to_slice`, `generator`, `buffer`, `batch`, `buffer_with_context`, `buffer_with_timeout`, `batch_with_timeout`, `fan_in`, `channel_merge`, `fan_out`, `channel_dispatcher` and the `dispatching_strategy_*` functions |
| `xtlo.concurrency` | `Synchronizer`, `synchronize`, `async_`, `async0` ... `async6`, `wait_for`, `wait_for_with_context` |
| `xtlo.constraints` | `Clonable` and `SupportsOrdering` protocols |

## Conventions

- Lookups that can come up empty return a `(value, found)` tuple; the
  value is `None` when nothing was found. Helpers such as `min_of`,
  `first_or_empty` or `nth_or_empty` return `None` for an empty input.
- `nth` raises `IndexError` when the index is out of bounds; negative
  indices count from the end.
- `validate` raises `ValueError`; the `must` helpers raise `MustError`;
  `chunk_entries` raises `ValueError` for a size below 1; `synchronize`
  raises `ValueError` when given more than one lock.
- Sequence helpers return a list, or a tuple for a tuple input, or a
  value of the same list subclass for a list-subclass input.
- Durations are given and returned in seconds. A "context" is a
  `threading.Event`: setting it cancels the wait.

## Examples

```python
from xtlo.find import find_duplicates, nth
from xtlo.intersect import union, difference
from xtlo.maps import pick_by, invert
from xtlo.condition import if_, switch

find_duplicates([1, 2, 2, 1, 2, 3])          # [1, 2]
nth([0, 1, 2, 3], -2)                         # 2
union([0, 1, 2], [0, 2, 10])                  # [0, 1, 2, 10]
difference([0, 1, 2, 3], [0, 2, 6])           # ([1, 3], [6])
pick_by({"foo": 1, "bar": 2}, lambda k, v: v % 2 == 1)   # {"foo": 1}
invert({"a": 1, "b": 2})                      # {1: "a", 2: "b"}

if_(False, 1).else_if(True, 2).else_(3)       # 2
switch(42).case(1, "one").case(42, "answer").default("other")  # "answer"
```

Error helpers:

```python
from xtlo.errors import must, try_or, MustError

must("value", None)                  # "value"
try_or(lambda: int("x"), 42)         # (42, False)

try:
    must(1, False, "operation shouldn't fail with %s", "foo")
except MustError as exc:
    print(exc)                       # operation shouldn't fail with foo
```

Channels and concurrency:

```python
from xtlo.channel import slice_to_channel, channel_to_slice, fan_out
from xtlo.concurrency import async_, wait_for

ch = slice_to_channel(2, [1, 2, 3])
channel_to_slice(ch)                 # [1, 2, 3]

outs = fan_out(2, 10, slice_to_channel(10, [0, 1, 2]))
[channel_to_slice(o) for o in outs]  # [[0, 1, 2], [0, 1, 2]]

result = async_(lambda: 10)
result.receive(None)                 # (10, True)

iterations, elapsed, found = wait_for(lambda i: i >= 5, 0.2, 0.001)
```

A `Channel` is a FIFO shared between threads. With a positive capacity
`send` blocks while it is full; with capacity 0 each `send` waits until
a receiver has taken the item. `receive` returns `(item, True)`, or
`(None, False)` once the channel is closed and drained, and raises
`TimeoutError` when a timeout runs out. Sending on or closing a closed
channel raises `ChannelClosed`. Background work runs in daemon threads.