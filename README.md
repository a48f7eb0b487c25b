# lotools

Small helpers with no dependencies for everyday work with lists, dicts, callables, threads and errors. Everything is plain functions and a few small classes, and only the standard library is used.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `lotools.find`

This module searches and picks from sequences and mappings.

- `index_of`, `last_index_of`: return the index of an element, or -1.
- `find` returns `(item, found)`. `find_index_of` and `find_last_index_of` return `(item, index, found)`. `find_or_else` returns the match or a fallback.
- `find_key` and `find_key_by` return `(key, found)` for a dict.
- `find_uniques` and `find_uniques_by` return the items that occur exactly once. `find_duplicates` and `find_duplicates_by` return the first occurrence of each repeated item.
- `minimum` and `maximum` return the extreme item. `min_index` and `max_index` also return its index. `min_by`, `max_by`, `min_index_by` and `max_index_by` take a comparison `(item, current_best) -> bool`. On an empty input these return `None`, or `(None, -1)` where an index is part of the result.
- `earliest(*datetimes)` and `latest(*datetimes)` pick from datetimes. `earliest_by` and `latest_by` take a key function.
- `first`, `last`: return `(item, ok)`. `first_or_empty`, `first_or`, `last_or_empty` and `last_or` return the item or a default.
- `nth(collection, n)` accepts negative indexes and raises `IndexError` when `n` is out of bounds. `nth_or` and `nth_or_empty` return a fallback or `None` instead of raising.
- `sample` and `samples` pick random items. `sample_by` and `samples_by` take your own `random_int(n)` function, which must return an int in `[0, n)`.

Lists and tuples come back as the same type where the result is a sequence.

### `lotools.intersect`

This module holds membership tests and set-like operations that keep the original order.

- `contains`, `contains_by`.
- `every` / `every_by`, `some` / `some_by`, `none` / `none_by`.
- `intersect(list1, list2)`: returns the items of `list2` that are also in `list1`.
- `difference(list1, list2)`: returns `(only_in_list1, only_in_list2)`.
- `union(*lists)`: returns the distinct items in order of first appearance.
- `without(collection, *values)` and `without_by(collection, key, *keys)`.
- `without_empty`: drops falsy items.
- `without_nth(collection, *indexes)`: ignores indexes that are out of range.

### `lotools.mapping`

This module holds dict helpers.

- `keys`, `values`, `uniq_keys` and `uniq_values` each take one or more mappings.
- `has_key` and `value_or`.
- `pick_by`, `pick_by_keys`, `pick_by_values`, `omit_by`, `omit_by_keys` and `omit_by_values` each return a new mapping of the same dict type.
- `entries` / `to_pairs` turn a mapping into `(key, value)` tuples. `from_entries` / `from_pairs` turn the tuples back into a dict.
- `invert`: for a repeated value, the last key wins.
- `assign(*mappings)`: merges from left to right.
- `chunk_entries(mapping, size)`: raises `ValueError` when `size` is not positive.
- `map_keys`, `map_values`, `map_entries` and `map_to_slice`.

### `lotools.condition`

This module gives expression-style conditionals.

- `ternary(cond, a, b)` and `ternary_f(cond, fa, fb)`.
- `if_(cond, x).else_if(cond, y).else_(z)` builds an if/else chain. The lazy variants are `if_f`, `else_if_f` and `else_f`.
- `switch(value).case(v, r).case_f(v, fn).default(r)` builds a switch. The lazy default is `default_f`.

### `lotools.errors`

- `validate(ok, fmt, *args)` raises `ValueError` with a %-formatted message unless `ok` is true.
- `must(value, err, *msg)` and `must0(err, *msg)`:
  - If `err` is an exception or `False`, they raise `MustError`.
  - If `err` is any type other than `None`, a bool or an exception, they raise `TypeError`.
- `try_(callback)` returns whether the callback ran without raising.
- `try_or(callback, fallback)` returns `(result, ok)`.
- `try_with_error_value(callback)` returns `(exception_or_None, ok)`.
- `try_catch` and `try_catch_with_error_value` call a handler on failure.
- `errors_as(err, ExcType)` walks the `__cause__` / `__context__` chain and returns `(match, found)`.

### `lotools.func`

- `partial(f, arg1)` fixes the first argument of `f`.

### `lotools.channel`

This module provides a thread-safe FIFO `Channel(capacity)` and pipeline helpers built on background threads.

A `Channel` has these operations:

- `send`, which blocks while the channel is full.
- `receive`, which blocks until an item arrives.
- `close`.
- Iteration, which ends once the channel is closed and drained.
- `len`, which gives the number of buffered items.

Capacity 0 makes the channel unbuffered. Using a closed channel raises `ChannelClosed`.

- `slice_to_channel(buffer_size, items)` and `channel_to_slice(ch)`.
- `generator(buffer_size, producer)` runs `producer(emit)` in a thread.
- `buffer(ch, size)`, `buffer_with_timeout(ch, size, seconds)` and `buffer_with_context(cancel_event, ch, size)` each return `(items, count, seconds_spent, ok)`. `ok` is `False` once the channel has closed.
- `fan_in(cap, *channels)` and `fan_out(count, cap, upstream)`.
- `channel_dispatcher(stream, count, cap, strategy)` uses one of these strategies:
  - `dispatching_strategy_round_robin`
  - `dispatching_strategy_random`
  - `dispatching_strategy_weighted_random(weights)`
  - `dispatching_strategy_first`
  - `dispatching_strategy_least`
  - `dispatching_strategy_most`

### `lotools.concurrency`

- `synchronize()` or `synchronize(lock)` returns a `Synchronized`. Its `.do(callback)` runs callbacks one at a time under the lock and swallows their exceptions.
- `async_(f)` runs `f` in a thread and delivers the result on a `Channel`.
- `wait_for(condition, timeout, heartbeat_delay)` and `wait_for_with_context(cancel_event, condition, timeout, heartbeat_delay)` poll a condition. They return `(iterations, seconds_elapsed, found)`. All times are in seconds.

### `lotools.httpclient`

- `request(method, url, data=None, headers=None)` sends `data` as JSON with `urllib`. It returns `(decoded_json, raw_body)`. For a 204 response the decoded value is `None`.
- Any failure raises `HttpRequestError`, carrying `status_code` and `body` where known. Failures include a status outside 2xx.
- `JSON_HEADERS` holds the usual JSON `Content-Type` and `Accept` headers.

## Examples

```python
from lotools.find import find_duplicates, nth
from lotools.intersect import union
from lotools.condition import if_, switch
from lotools.mapping import invert

find_duplicates([1, 2, 2, 1, 2, 3])      # [1, 2]
nth([0, 1, 2, 3], -2)                     # 2
union([0, 1, 2], [2, 3], [3, 4])          # [0, 1, 2, 3, 4]
invert({"a": 1, "b": 2})                  # {1: "a", 2: "b"}

if_(False, 1).else_if(True, 2).else_(3)   # 2
switch(42).case(1, "one").case(42, "answer").default("other")  # "answer"
```

```python
from lotools.channel import slice_to_channel, fan_out, channel_to_slice

up = slice_to_channel(10, [0, 1, 2])
left, right = fan_out(2, 10, up)
channel_to_slice(left)                    # [0, 1, 2]
```

```python
from lotools.errors import must, try_or

must("value", None)                       # "value"
try_or(lambda: int("x"), 0)               # (0, False)
```

## What it does not do

- It is a library only. It has no command-line tool.
- The HTTP client sends one request at a time. It has no retries, no timeouts of its own, no sessions and no tracing.