# interviewkit

Small, tested solutions to classic interview tasks, together with compact
thread-based implementations of common design and concurrency patterns.
The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Algorithms

```python
from interviewkit.atm import get_money
from interviewkit.ships import count_ships
from interviewkit.layout import fix_text
from interviewkit.palindrome import is_palindrome_simple, is_palindrome_advanced
from interviewkit.rle import rle_encode
from interviewkit.paths import simplify_path
from interviewkit.zeros import move_zeros_new, move_zeros_in_place
from interviewkit.pyramid import pyramid_row_sum, pyramid_row_sum_naive
from interviewkit.abbreviation import abbreviate

get_money(5600)                       # {5000: 1, 500: 1, 100: 1}
count_ships([1, 1, 0, 0,
             0, 0, 0, 1,
             1, 1, 0, 1], 4)          # 3
fix_text("ghbdtn")                    # "привет"
is_palindrome_advanced("А роза упала на лапу Азора")   # True
rle_encode("AAAbbc")                  # "3A2b1c"
simplify_path("/a/./b/../../c/")      # "/c"
move_zeros_new([0, 1, 0, 3, 12])      # [1, 3, 12, 0, 0]
pyramid_row_sum(4)                    # 64
abbreviate("kubernetes")              # "k8s"
```

- `atm.get_money` pays out greedily from the notes in `atm.NOTES`
  (5000 down to 10). A non-positive amount raises `InvalidAmountError`;
  an amount that cannot be made up raises `CannotDispenseError`.
- `ships.count_ships` counts groups of adjacent ones in a field stored row
  by row; it raises `ValueError` when the length is not a multiple of the
  width.
- `layout.fix_text` maps keys typed on a Latin layout to the letters on the
  same keys of a ЙЦУКЕН layout and leaves other characters unchanged.
- `palindrome.is_palindrome_simple` compares every character as is;
  `is_palindrome_advanced` ignores case and anything that is not a letter.
- `zeros.move_zeros_in_place` rearranges a list in place and returns `None`.
- `abbreviation.Abbreviator` is a `str` subclass whose `str()` is its
  numeronym; strings of two characters or fewer are shown unchanged.

### Parking lookup

`interviewkit.parking` keeps frozen `Point(lat, lon)` values in a
`ParkingRegistry` (`add`, `search`, `in`, `len`, iteration) for
constant-time exact-match lookups. `default_registry()` returns a fresh
registry with two sample spots, and `parking_search` queries a shared one.

## Validation

`interviewkit.validator.StringValidator` holds compiled regular
expressions; `validate` returns `True` when every pattern matches somewhere
in the string. Patterns can be passed to the constructor or read one per
line, skipping empty lines, with `StringValidator.from_file`. A pattern
that does not compile raises `PatternError`, whose `line` attribute gives
the line number when the pattern came from a file.

## Design patterns

- `interviewkit.repository` — `CachedRepository` wraps any `Repository`
  (such as `InMemoryRepository`) with an in-memory cache: reads try the
  cache first, writes and deletions update the cache and then the wrapped
  repository. `InMemoryRepository.get` raises `KeyNotFoundError` for a
  missing key.
- `interviewkit.query_cache` — `CachingDatabase` decorates a `Database`
  and remembers the result of each query it has run.
- `interviewkit.adapter` — `LoggerAdapter` makes a `ThirdPartyLogger`
  (which writes `ThirdPartyLog: <message>` lines) usable wherever a
  `Logger` is expected; `client_code` depends only on `Logger`.

## Concurrency

- `distributed.distributed_query(query, replicas)` asks every
  `DatabaseHost` in parallel, retries transient failures, treats
  `NotFoundError` as final for that replica and returns the first success.
  It raises `QueryTimeoutError` or `AllReplicasFailedError`. Attempts,
  retry interval and overall timeout are keyword options.
- `pubsub.PubSubManager` fans messages out to each `Subscription` of a
  topic. Publishing never blocks: a subscriber whose bounded buffer is full
  misses the message. A subscription can be iterated or read with
  `get(timeout)`; reading a closed, drained one raises `SubscriptionClosed`.
- `pipeline.Pipeline` reads `Record`s, runs every processor over each
  record concurrently and writes the batch; a processor failure raises
  `PipelineError` and nothing is written.
- `fanout_pipeline.FanOutPipeline` lets each processor turn one `Item` into
  any number of items; a failing item is dropped and the rest go on.
- `worker_pool.run_worker_pool` runs a handler over `Job`s on a fixed
  number of threads and returns `JobResult`s in completion order.
- `log_aggregator.LogAggregator` reads `LogMessage`s until the reader
  raises `EOFError`, passes each through the transformers on a worker pool
  and stores it; `aggregate` returns the stored messages.
- `taskgroup.TaskGroup` runs callables in threads, optionally limited in
  number. The first error sets its `cancelled` event, which tasks can watch
  to stop early, and is raised again by `wait` (or on leaving a `with`
  block). `fetch_all` calls a client for many addresses through a
  `TaskGroup`. `fan_in` starts one timed request per `City` and yields the
  names in the order they finish.

## What is not included

This is a library only: it installs no command-line programs and runs no
network server. Work that would talk to real databases or services is
represented by the interfaces above, for you to implement.