# searchcore

The data structures and sequence algorithms a search engine is built on. The package is pure Python, needs only the standard library, and supports Python 3.10 and later.

## Modules

| Module | What it provides |
| --- | --- |
| `searchcore.algorithm` | Sequence helpers such as `find`, `find_if`, `search`, `find_end`, `find_first_of`, `adjacent_find`, `search_n`, `count`, `equal`, `lower_bound`, `upper_bound`, `binary_search`, `max_of`, `min_of`, `max_element`, `min_element`, `clamp` and `clamp_range`, plus in-place modifiers (`fill`, `replace`, `reverse`, `rotate`, `shift_left`, `shift_right`). A search returns an index, or `len(seq)` when nothing is found. |
| `searchcore.string_view` | `StringView` is a read-only window onto a string. `remove_prefix` and `remove_suffix` narrow it without copying the text. It also has `substr`, `compare`, `starts_with`, `ends_with` and `find`. `find` returns `StringView.NPOS` (-1) when the target is not found. |
| `searchcore.json_builder` | `JSONBuilder` holds a flat mapping from strings to strings. `to_json(*args)` fills it from alternating keys and values, `load(text)` parses a flat object, and `dump()` renders the pairs with quoted keys and values. |
| `searchcore.bloom_filter` | `BloomFilter(num_objects, false_positive_rate)` sizes its bit array for the capacity and error rate you give it. It hashes items with MD5 and double hashing. Add items with `insert`, test them with `in`, and read `memory_usage()` for the array's size in bytes. |
| `searchcore.csr` | `CSRMatrix` is a compressed sparse row matrix. Add edges with `add_edge`, call `finalize()` once, then use `multiply(vector)`. |
| `searchcore.dary_heap` | `DaryHeap(arity=4, compare=operator.lt)` is a heap of unique values, with the smallest priority on top by default. It has `push`, `pop`, `top`, `update_priority` and `in`. |
| `searchcore.lru_cache` | `LRUCache(capacity, default_factory=None)` evicts the least recently used entry when full. `find` and `insert` return `CacheEntry` objects. `cache[key]` reads and marks the entry as used, and inserts a default value if a `default_factory` was given. `erase` removes a key. |
| `searchcore.mem_map_file` | `MemMapFile(path, force_in_memory=True)` maps a non-empty file read-only and can be used as a context manager. It raises `FileOpenFailure` when the file cannot be opened or mapped. |
| `searchcore.priority_queue` | `PriorityQueue(items=(), compare=operator.lt)` is a binary heap. The largest item is on top by default; pass `operator.gt` to put the smallest on top. `pop()` on an empty queue returns `None`. |
| `searchcore.unordered_set` | `UnorderedSet` is a hash set with separate chaining. It doubles its bucket table when the load factor goes past 0.75. `insert` and `erase` report whether anything changed. |

## Installation

```
pip install .
```

## Examples

```python
import operator

from searchcore.algorithm import lower_bound, search, clamp_range
from searchcore.bloom_filter import BloomFilter
from searchcore.dary_heap import DaryHeap
from searchcore.lru_cache import LRUCache
from searchcore.string_view import StringView

lower_bound([1, 2, 3, 4, 5], 3)               # 2
search([1, 2, 3, 4, 5, 6], [4, 5])            # 3
values = [1, 2, 3, 4, 5]
clamp_range(values, 2, 4)                     # values == [2, 2, 3, 4, 4]

seen = BloomFilter(1000, 0.01)
seen.insert("page-42")
"page-42" in seen                             # True

heap = DaryHeap()
heap.push("a", 5)
heap.push("b", 1)
heap.top()                                    # "b"
heap.update_priority("a", 0)
heap.pop()                                    # "a"

cache = LRUCache(3)
cache.insert(1, 100)
cache.find(1).value                           # 100

view = StringView("Hello, World!")
view.find("World")                            # 7
view.substr(7, 5) == StringView("World")      # True
```

## What it does not do

The package is a library only. It has no command-line tool and no server. Its storage is read-only: `MemMapFile` maps existing files but never writes them, and no on-disk index or ordered map is included. `JSONBuilder` is not a general JSON parser. It handles a single flat object, keeps every value as a string, and does not support nesting or escape sequences.

## Running the tests

```
pip install .[test]
pytest
```