# searchcore

Building blocks for the core of a search engine: sequence algorithms, small
containers, a reader for `key: value` configuration files, and two
containers that keep their data in memory-mapped files.

## Installation

```
pip install searchcore
```

The package uses only the standard library. To run the tests, install the
`test` extra (`pip install searchcore[test]`) and run `pytest`.

## Modules

| Module | What it provides |
| --- | --- |
| `searchcore.text` | String helpers: `find`, `substr`, `trim`, `left_trim`, `right_trim`, `string_hash` (a 32-bit one-at-a-time hash), and C-style numeric parsing with `stoi`, `stol`, `stoul` and `stod` |
| `searchcore.algorithms` | Sequence algorithms addressed by index ranges: search, count, copy, fill, transform, remove, replace, reverse, rotate, shift, `lower_bound`/`upper_bound`/`binary_search`, min/max, clamp, and others |
| `searchcore.config` | `Config` and `parse_config` for `key: value` files, with typed getters; errors are raised as `ConfigError` |
| `searchcore.linked_list` | `LinkedList`, a doubly linked list whose `insert` and `erase` take `ListNode` handles |
| `searchcore.deque` | `Deque`, a double-ended queue whose reads and pops raise `IndexError` when empty or out of bounds |
| `searchcore.span` | `Span`, a view over a window of a mutable sequence that reads and writes through |
| `searchcore.ordered_map` | `OrderedMap`, an AVL-tree map that keeps its keys in order and accepts a custom `less` comparator |
| `searchcore.vector_file` | `VectorFile`, a growable array of `struct`-formatted records stored in a memory-mapped file |
| `searchcore.ordered_map_file` | `OrderedMapFile`, an insert-only B+ tree stored in a memory-mapped file |

## Examples

### Config files

```python
from searchcore.config import Config

config = Config.from_text("""
# crawler settings
threads: 8
damping: 0.85
name: crawler one
""")

config.get_int("threads")             # 8
config.get_double("damping")          # 0.85
config.get_string("name")             # "crawler one"
config.get_string("missing", "none")  # "none"
"threads" in config                   # True
```

`Config("engine.conf")` reads `config/engine.conf`. Pass `base_dir` to read
from another directory. If a key is missing and no default is given, or a
value cannot be parsed as the requested type, the getter raises
`ConfigError`.

### Ordered map

```python
from searchcore.ordered_map import OrderedMap

m = OrderedMap()
m.insert(3, "three")
m.insert(1, "one")
m[2] = "two"

list(m.keys())        # [1, 2, 3]
m.lower_bound(2)      # (2, "two")
m.upper_bound(2)      # (3, "three")
m.erase_and_next(2)   # (3, "three")

descending = OrderedMap(less=lambda a, b: a > b)
```

### Algorithms

```python
from searchcore import algorithms

data = [1, 2, 3, 4, 5]
algorithms.rotate(data, 2)          # data is now [3, 4, 5, 1, 2]
end = algorithms.remove(data, 4)    # data[:end] == [3, 5, 1, 2]
```

### File-backed containers

```python
from searchcore.vector_file import VectorFile
from searchcore.ordered_map_file import OrderedMapFile

with VectorFile("numbers.bin", "<q") as vec:
    vec.push_back(42)
    vec[0]                          # 42

with OrderedMapFile("index.bin", "<Q", "<I") as tree:
    tree.insert(10, 7)              # True
    tree.insert(10, 9)              # False, the key is already present
    tree.find(10)                   # (10, 7)
    10 in tree                      # True
    len(tree)                       # 1
```

Both containers keep their data in the file. Opening the same path again
with the same formats gives back the contents stored before.

## What the package does not do

- It is a library only; it has no command-line tool, and it does no crawling,
  indexing or query handling of its own.
- `OrderedMapFile` only inserts and looks up: it has no removal, no update of
  stored values and no ordered iteration.
- The file-backed containers take no locks; sharing a file between processes
  or threads is up to the caller.