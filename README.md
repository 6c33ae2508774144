# overture

Small building blocks for writing compilers, parsers and similar tools in
Python. The package has no third-party dependencies.

## What is inside

| Module                   | Provides                                                                  |
|--------------------------|---------------------------------------------------------------------------|
| `overture.bits`          | `make_bitmask`, `sign_extend`, float/double bit-pattern conversions        |
| `overture.hash`          | FNV-1a hashing: `hash_init`, `hash_uint8` … `hash_uint64`, `hash_float`, `hash_double`, `hash_string` |
| `overture.primes`        | Prime table capacities: `next_prime`, `mod_prime`                          |
| `overture.minstd`        | The *minstd* generator: `minstd_gen`, `minstd_stream`                      |
| `overture.hash_table`    | Open-addressing `HashTable`, with `HashMap` and `HashSet` built on it      |
| `overture.heap`          | `heap_push`, `heap_pop` and `heap_sort` on lists, with a custom ordering   |
| `overture.queue`         | `PriorityQueue`, greatest element first                                    |
| `overture.union_find`    | `union_find` and `union_merge` over a list of parent indices               |
| `overture.immutable_set` | Interned sorted sets: `ImmutableSet` and `ImmutableSetPool`                |
| `overture.unique_stack`  | `UniqueStack`, where each element can be pushed only once                  |
| `overture.graph`         | Directed `Graph` with a source and a sink, traversal orders, `dot` output  |
| `overture.str_pool`      | `StrPool` string interning                                                 |
| `overture.term`          | ANSI escape sequences (`term1`, `term2`, `term3`) and `is_term`            |
| `overture.log`           | `Log` for compiler-style errors, warnings and notes                        |
| `overture.cli`           | Declarative option parsing: `cli_flag`, `cli_option_*`, `parse_options`    |
| `overture.files`         | `read_file`, `file_exists`, `file_size`, `full_path`, path splitting       |
| `overture.thread_pool`   | `ThreadPool` running `WorkItem`s on worker threads                         |
| `overture.harness`       | `Harness` of named test cases with prefix filtering, and `main`            |

## Examples

### Hash maps and sets

`HashMap` and `HashSet` take a hash function of the form `hash_func(h, key)`
that mixes the key into the running hash `h`, as the functions of
`overture.hash` do. `HashMap` is a `MutableMapping` and `HashSet` a
`MutableSet`; `insert` returns `False` when the key is already present.

```python
from overture.hash import hash_uint32
from overture.hash_table import HashMap, HashSet

squares = HashMap(hash_uint32)
for i in range(10):
    squares.insert(i, i * i)
assert squares[3] == 9
assert squares.find(42) is None

seen = HashSet(hash_uint32)
assert seen.insert(7)
assert not seen.insert(7)
```

### Interning strings

```python
from overture.str_pool import StrPool

pool = StrPool()
foo = pool.insert("foo")
assert pool.insert("foo") is foo
assert "foo" in pool
```

### Immutable sets

A pool returns the same `ImmutableSet` object for equal contents, whatever
the order or repetition of the elements given.

```python
from overture.hash import hash_uint32
from overture.immutable_set import ImmutableSetPool

pool = ImmutableSetPool(hash_uint32)
abc = pool.insert([3, 1, 2, 1])
assert pool.insert([1, 2, 3]) is abc
assert list(abc) == [1, 2, 3]
assert pool.merge(abc, pool.insert([4])) is pool.insert([1, 2, 3, 4])
```

### Priority queue and heap sort

```python
from overture.heap import heap_sort
from overture.queue import PriorityQueue

queue = PriorityQueue(lambda a, b: a < b)
for value in (3, 1, 4, 1, 5):
    queue.push(value)
assert queue.top() == 5
assert queue.pop() == 5

values = [5, 2, 9, 1]
heap_sort(values)
assert values == [1, 2, 5, 9]
```

### Union-find

```python
from overture.union_find import union_find, union_merge

parents = list(range(8))
union_merge(parents, 1, 2)
union_merge(parents, 2, 5)
assert union_find(parents, 1) == union_find(parents, 5)
```

### Graphs

A `Graph` always has a source and a sink node. Nodes are identified by their
keys; inserting the same key twice returns the same node, and connecting the
same pair twice returns the same edge. The sink may not have outgoing edges
and the source may not have incoming ones (`ValueError`).

```python
from overture.graph import Graph, GraphDir

graph = Graph(0, 0, "entry", "exit")
entry = graph.insert("entry")
body = graph.insert("body")
exit_node = graph.insert("exit")

graph.connect(entry, body)
graph.connect(body, body)
graph.connect(body, exit_node)

assert graph.compute_depth_first_order(GraphDir.FORWARD) == [entry, body, exit_node]
assert graph.compute_post_order(GraphDir.FORWARD) == [exit_node, body, entry]
```

`GraphNode.edges(direction)` iterates over a node's outgoing or incoming
edges. `Graph.write_dot(file)` writes the edges in Graphviz `dot` format and
`Graph.dump()` writes them to standard output.

### Diagnostics

`Log` writes messages in compiler style. With a `FileLoc` it names the range,
and with a `line_reader(file_name, row)` that returns the text of a line, it
also shows the line with a marker under the range. It counts errors and
warnings, can turn warnings into errors (`warns_as_errors`), and stops
printing once `max_errors` or `max_warns` is exceeded.

```python
import io
from overture.log import FileLoc, Log, SourcePos

out = io.StringIO()
log = Log(out, disable_colors=True, line_reader=lambda name, row: "let x = 1")
log.error(FileLoc("main.src", SourcePos(1, 5), SourcePos(1, 6)), "unknown name '%s'", "x")
assert log.error_count == 1
```

### Command-line options

Each option keeps its parsed result in `value`. `parse_options` takes the
argument list with the program name first, replaces consumed arguments with
`None`, and raises `ValueError` for an unknown option or a missing value.
Long options accept both `--name value` and `--name=value`.

```python
from overture.cli import cli_flag, cli_option_string, cli_option_uint32, parse_options

verbose = cli_flag("-v", "--verbose")
output = cli_option_string("-o", "--output")
jobs = cli_option_uint32(None, "--jobs")
argv = ["prog", "-v", "--output=out.txt", "--jobs", "4", "input.txt"]
parse_options(argv, [verbose, output, jobs])
assert (verbose.value, output.value, jobs.value) == (True, "out.txt", 4)
```

### Thread pool

```python
from overture.thread_pool import ThreadPool, WorkItem

results = []
items = [WorkItem(lambda item, thread_id, n=n: results.append(n * n)) for n in range(4)]
with ThreadPool(2) as pool:
    pool.submit(items)
    done = pool.wait()
assert sorted(results) == [0, 1, 4, 9]
```

`ThreadPool(0)` picks the worker count from the `NPROC` environment
variable, else the processor count. An exception raised by a work function is
kept in the item's `error` attribute.

### Test harness

```python
from overture.harness import Harness

harness = Harness()

@harness.case()
def arithmetic(context):
    context.require(1 + 1 == 2, "1 + 1 == 2")

harness.filter([])          # no prefixes: enable every case
assert harness.run(disable_colors=True)
```

Cases are disabled until `filter` enables them by name prefix. `run` prints a
line per case and a summary, and returns whether every case passed.
`overture.harness.main(argv)` runs the cases registered on
`overture.harness.DEFAULT_HARNESS`, taking name prefixes as arguments and the
options `-h`/`--help`, `--list` and `--no-color`; it returns the exit status.

## What the package does not do

The package installs no command of its own: `overture.harness.main` is meant
to be called from a script of yours after registering cases on
`DEFAULT_HARNESS`. The harness runs cases one after another in the same
process, so a case that crashes the interpreter stops the whole run.

## Running the package's tests

Install the `test` extra, which brings in pytest, and run `pytest` from the
project directory.