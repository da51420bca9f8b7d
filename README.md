# practicekit

A collection of small, complete programs and library pieces. Each one solves a
single classic programming exercise. The exercises cover number sequences,
matrix and vector arithmetic, expression trees, a protobuf wire-format decoder,
a binary search tree, a ROT-n stream decoder, text widgets, the dining
philosophers with threads and with asyncio, a multithreaded link checker, and a
WebSocket chat server and client.

## Installing

```
pip install practicekit
```

To run the test suite, install the test extra and then run pytest:

```
pip install "practicekit[test]"
pytest
```

## Using the library

```python
from practicekit.collatz import collatz_length
from practicekit.fibonacci import fib
from practicekit.minimum import minimum
from practicekit.offsets import offset_differences
from practicekit.matrix import transpose

collatz_length(11)                       # 15
fib(20)                                  # 6765
minimum("hello", "goodbye")              # "goodbye"
offset_differences(1, [1, 3, 5, 7])      # [2, 2, 2, -6]
transpose([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
```

`fib` raises `ValueError` for a negative argument.

### Vectors

`practicekit.vectors.magnitude` returns the Euclidean length of a vector.
`normalize` returns a new list scaled to length 1.0. A zero vector has no
direction, so normalizing it gives NaN in every coordinate.

### Expression trees

```python
from practicekit.expression import BinaryOp, Operation, Value, evaluate

evaluate(BinaryOp(Operation.SUB, Value(20), Value(10)))   # 10
```

Division truncates toward zero. Dividing by zero raises `DivideByZeroError`.

### Binary tree

`BinaryTree` is a set backed by an unbalanced binary search tree. It stores
each value only once:

```python
from practicekit.binary_tree import BinaryTree

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree)     # 2
1 in tree     # True
```

### Counting

```python
from practicekit.counter import Counter

ctr = Counter()
ctr.count("apple")
ctr.count("apple")
ctr.times_seen("apple")   # 2
ctr.times_seen("pear")    # 0
```

### Protobuf decoding

`parse_message` decodes protobuf messages into `Person` and `PhoneNumber`
records:

```python
from practicekit.protobuf import Person, parse_message

person = parse_message(Person, bytes([0x0A, 0x04, 0x45, 0x76, 0x61, 0x6E, 0x10, 0x16]))
# Person(name='Evan', id=22, phone=[])
```

The lower-level pieces are also available: `parse_varint`, `unpack_tag`,
`parse_field` and `iter_fields`. The decoder understands only two wire types:
varint (`WireType.VARINT`) and length-delimited (`WireType.LEN`). Varints are
limited to 7 bytes. Anything else, along with truncated input and invalid
UTF-8 in string fields, raises `DecodeError`.

### ROT-n

`rotate_bytes(data, rot)` rotates every ASCII letter in `data` and leaves all
other bytes unchanged. `RotDecoder(stream, rot)` wraps a binary stream so that
its `read` applies the same rotation:

```python
import io
from practicekit.rot import RotDecoder

RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13).read()
# b"To get to the other side!"
```

### Directory listing

`DirectoryIterator(path)` yields every name in a directory. It starts with `.`
and `..`, then gives the directory's entries. Use it as a context manager, or
call `close()` yourself. A directory that does not exist raises `OSError`.

### Other modules

- `practicekit.packages`: `Package`, `Dependency`, `Language` and a chaining
  `PackageBuilder`.
- `practicekit.verbosity`: `StderrLogger`, and a `VerbosityFilter` that passes
  on only the messages at or below its `max_verbosity`.
- `practicekit.widgets`: `Window`, `Label` and `Button`, drawn as text boxes
  into any text stream by `draw_into`, or to standard output by `draw`.
- `practicekit.elevator`: elevator event types and constructor functions.
- `practicekit.philosophers.dine` and `practicekit.async_philosophers.dine`:
  run the dining philosophers and yield their thoughts as they arrive.
- `practicekit.chat_server`: `Broadcaster`, `handle_connection` and `serve`.
- `practicekit.chat_client`: `run_client`.
- `practicekit.link_checker`: `visit_page`, `CrawlState` and `check_links`.

## Commands

| Command | What it does |
| --- | --- |
| `practicekit-collatz [START]` | Prints the Collatz sequence length. `START` defaults to 11. |
| `practicekit-fib [N]` | Prints a Fibonacci number. `N` defaults to 20. |
| `practicekit-transpose` | Transposes a sample 3×3 matrix. |
| `practicekit-vectors` | Shows a vector's magnitude before and after normalization. |
| `practicekit-packages` | Builds and prints some sample packages. |
| `practicekit-verbosity` | Logs two messages through a verbosity filter. Only one of them passes. |
| `practicekit-widgets` | Draws a sample text window. |
| `practicekit-counter` | Counts some sample values and prints the counts. |
| `practicekit-elevator` | Prints a sequence of elevator events. |
| `practicekit-listdir [PATH]` | Lists the entries of `PATH`, including `.` and `..`. `PATH` defaults to the current directory. |
| `practicekit-philosophers [--rounds N]` | Runs five philosophers on threads. |
| `practicekit-async-philosophers [--rounds N]` | Runs two philosophers as asyncio tasks. |

### Chat

Start the server. It listens on 127.0.0.1 port 2000 by default, which you can
change with `--host` and `--port`. It greets each client and then relays every
message it receives to all connected clients:

```
practicekit-chat-server
```

In other terminals, connect clients. Each client sends every line typed on
standard input and prints every message from the server. It stops when
standard input ends or the server closes the connection. Use `--uri` to
connect somewhere other than `ws://127.0.0.1:2000`:

```
practicekit-chat-client
```

### Link checker

The link checker crawls a site with a pool of worker threads. It follows links
only on pages within the start URL's domain, and at the end it prints the URLs
that could not be fetched or that answered with a non-success status:

```
practicekit-link-checker https://example.com/ --threads 16
```

The start URL must have a domain name; a bare IP address is rejected.

### Project tasks

```
practicekit-tasks install-tools
```

This command installs a fixed list of documentation tools by running
`cargo install` once for each tool. It uses the program named by the `CARGO`
environment variable, or `cargo` if that variable is not set. If a task is
missing or unknown, the command prints a help message and exits with a
non-zero status. It does the same if an install fails.