# ftkit

A small toolkit of everyday helpers with C-library style semantics:

- `ftkit.chars`: ASCII classification and case conversion for one-character
  strings or integer codes (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_number`, `to_upper`, `to_lower`).
- `ftkit.convert`: decimal text and 32-bit integers (`atoi`, which wraps
  around like C; `atoi_checked`, which raises `OverflowError`; `itoa`).
- `ftkit.memory`: operations on `bytearray`-like buffers (`memset`, `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, and `memmove(buf, dst, src, length)`
  for overlapping copies inside one buffer). Spans outside the buffer raise
  `ValueError`.
- `ftkit.strings`: string operations that return indices (or `None`) rather
  than pointers: `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi`, `striteri`. `strlcpy` and `strlcat` return a tuple of the
  resulting text and the length the full result would have had.
- `ftkit.printf`: a minimal formatter supporting `%s %c %d %i %u %x %X %p %%`
  (`sformat` returns the text, `printf` writes it and returns its length;
  `format_number` and `format_pointer` are the building blocks).
- `ftkit.linked`: a singly linked list (`LinkedList`, `ListNode`,
  `delete_one`) with `add_front`, `add_back`, `last`, `clear`, `iterate` and
  `map`.
- `ftkit.dll`: a named doubly linked list of integer nodes (`DoublyLinkedList`,
  `Node`) that keeps head, tail, size and per-node `index`, `cost` and
  `target_node`, and can draw itself as a text diagram (`render`, `print`).
- `ftkit.lines`: reading a file descriptor one line at a time, with a
  separate stash per descriptor (`LineReader`, `get_next_line`).

## Installation

```
pip install .
```

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.strings import split, strtrim, strlcpy, strchr
from ftkit.printf import sformat

atoi("   -42abc")                      # -42
itoa(-2147483648)                      # "-2147483648"
split("  hello  world ", " ")          # ["hello", "world"]
strtrim("xxhixx", "x")                 # "hi"
strlcpy("hello", 3)                    # ("he", 5)
strchr("abc", "c")                     # 2
sformat("%d in hex is %x", 255, 255)   # "255 in hex is ff"
```

Byte buffers:

```python
from ftkit.memory import memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)                  # bytearray(b"ababcd")
```

Parse decimal strings into a doubly linked list:

```python
from ftkit.dll import DoublyLinkedList

stack = DoublyLinkedList.from_strings(["3", "-1", "7"], "a")
[node.data for node in stack]          # [3, -1, 7]
[node.index for node in stack]         # [0, 1, 2]
```

`from_strings` raises `ValueError` for text that is not a number or does not
fit in a 32-bit integer.

Read lines from a file descriptor. Lines come back as `bytes`, newline
included:

```python
import os
from ftkit.lines import LineReader

reader = LineReader(buffer_size=32)
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.lines(fd):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

There are no helpers for writing characters, strings or numbers straight to a
file descriptor, and no routine that reports a fatal error and exits; use
`os.write`, `printf(..., file=...)` or `sys.exit` for that. The package has
no command-line program.

## Running the tests

```
pip install .[test]
pytest
```